"""
Decoding service for two-touch conversion.

Splits a digit string into fixed-width chunks and maps each chunk back to a
character. Voiced and semi-voiced kana come out as the base kana followed by
a separate mark (2104 -> か゛); they are not recombined.
"""
from __future__ import annotations

from twotouch.services.tables import CodeTables
from twotouch.types import ParseError, TwoTouchConfig


class DecodingService:
    """Two-touch codes -> text."""

    def __init__(self, config: TwoTouchConfig, tables: CodeTables):
        self._config = config
        self._inverse_code_map = tables.inverse_code_map

    def decode(self, code: str) -> str:
        width = self._config.code_width

        if not code or len(code) % width != 0:
            raise ParseError(f"length must be a non-zero multiple of {width}", text=code)
        if not self._config.digits_pattern.fullmatch(code):
            raise ParseError("only ASCII digits are allowed", text=code)

        chars = []
        for position in range(0, len(code), width):
            chunk = code[position : position + width]
            char = self._inverse_code_map.get(chunk)
            if char is None:
                raise ParseError(f"unknown code {chunk}", text=code, position=position)
            chars.append(char)

        return "".join(chars)
