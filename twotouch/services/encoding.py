"""
Encoding service for two-touch conversion.

Turns text into one or more candidate numeric strings. A phrase that matches
the whole input contributes its conventional shortcuts first; the literal
character-by-character encoding, when every character resolves, comes last.
"""
from __future__ import annotations

from twotouch.services.normalization import NormalizationService
from twotouch.services.tables import CodeTables
from twotouch.types import ParseError, TwoTouchConfig


class EncodingService:
    """Text -> two-touch candidate codes."""

    def __init__(self, config: TwoTouchConfig, tables: CodeTables, normalizer: NormalizationService):
        self._config = config
        self._code_map = tables.code_map
        self._phrase_map = tables.phrase_map
        self._normalizer = normalizer

    def encode(self, text: str) -> list[str]:
        """
        Encode text to two-touch candidates.

        Returns shortcut codes for a matching phrase (stored order) followed by
        the full literal encoding. If a character has no code the literal
        encoding is abandoned: the shortcuts alone are returned when there are
        any, otherwise ParseError is raised.
        """
        if not text:
            raise ParseError("empty input", text=text)

        max_length = self._config.max_input_length
        if max_length is not None and len(text) > max_length:
            raise ParseError(f"input longer than {max_length} characters", text=text)

        candidates: list[str] = []
        if self._config.phrase_shortcuts_enabled:
            candidates.extend(self._phrase_map.get(text, ()))

        codes = []
        for position, char in enumerate(text):
            code = self._code_map.get(self._normalizer.norm(char))
            if code is None:
                # Shortcuts stand on their own even when the spelling isn't encodable
                if candidates:
                    return candidates
                raise ParseError(f"no two-touch code for {char!r}", text=text, position=position)
            codes.append(code)

        candidates.append("".join(codes))
        return candidates

    def encode_char(self, char: str) -> str:
        """Encode exactly one character, ignoring phrase shortcuts."""
        if len(char) != 1:
            raise ParseError("expected a single character", text=char)
        code = self._code_map.get(self._normalizer.norm(char))
        if code is None:
            raise ParseError(f"no two-touch code for {char!r}", text=char, position=0)
        return code
