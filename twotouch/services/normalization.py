"""
Normalization service for two-touch conversion.

Maps input variants (ASCII lowercase, small kana, full-width Latin, digits and
punctuation, the long-vowel mark) onto the canonical characters used as code
table keys. Applied on the encoding side only.
"""
from __future__ import annotations

from twotouch.services.tables import CodeTables


class NormalizationService:
    """Pure character normalization over the shared tables."""

    def __init__(self, tables: CodeTables):
        self._normalization_map = tables.normalization_map

    def norm(self, char: str) -> str:
        """Return the canonical lookup key for one character.

        ASCII letters are uppercased first, then the variant table is applied.
        Characters without a variant are returned unchanged.
        """
        if char.isascii() and char.isalpha():
            char = char.upper()
        return self._normalization_map.get(char, char)

    def apply(self, text: str) -> str:
        """Normalize every character of text."""
        return "".join(self.norm(char) for char in text)
