"""
Table construction service for two-touch conversion.

This module assembles the literal data in `twotouch.two_touch_data` into the
four immutable lookup tables shared by the encoder and decoder, and enforces
the invariants a hand-written table is prone to break (duplicate codes,
normalization targets missing from the code table, malformed shortcuts).
"""
from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from types import MappingProxyType

import jaconv

from twotouch.log import logger
from twotouch.two_touch_data import (
    COMBINING_MARKS,
    FULL_WIDTH_PUNCTUATION,
    KANA_CODES,
    LATIN_CODES,
    LONG_VOWEL_MARKS,
    PHRASE_SHORTCUTS,
    SEMI_VOICED_KANA,
    SMALL_KANA,
    VOICED_KANA,
)
from twotouch.types import TableConsistencyError, TableInfo, TwoTouchConfig


@dataclass(frozen=True)
class CodeTables:
    """Immutable container for all two-touch lookup tables."""

    # Canonical character -> code (2 digits, or 4 for voiced/semi-voiced kana)
    code_map: MappingProxyType[str, str]

    # 2-digit code -> canonical character
    inverse_code_map: MappingProxyType[str, str]

    # Variant character -> canonical character
    normalization_map: MappingProxyType[str, str]

    # Exact phrase -> shortcut codes in preference order
    phrase_map: MappingProxyType[str, tuple[str, ...]]

    def info(self) -> TableInfo:
        return TableInfo(
            code_count=len(self.code_map),
            composite_code_count=len(self.code_map) - len(self.inverse_code_map),
            inverse_code_count=len(self.inverse_code_map),
            normalization_count=len(self.normalization_map),
            phrase_count=len(self.phrase_map),
        )


class TableBuilderService:
    """Service to build the immutable two-touch tables."""

    def __init__(self, config: TwoTouchConfig):
        self._config = config

    def build(self) -> CodeTables:
        """Build and validate all tables. Raises TableConsistencyError on a broken table."""
        base_codes = self._build_base_codes()
        inverse_code_map = self._build_inverse_code_map(base_codes)

        code_map = dict(base_codes)
        code_map.update(self._build_composite_codes(base_codes))

        normalization_map = self._build_normalization_map(code_map)
        phrase_map = self._build_phrase_map()

        tables = CodeTables(
            code_map=MappingProxyType(code_map),
            inverse_code_map=MappingProxyType(inverse_code_map),
            normalization_map=MappingProxyType(normalization_map),
            phrase_map=MappingProxyType(phrase_map),
        )
        logger.debug("two-touch tables built: %s", tables.info())
        return tables

    def _build_base_codes(self) -> dict[str, str]:
        """Insert every single-character code, rejecting duplicates on either side."""
        width = self._config.code_width
        base_codes: dict[str, str] = {}
        seen_codes: dict[str, str] = {}

        for char, code in KANA_CODES + LATIN_CODES:
            if len(code) != width or not self._config.digits_pattern.fullmatch(code):
                raise TableConsistencyError(f"code {code!r} for {char!r} is not {width} ASCII digits")
            if char in base_codes:
                raise TableConsistencyError(f"character {char!r} assigned twice ({base_codes[char]}, {code})")
            if code in seen_codes:
                raise TableConsistencyError(f"code {code} shared by {seen_codes[code]!r} and {char!r}")
            base_codes[char] = code
            seen_codes[code] = char

        return base_codes

    def _build_inverse_code_map(self, base_codes: dict[str, str]) -> dict[str, str]:
        inverse_code_map = {code: char for char, code in base_codes.items()}
        if len(inverse_code_map) != len(base_codes):
            raise TableConsistencyError("inverse code table lost entries")
        return inverse_code_map

    def _build_composite_codes(self, base_codes: dict[str, str]) -> dict[str, str]:
        """Derive base+mark codes for voiced and semi-voiced kana from their NFD form."""
        composite_codes = {}

        for char in VOICED_KANA + SEMI_VOICED_KANA:
            if char in base_codes:
                raise TableConsistencyError(f"composite kana {char!r} already has a base code")

            decomposed = unicodedata.normalize("NFD", char)
            if len(decomposed) != 2:
                raise TableConsistencyError(f"{char!r} does not decompose into base and mark")

            base, combining = decomposed
            mark = COMBINING_MARKS.get(combining)
            if mark is None or base not in base_codes or mark not in base_codes:
                raise TableConsistencyError(f"{char!r} decomposes into characters missing from the table")

            composite_codes[char] = base_codes[base] + base_codes[mark]

        return composite_codes

    def _build_normalization_map(self, code_map: dict[str, str]) -> dict[str, str]:
        normalization_map = {}
        normalization_map.update(SMALL_KANA)
        normalization_map.update(self._build_full_width_variants(code_map))
        normalization_map.update(FULL_WIDTH_PUNCTUATION)
        normalization_map.update(LONG_VOWEL_MARKS)

        for variant, canonical in normalization_map.items():
            if variant in code_map:
                raise TableConsistencyError(f"variant {variant!r} is itself a canonical character")
            if canonical not in code_map:
                raise TableConsistencyError(f"variant {variant!r} normalizes to unknown {canonical!r}")

        return normalization_map

    def _build_full_width_variants(self, code_map: dict[str, str]) -> dict[str, str]:
        """Full-width Latin letters (both cases) and digits for every ASCII letter/digit in the table."""
        variants = {}

        for char in code_map:
            if not (char.isascii() and char.isalnum()):
                continue
            forms = {jaconv.h2z(char, kana=False, ascii=True, digit=True)}
            if char.isalpha():
                forms.add(jaconv.h2z(char.lower(), kana=False, ascii=True, digit=True))
            for form in forms:
                if form.isascii():
                    raise TableConsistencyError(f"no full-width form for {char!r}")
                variants[form] = char

        return variants

    def _build_phrase_map(self) -> dict[str, tuple[str, ...]]:
        phrase_map: dict[str, tuple[str, ...]] = {}

        for spellings, shortcuts in PHRASE_SHORTCUTS:
            if not shortcuts:
                raise TableConsistencyError(f"phrase {spellings[0]!r} has no shortcut")
            for shortcut in shortcuts:
                if not self._config.digits_pattern.fullmatch(shortcut):
                    raise TableConsistencyError(f"shortcut {shortcut!r} is not an ASCII digit string")

            for phrase in spellings:
                if not phrase:
                    raise TableConsistencyError("empty phrase in shortcut table")
                if phrase in phrase_map:
                    raise TableConsistencyError(f"phrase {phrase!r} listed twice")
                phrase_map[phrase] = tuple(shortcuts)

        return phrase_map
