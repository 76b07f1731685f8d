"""
Two-Touch Input Conversion Module

This module converts between Japanese text and the numeric "two-touch input"
encoding used on pagers, where every character is typed as two digits.

## Overview

The core functionality is provided by the `TwoTouchConverter` class:

1. **Table Building**: Assembles the code, inverse code, normalization and
   phrase tables once, checking them for duplicate codes and dangling entries
2. **Normalization**: Folds ASCII case, small kana, full-width characters and
   the long-vowel mark onto canonical table keys
3. **Encoding**: Produces phrase shortcuts plus the literal encoding
4. **Decoding**: Maps two-digit chunks back to characters

## Architecture

- **TableBuilderService**: Immutable table construction and validation
- **NormalizationService**: Variant -> canonical character mapping
- **EncodingService**: Text -> candidate codes
- **DecodingService**: Codes -> text
- **TwoTouchConverter**: Facade wiring the services together

All tables are exposed through `MappingProxyType`; nothing is mutated after
construction, so one converter can be shared freely between threads.

## Usage Examples

```python
converter = TwoTouchConverter()

converter.encode("ごくろうさん")
# Returns: ["5963", "25042395133103"]  (phrase shortcut first, literal last)

converter.encode("ご苦労さん")
# Returns: ["5963"]  (kanji spelling has no literal encoding)

converter.decode("81225223")
# Returns: "やきにく"

converter.decode("2104")
# Returns: "か゛"  (marks are not recombined)

result = converter.try_encode("筋肉")
# Returns: ConversionResult(success=False, error_message="no two-touch code for '筋' ...")
```

## Error Handling

Every conversion failure raises `ParseError`:
- empty input
- a character without a code (and no phrase shortcut to fall back on)
- decode input of odd length or containing anything but ASCII digits
- an unknown two-digit chunk

`try_encode`/`try_decode` and the batch methods return `ConversionResult`
instead of raising.
"""
from __future__ import annotations

from functools import cache

from twotouch.log import logger
from twotouch.services import (
    CodeTables,
    ConversionResult,
    DecodingService,
    EncodingService,
    NormalizationService,
    ParseError,
    TableBuilderService,
    TableInfo,
    TwoTouchConfig,
)


class TwoTouchConverter:
    """Bidirectional two-touch input converter."""

    def __init__(self, config: TwoTouchConfig | None = None):
        self._config = config or TwoTouchConfig.create_default()
        self._tables = TableBuilderService(self._config).build()
        self._normalizer = NormalizationService(self._tables)
        self._encoder = EncodingService(self._config, self._tables, self._normalizer)
        self._decoder = DecodingService(self._config, self._tables)

    @property
    def config(self) -> TwoTouchConfig:
        return self._config

    @property
    def tables(self) -> CodeTables:
        """Read-only tables."""
        return self._tables

    def get_table_info(self) -> TableInfo:
        return self._tables.info()

    # Public API methods
    def convert_to_two_touch_string(self, text: str) -> list[str]:
        """
        Main API method: encode text into two-touch candidates.

        Phrase shortcuts come first in their conventional order, the literal
        encoding last. Raises ParseError when nothing can be produced.
        """
        return self._encoder.encode(text)

    def convert_from_two_touch_string(self, code: str) -> str:
        """Main API method: decode a two-touch digit string. Raises ParseError."""
        return self._decoder.decode(code)

    encode = convert_to_two_touch_string
    decode = convert_from_two_touch_string

    def encode_char(self, char: str) -> str:
        return self._encoder.encode_char(char)

    def normalize(self, text: str) -> str:
        """Canonical form of text as seen by the encoder."""
        return self._normalizer.apply(text)

    def try_encode(self, text: str) -> ConversionResult:
        try:
            return ConversionResult.success_with_codes(self._encoder.encode(text))
        except ParseError as e:
            logger.debug("encode failed: %s", e)
            return ConversionResult.failure(e)

    def try_decode(self, code: str) -> ConversionResult:
        try:
            return ConversionResult.success_with_text(self._decoder.decode(code))
        except ParseError as e:
            logger.debug("decode failed: %s", e)
            return ConversionResult.failure(e)

    def encode_batch(self, texts: list[str]) -> list[ConversionResult]:
        """Encode many inputs; the output preserves input order."""
        return [self.try_encode(text) for text in texts]

    def decode_batch(self, codes: list[str]) -> list[ConversionResult]:
        """Decode many inputs; the output preserves input order."""
        return [self.try_decode(code) for code in codes]


@cache
def get_default_converter() -> TwoTouchConverter:
    """Process-wide converter with the default configuration, built on first use."""
    return TwoTouchConverter()


def encode(text: str) -> list[str]:
    return get_default_converter().encode(text)


def decode(code: str) -> str:
    return get_default_converter().decode(code)
