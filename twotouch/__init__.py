"""
twotouch: Pager Two-Touch Input Conversion Library

Converts between Japanese text and the two-digit-per-character numeric
encoding used on pagers, including phrase shortcuts and full-width/small-kana
normalization.
"""

__version__ = "0.1.0"

__all__ = [
    "ParseError",
    "TwoTouchConverter",
    "decode",
    "encode",
    "get_default_converter",
]

_CONVERTER_EXPORTS = ("TwoTouchConverter", "decode", "encode", "get_default_converter")


def __getattr__(name):
    """Lazy import to avoid loading the services on package import."""
    if name in _CONVERTER_EXPORTS:
        from twotouch import converter
        return getattr(converter, name)
    if name == "ParseError":
        from twotouch.types import ParseError
        return ParseError
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
