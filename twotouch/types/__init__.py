"""
Types package for two-touch conversion.

This package contains result types, configuration classes, and error
types used throughout the converter.
"""

from twotouch.types.config import TwoTouchConfig
from twotouch.types.errors import ParseError, TableConsistencyError
from twotouch.types.results import ConversionResult, TableInfo

__all__ = [
    "ConversionResult",
    "ParseError",
    "TableConsistencyError",
    "TableInfo",
    "TwoTouchConfig",
]
