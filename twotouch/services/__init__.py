"""
Services package for two-touch conversion.

This package contains the service classes used by the converter,
organized by responsibility.
"""

from twotouch.services.decoding import DecodingService
from twotouch.services.encoding import EncodingService
from twotouch.services.normalization import NormalizationService
from twotouch.services.tables import CodeTables, TableBuilderService
from twotouch.types import ConversionResult, ParseError, TableConsistencyError, TableInfo, TwoTouchConfig

__all__ = [
    # Data structures
    "CodeTables",
    # Types (re-exported for convenience)
    "ConversionResult",
    "ParseError",
    "TableConsistencyError",
    "TableInfo",
    "TwoTouchConfig",
    # Services
    "DecodingService",
    "EncodingService",
    "NormalizationService",
    "TableBuilderService",
]
