"""
Result types for two-touch conversion.

This module contains result classes that provide Either-like error handling
and immutable data structures for the non-raising and batch APIs.
"""
from __future__ import annotations

from dataclasses import dataclass

from twotouch.types.errors import ParseError


@dataclass(frozen=True)
class ConversionResult:
    """Result of a conversion - Either-like structure."""

    success: bool
    result: str | tuple[str, ...]
    error_message: str | None = None
    error: ParseError | None = None

    @classmethod
    def success_with_codes(cls, codes: list[str] | tuple[str, ...]) -> ConversionResult:
        return cls(success=True, result=tuple(codes), error_message=None)

    @classmethod
    def success_with_text(cls, text: str) -> ConversionResult:
        return cls(success=True, result=text, error_message=None)

    @classmethod
    def failure(cls, error: ParseError) -> ConversionResult:
        return cls(success=False, result="", error_message=str(error), error=error)

    def map(self, f) -> ConversionResult:
        """Functor map operation over a successful result."""
        if self.success:
            try:
                value = f(self.result)
            except ParseError as e:
                return ConversionResult.failure(e)
            if isinstance(value, str):
                return ConversionResult.success_with_text(value)
            return ConversionResult.success_with_codes(value)
        return self

    def flat_map(self, f) -> ConversionResult:
        """Monadic flatMap operation - f returns a ConversionResult."""
        if self.success:
            return f(self.result)
        return self

    def unwrap(self) -> str | tuple[str, ...]:
        """Return the value, re-raising the stored ParseError on failure."""
        if self.success:
            return self.result
        raise self.error if self.error is not None else ParseError(self.error_message or "parse error")


@dataclass(frozen=True)
class TableInfo:
    """Immutable table size information structure."""

    code_count: int
    composite_code_count: int
    inverse_code_count: int
    normalization_count: int
    phrase_count: int
