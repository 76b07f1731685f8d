"""
Error types for two-touch conversion.
"""
from __future__ import annotations


class ParseError(ValueError):
    """Input cannot be converted to or from two-touch codes.

    The optional attributes are diagnostic only:
    - text: the offending input
    - position: index of the failing character (encode) or chunk start (decode)
    - reason: short human-readable cause
    """

    def __init__(self, reason: str = "parse error", text: str | None = None, position: int | None = None):
        self.reason = reason
        self.text = text
        self.position = position
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.text is None:
            return self.reason
        if self.position is None:
            return f"{self.reason}: {self.text!r}"
        return f"{self.reason}: {self.text!r} at position {self.position}"


class TableConsistencyError(RuntimeError):
    """Static tables violate a build-time invariant (duplicate code, dangling target, ...)."""
