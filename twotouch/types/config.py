"""
Configuration for two-touch conversion.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class TwoTouchConfig:
    """Immutable converter configuration."""

    # Width of one decoder chunk
    code_width: int

    # ASCII digits only; str.isdigit() would also accept "１" and "٣"
    digits_pattern: re.Pattern[str]

    phrase_shortcuts_enabled: bool

    # None means unbounded
    max_input_length: int | None

    @classmethod
    def create_default(cls) -> TwoTouchConfig:
        """Factory method to create the default configuration."""
        return cls(
            code_width=2,
            digits_pattern=re.compile(r"[0-9]+"),
            phrase_shortcuts_enabled=True,
            max_input_length=None,
        )

    def with_phrase_shortcuts(self, enabled: bool) -> TwoTouchConfig:
        """Immutable update for phrase shortcut lookup."""
        return replace(self, phrase_shortcuts_enabled=enabled)

    def with_max_input_length(self, max_input_length: int | None) -> TwoTouchConfig:
        """Immutable update for the input length limit."""
        if max_input_length is not None and max_input_length < 1:
            raise ValueError("max_input_length must be >= 1")
        return replace(self, max_input_length=max_input_length)
