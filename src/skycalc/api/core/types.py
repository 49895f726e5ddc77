"""
Shared Value Types

Small value types used across the API.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar


__all__ = [
    "ParseResult",
]


T = TypeVar("T")


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """
    Outcome of a parse-with-fallback operation.

    Text parsers in SkyCalc never raise on malformed input. They return a
    definite value, substituting the documented default when the input
    cannot be used, and describe the substitution in ``diagnostic`` so the
    caller can log or test for it.

    Attributes:
        value: Parsed value, or the default when parsing failed
        diagnostic: Why the default was used, or None when the input parsed
    """

    value: T
    diagnostic: str | None = None

    @property
    def used_default(self) -> bool:
        """True when the value is a substituted default."""
        return self.diagnostic is not None

    def __str__(self) -> str:
        if self.diagnostic is None:
            return str(self.value)
        return f"{self.value} ({self.diagnostic})"
