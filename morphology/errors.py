"""
morphology/errors.py

Base exceptions shared by the morphology engine and the template layer.
"""

from __future__ import annotations

from typing import Any


class InflectError(ValueError):
    """Base exception for inflection problems."""


class InvalidCount(InflectError):
    """Raised when a count is negative or not an integer."""

    def __init__(self, count: Any) -> None:
        self.count = count
        super().__init__(f"Count must be a non-negative integer, got {count!r}")


def check_count(count: Any) -> int:
    """Return ``count`` if it is a usable item count, otherwise raise InvalidCount."""
    if isinstance(count, bool) or not isinstance(count, int) or count < 0:
        raise InvalidCount(count)
    return count


__all__ = ["InflectError", "InvalidCount", "check_count"]
