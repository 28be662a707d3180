"""
nlg/errors.py

Exceptions raised while resolving inflection templates.

Every error is fail-fast: one bad tag aborts the whole ``parse_template``
call, there is no partial result.
"""

from __future__ import annotations

from morphology.errors import InflectError, InvalidCount


class TemplateError(InflectError):
    """Base exception for problems with a ``{{...}}`` tag."""


class MalformedTag(TemplateError):
    """Raised when a tag cannot be split into kind, modifiers and payload."""

    def __init__(self, tag: str, reason: str) -> None:
        self.tag = tag
        self.reason = reason
        super().__init__(f"Malformed tag {tag!r}: {reason}")


class UnknownOption(TemplateError):
    """Raised when a tag carries a modifier its kind does not accept."""

    def __init__(self, option: str, kind: str) -> None:
        self.option = option
        self.kind = kind
        super().__init__(f"Unknown option '{option}' in {{{{{kind}:...}}}} tag")


__all__ = ["InflectError", "InvalidCount", "TemplateError", "MalformedTag", "UnknownOption"]
