"""
nlg/join.py

Join a list of words into a phrase: "one, two, and three".
"""

from __future__ import annotations

import re
from typing import Optional

_REPEATED_SPACE_RE = re.compile(r"(\s)\s+")
_SPACE_BEFORE_COMMA_RE = re.compile(r"\s*(,)")


def join_words(
    *words: str,
    separator: str = ", ",
    conjunctive: str = "and",
    final_separator: Optional[str] = None,
) -> str:
    """
    Join ``words`` with ``separator`` and put ``conjunctive`` before the last.

        join_words("one", "two", "three")                       -> "one, two, and three"
        join_words("one", "two", "three", final_separator="")  -> "one, two and three"
        join_words("one", "two", conjunctive="or")              -> "one or two"

    Runs of whitespace collapse to their first character, so an empty
    ``conjunctive`` does not leave a double space.
    """
    if not words:
        return ""

    if len(words) <= 2:
        return _REPEATED_SPACE_RE.sub(r"\1", f" {conjunctive} ".join(words))

    oxford = separator if final_separator is None else final_separator
    joined = separator.join(words[:-1]) + f"{oxford} {conjunctive} " + words[-1]
    joined = _REPEATED_SPACE_RE.sub(r"\1", joined)
    return _SPACE_BEFORE_COMMA_RE.sub(r"\1", joined)


__all__ = ["join_words"]
