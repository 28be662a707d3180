"""
morphology/english.py

English noun number and verb agreement.

This module is **stateless**: every function reads only the immutable tables
in ``morphology.nouns`` and ``morphology.verbs``, so it is safe to call from
any number of threads without locking.

It is responsible for:

- Noun number (``singularize`` / ``pluralize`` / ``inflect``)
- Number predicates (``is_singular`` / ``is_plural`` / ``is_uncountable``)
- Present-tense verb agreement (``conjugate_verb``)

Typical usage:

    from morphology import english

    english.inflect("error", 3)            # "errors"
    english.conjugate_verb("tries", 2)     # "try"

Words that no rule recognises are returned unchanged; that is the normal
outcome for unknown vocabulary, not an error.
"""

from __future__ import annotations

from typing import Tuple

from morphology import nouns, verbs
from morphology.errors import check_count
from morphology.rules import RuleTable
from utils.logging_setup import get_logger

log = get_logger(__name__)

__all__ = [
    "is_uncountable",
    "singularize",
    "pluralize",
    "inflect",
    "is_singular",
    "is_plural",
    "singularize_verb",
    "pluralize_verb",
    "conjugate_verb",
]


def _split_trailing_space(word: str) -> Tuple[str, str]:
    stem = word.rstrip()
    return stem, word[len(stem) :]


def _rewrite(table: RuleTable, word: str) -> str:
    """Rewrite the word itself; trailing whitespace is carried over as is."""
    stem, tail = _split_trailing_space(word)
    result, rule = table.rewrite(stem)
    if rule is not None:
        log.debug("rule_applied", table=table.name, word=stem, pattern=rule.pattern, result=result)
    return result + tail


# ---------------------------------------------------------------------------
# 1. Nouns
# ---------------------------------------------------------------------------


def is_uncountable(word: str) -> bool:
    """
    True if ``word`` has the same singular and plural form.

    The lookup is case-sensitive: ``"sheep"`` is uncountable, ``"Sheep"``
    is not.
    """
    return word in nouns.UNCOUNTABLE


def singularize(word: str) -> str:
    """
    Inflect a plural noun to its singular form.

        singularize("errors")  -> "error"
        singularize("series")  -> "series"
    """
    if not word.strip() or is_uncountable(word.rstrip()):
        return word
    return _rewrite(nouns.SINGULARS, word)


def pluralize(word: str) -> str:
    """
    Inflect a singular noun to its plural form.

        pluralize("error")  -> "errors"
    """
    if not word.strip() or is_uncountable(word.rstrip()):
        return word
    return _rewrite(nouns.PLURALS, word)


def inflect(word: str, count: int) -> str:
    """
    Pick the noun form that goes with ``count`` items.

    Only a count of exactly one is singular; zero reads as plural
    ("0 errors").
    """
    if check_count(count) == 1:
        return singularize(word)
    return pluralize(word)


def is_singular(word: str) -> bool:
    if not word.strip():
        return False
    return singularize(word) == word


def is_plural(word: str) -> bool:
    if not word.strip():
        return False
    return pluralize(word) == word


# ---------------------------------------------------------------------------
# 2. Verbs
# ---------------------------------------------------------------------------


def singularize_verb(word: str) -> str:
    """Form agreeing with a singular subject: ``try`` -> ``tries``."""
    if not word.strip():
        return word
    return _rewrite(verbs.SINGULARS, word)


def pluralize_verb(word: str) -> str:
    """Form agreeing with a plural subject: ``tries`` -> ``try``."""
    if not word.strip():
        return word
    return _rewrite(verbs.PLURALS, word)


def conjugate_verb(word: str, count: int) -> str:
    """
    Make ``word`` agree with a subject of ``count`` items.

        conjugate_verb("try", 1)    -> "tries"
        conjugate_verb("tries", 2)  -> "try"
    """
    if check_count(count) == 1:
        return singularize_verb(word)
    return pluralize_verb(word)
