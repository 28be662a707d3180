r"""
morphology/rules.py

Suffix rewrite rules used by the English morphology tables.

A rule is a pair of:

- a *matcher*: a case-insensitive pattern anchored at the very end of the
  word with ``\Z`` (``$`` would also match before a trailing newline).
  It may contain one capturing group, the part of the matched suffix that
  is kept verbatim (so the caller's casing survives), and
- a *replacement*: the text appended after the kept part.

Applying a rule to ``word`` yields::

    word[:match.start()] + kept + replacement

Tables are plain tuples of rules. Order matters: the first rule that matches
wins, there is no ranking by specificity.

    >>> rule = Rule(r"([^aeiouy]|qu)y\Z", "ies")
    >>> rule.apply("City")
    'Cities'
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, Optional, Pattern, Tuple

__all__ = ["Rule", "RuleTable", "keep", "irregular_rules"]


@dataclass(frozen=True)
class Rule:
    """One ordered (matcher, replacement) entry of a rule table."""

    pattern: str
    replacement: str = ""
    _regex: Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        regex = re.compile(self.pattern, re.IGNORECASE)
        if regex.groups > 1:
            raise ValueError(f"Rule pattern {self.pattern!r} has more than one group")
        object.__setattr__(self, "_regex", regex)

    def match(self, word: str) -> Optional[Tuple[str, str]]:
        """
        Return ``(prefix, kept)`` if the rule applies to ``word``.

        ``prefix`` is the untouched start of the word, ``kept`` the captured
        part of the suffix (empty when the pattern has no group).
        """
        m = self._regex.search(word)
        if m is None:
            return None
        kept = (m.group(1) or "") if self._regex.groups else ""
        return word[: m.start()], kept

    def build(self, prefix: str, kept: str) -> str:
        return prefix + kept + self.replacement

    def apply(self, word: str) -> Optional[str]:
        matched = self.match(word)
        if matched is None:
            return None
        return self.build(*matched)


class RuleTable:
    """
    Immutable ordered sequence of rules with first-match-wins lookup.
    """

    __slots__ = ("name", "_rules")

    def __init__(self, name: str, rules: Iterable[Rule]) -> None:
        self.name = name
        self._rules: Tuple[Rule, ...] = tuple(rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self):
        return iter(self._rules)

    def __repr__(self) -> str:
        return f"RuleTable({self.name!r}, {len(self._rules)} rules)"

    def rewrite(self, word: str) -> Tuple[str, Optional[Rule]]:
        """
        Rewrite ``word`` with the first matching rule.

        Returns the new word and the rule that produced it. Words matched by
        no rule come back unchanged, paired with None.
        """
        for rule in self._rules:
            matched = rule.match(word)
            if matched is not None:
                return rule.build(*matched), rule
        return word, None

    def apply(self, word: str) -> str:
        return self.rewrite(word)[0]


# ---------------------------------------------------------------------------
# Table-building helpers
# ---------------------------------------------------------------------------


def keep(pattern: str) -> Rule:
    """
    A rule that matches ``pattern`` and leaves the word as it is.

    The whole pattern is wrapped in the kept group, so it must not contain a
    group of its own.
    """
    return Rule(rf"({pattern})\Z", "")


def irregular_rules(
    pairs: Iterable[Tuple[str, str]], *, to_plural: bool
) -> Tuple[Rule, ...]:
    """
    Build whole-word rules from ``(singular, plural)`` pairs.

    For the plural direction each pair yields ``singular -> plural`` and
    ``plural -> plural``; the singular direction is the mirror image. The
    first letter is kept from the input when both forms share it, so
    ``Person`` becomes ``People``. Only that letter carries the caller's
    casing; the rest comes from the table as written, so ``PERSON`` becomes
    ``People``.
    """
    rules = []
    for singular, plural in pairs:
        source, target = (singular, plural) if to_plural else (plural, singular)
        if source[0].lower() == target[0].lower():
            head, rest = re.escape(source[0]), re.escape(source[1:])
            rules.append(Rule(rf"^({head}){rest}\Z", target[1:]))
        else:
            rules.append(Rule(rf"^{re.escape(source)}\Z", target))
        rules.append(keep(f"^{re.escape(target)}"))
    return tuple(rules)
