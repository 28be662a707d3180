"""
morphology/verbs.py

English present-tense agreement tables.

Verb number runs opposite to noun number on the surface: the form that
agrees with a singular subject carries the "-s" ("it tries"), the form that
agrees with a plural subject is the bare one ("they try").

- ``SINGULARS``: bare form -> singular-subject form (try -> tries).
- ``PLURALS``: singular-subject form -> bare form (tries -> try).
"""

from __future__ import annotations

from typing import Tuple

from .rules import Rule, RuleTable, irregular_rules, keep

__all__ = ["IRREGULARS", "SINGULARS", "PLURALS"]

# (singular-subject form, plural-subject form)
IRREGULARS: Tuple[Tuple[str, str], ...] = (
    ("is", "are"),
    ("was", "were"),
    ("has", "have"),
    ("does", "do"),
    ("goes", "go"),
)

_O_TO_OES = r"ech|vet|torped"
_IE_VERB = r"(?:^|be|un)[tpld]ie|^vie"

SINGULARS = RuleTable(
    "verb singulars",
    (
        *irregular_rules(IRREGULARS, to_plural=False),
        Rule(rf"({_O_TO_OES})o\Z", "oes"),
        Rule(r"([^aeiouy]|qu)y\Z", "ies"),
        Rule(r"(x|ch|ss|sh|zz|tz)\Z", "es"),
        keep("s"),
        Rule(r"\Z", "s"),
    ),
)

PLURALS = RuleTable(
    "verb plurals",
    (
        *irregular_rules(IRREGULARS, to_plural=True),
        Rule(rf"({_O_TO_OES})oes\Z", "o"),
        Rule(rf"({_IE_VERB})s\Z", ""),
        Rule(r"([^aeiouy]|qu)ies\Z", "y"),
        Rule(r"(x|ch|ss|sh|zz|tz)es\Z", ""),
        keep("ss|us"),
        Rule(r"s\Z", ""),
    ),
)
