"""
morphology/nouns.py

English noun tables.

- ``PLURALS``: singular -> plural rewrites.
- ``SINGULARS``: plural -> singular rewrites.
- ``UNCOUNTABLE``: words whose singular and plural forms are identical.

Both tables are scanned top to bottom and the first match wins, so whole-word
irregulars come first, then closed word lists, then the broad suffix rules.
Each table also carries "keep" rules that recognise a form which is already
in the target number, so applying a table twice gives the same result as
applying it once.
"""

from __future__ import annotations

from typing import FrozenSet, Tuple

from .rules import Rule, RuleTable, irregular_rules, keep

__all__ = ["IRREGULARS", "UNCOUNTABLE", "PLURALS", "SINGULARS"]

# (singular, plural)
IRREGULARS: Tuple[Tuple[str, str], ...] = (
    ("person", "people"),
    ("child", "children"),
    ("ox", "oxen"),
    ("foot", "feet"),
    ("tooth", "teeth"),
    ("goose", "geese"),
    ("mouse", "mice"),
    ("louse", "lice"),
    ("die", "dice"),
    ("quiz", "quizzes"),
    ("genus", "genera"),
    ("corpus", "corpora"),
    ("criterion", "criteria"),
    ("phenomenon", "phenomena"),
)

UNCOUNTABLE: FrozenSet[str] = frozenset(
    {
        "advice",
        "aircraft",
        "bison",
        "butter",
        "cattle",
        "chaos",
        "chassis",
        "clothing",
        "corps",
        "deer",
        "economics",
        "equipment",
        "evidence",
        "feedback",
        "fish",
        "furniture",
        "gold",
        "homework",
        "information",
        "jeans",
        "knowledge",
        "luggage",
        "mathematics",
        "money",
        "moose",
        "music",
        "news",
        "offspring",
        "physics",
        "police",
        "progress",
        "rice",
        "salmon",
        "scissors",
        "series",
        "sheep",
        "shrimp",
        "software",
        "species",
        "swine",
        "traffic",
        "trousers",
        "trout",
        "tuna",
        "weather",
        "wheat",
    }
)

# "man" compounds that take "men"; a bare "-man" suffix would also hit "human".
_MAN = r"(?:^|wo|police|fire|sales|chair|fisher|spokes|fore|gentle|country|sea)m"

_US_TO_I = r"octop|radi|cact|fung|alumn|stimul|syllab|nucle|bacill|loc"
_UM_TO_A = r"dat|medi|bacteri|curricul|memorand|strat|millenni|symposi"
_US_ES = (
    r"alias|status|campus|virus|atlas|bonus|canvas|census|chorus|circus"
    r"|genius|iris|lens|plus|walrus|gas|focus|prospectus|apparatus"
)
_U_PLURAL = r"(?:men|em|gn|gur|haik|tut|zul|tof)u"
_O_TO_OES = r"buffal|tomat|potat|her|ech|torped|vet|volcan|mosquit"
_FE_TO_VES = r"kni|wi|\bli"
_F_TO_VES = r"cal|hal|el|wol|shel|sel|thie|lea|loa|shea|scar|dwar|whar"
_SIS_TO_SES = r"aly|diagno|progno|synop|the|cri|empha|oa|neuro|ellip"
_IE_PLURAL = (
    r"(?:^|[^eo])ache|niche|cliche|movie|cookie|zombie|calorie|prairie"
    r"|rookie|hippie|goalie|pixie|^[tpld]ie"
)

PLURALS = RuleTable(
    "noun plurals",
    (
        *irregular_rules(IRREGULARS, to_plural=True),
        Rule(rf"({_MAN})an\Z", "en"),
        keep(f"{_MAN}en"),
        keep(f"(?:{_US_TO_I})i"),
        Rule(rf"({_US_TO_I})us\Z", "i"),
        keep(f"(?:{_UM_TO_A})a"),
        Rule(rf"({_UM_TO_A})um\Z", "a"),
        Rule(r"(matr|append)ix\Z", "ices"),
        Rule(r"(vert|ind|cod)ex\Z", "ices"),
        Rule(r"^((?:omni)?bu)s\Z", "ses"),
        Rule(rf"({_US_ES})\Z", "es"),
        keep(f"{_U_PLURAL}s"),
        keep(r"[aeiou]us"),
        Rule(r"(us)\Z", "es"),
        Rule(rf"({_O_TO_OES})o\Z", "oes"),
        Rule(r"^(ax|test)is\Z", "es"),
        Rule(r"sis\Z", "ses"),
        Rule(rf"({_FE_TO_VES})fe\Z", "ves"),
        Rule(rf"({_F_TO_VES})f\Z", "ves"),
        Rule(r"([^aeiouy]|qu)y\Z", "ies"),
        Rule(r"(x|ch|ss|sh|zz|tz)\Z", "es"),
        keep("s"),
        Rule(r"\Z", "s"),
    ),
)

SINGULARS = RuleTable(
    "noun singulars",
    (
        *irregular_rules(IRREGULARS, to_plural=False),
        Rule(rf"({_MAN})en\Z", "an"),
        keep(f"{_MAN}an"),
        Rule(rf"({_US_TO_I})(?:us|i)\Z", "us"),
        Rule(rf"({_UM_TO_A})a\Z", "um"),
        Rule(r"(matr|append)ices\Z", "ix"),
        Rule(r"(vert|ind|cod)ices\Z", "ex"),
        Rule(r"^((?:omni)?bu)s(?:es)?\Z", "s"),
        Rule(rf"({_US_ES})(?:es)?\Z", ""),
        Rule(rf"({_U_PLURAL})s\Z", ""),
        Rule(r"([aeiou]u)s\Z", ""),
        Rule(rf"({_O_TO_OES})oes\Z", "o"),
        Rule(r"^(ax|test)(?:is|es)\Z", "is"),
        Rule(rf"({_SIS_TO_SES})ses\Z", "sis"),
        Rule(rf"({_FE_TO_VES})ves\Z", "fe"),
        Rule(rf"({_F_TO_VES})ves\Z", "f"),
        Rule(rf"({_IE_PLURAL})s\Z", ""),
        Rule(r"([^aeiouy]|qu)ies\Z", "y"),
        Rule(r"(x|ch|ss|sh|zz|tz)es\Z", ""),
        keep(r"^(?:th|h)?is|(?:s|t|tenn)is"),
        keep(r"ss|us|^(?:was|has|yes)"),
        Rule(r"s\Z", ""),
    ),
)
