"""
nlg/fuzzy_count.py

Coarse, human-readable quantity labels ("a few", "several") for counts.
"""

from __future__ import annotations

from typing import Tuple

from morphology.errors import check_count

# (upper bound inclusive, label), ascending
FUZZY_THRESHOLDS: Tuple[Tuple[int, str], ...] = (
    (0, "no"),
    (1, "one"),
    (3, "a couple of"),
    (7, "a few"),
    (9, "several"),
)
FUZZY_MANY = "many"


def classify_fuzzy_count(count: int) -> str:
    """
    Map a non-negative count to its fuzzy label.

        0 -> "no", 1 -> "one", 2-3 -> "a couple of",
        4-7 -> "a few", 8-9 -> "several", 10+ -> "many"
    """
    check_count(count)
    for upper, label in FUZZY_THRESHOLDS:
        if count <= upper:
            return label
    return FUZZY_MANY


__all__ = ["FUZZY_THRESHOLDS", "FUZZY_MANY", "classify_fuzzy_count"]
