# tests/test_fuzzy_count.py
"""Fuzzy quantity labels and their exact boundaries."""

from __future__ import annotations

import pytest

from nlg.errors import InvalidCount
from nlg.fuzzy_count import classify_fuzzy_count


@pytest.mark.parametrize(
    "count, label",
    [
        (0, "no"),
        (1, "one"),
        (2, "a couple of"),
        (3, "a couple of"),
        (4, "a few"),
        (7, "a few"),
        (8, "several"),
        (9, "several"),
        (10, "many"),
        (100, "many"),
        (10**9, "many"),
    ],
)
def test_fuzzy_boundaries(count: int, label: str) -> None:
    assert classify_fuzzy_count(count) == label


@pytest.mark.parametrize("bad", [-1, -100, 2.5, "3", None, True])
def test_fuzzy_rejects_invalid_counts(bad) -> None:
    with pytest.raises(InvalidCount) as excinfo:
        classify_fuzzy_count(bad)
    assert excinfo.value.count == bad


def test_invalid_count_is_a_value_error() -> None:
    with pytest.raises(ValueError, match="non-negative integer"):
        classify_fuzzy_count(-1)
