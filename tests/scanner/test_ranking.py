"""Tests for ranking frequency tables."""

from __future__ import annotations

from collections import Counter

import pytest

from template_stats.model import RankedEntry, StatsResult
from template_stats.scanner.ranking import rank_counts, rank_dimensions

COUNTS = Counter({"xss": 5, "sqli": 9, "rce": 1, "lfi": 3})


def test_unlimited_returns_all_sorted_descending() -> None:
    ranked = rank_counts(COUNTS, 0)

    assert [entry.name for entry in ranked] == ["sqli", "xss", "lfi", "rce"]
    assert sum(entry.count for entry in ranked) == sum(COUNTS.values())


@pytest.mark.parametrize("limit", [1, 2, 4, 10])
def test_limit_returns_prefix_of_full_sort(limit: int) -> None:
    full = rank_counts(COUNTS, 0)
    ranked = rank_counts(COUNTS, limit)

    assert len(ranked) == min(limit, len(COUNTS))
    assert ranked == full[: len(ranked)]


def test_empty_table_ranks_to_empty_tuple() -> None:
    assert rank_counts(Counter(), 3) == ()


def test_ties_keep_first_seen_order() -> None:
    counts = Counter()
    for label in ("b", "a", "c"):
        counts[label] += 1

    assert [entry.name for entry in rank_counts(counts)] == ["b", "a", "c"]


def test_rank_dimensions_only_fills_requested() -> None:
    result = StatsResult()
    result.tags.update({"xss": 2})
    result.severity.update({"high": 1})

    output = rank_dimensions(result, ("tags",), 0)

    assert output.tags == (RankedEntry("xss", 2),)
    assert output.severity is None
    assert output.authors is None
