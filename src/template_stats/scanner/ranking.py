"""Ranking of frequency tables into top-N lists."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from template_stats.model import AggregatedOutput, RankedEntry, StatsResult


def rank_counts(counts: Mapping[str, int], limit: int = 0) -> tuple[RankedEntry, ...]:
    """Return labels sorted by descending count, truncated to *limit* entries.

    ``limit == 0`` disables truncation. Labels with equal counts keep the
    order in which they were first counted.
    """
    ranked = sorted(counts.items(), key=lambda item: -item[1])
    if limit > 0:
        ranked = ranked[:limit]
    return tuple(RankedEntry(name=name, count=count) for name, count in ranked)


def rank_dimensions(result: StatsResult, dimensions: Iterable[str], limit: int = 0) -> AggregatedOutput:
    """Rank each requested dimension of *result*; others stay absent."""
    ranked = {name: rank_counts(result.counts_for(name), limit) for name in dimensions}
    return AggregatedOutput(**ranked)
