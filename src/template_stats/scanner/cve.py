"""CVE-aware ordering and truncation of changelog listings."""

from __future__ import annotations

from collections.abc import Sequence
from functools import cmp_to_key

from template_stats.constants.templates import CVE_MIN_SEGMENTS, CVE_SEGMENT_SEPARATOR
from template_stats.model import ListingEntry


def parse_cve_id(cve_id: str) -> tuple[int, int] | None:
    """Parse ``CVE-<year>-<sequence>`` into integers, or ``None`` when malformed."""
    parts = cve_id.split(CVE_SEGMENT_SEPARATOR)
    if len(parts) < CVE_MIN_SEGMENTS:
        return None
    year, sequence = parts[1], parts[2]
    if not (year.isdecimal() and sequence.isdecimal()):
        return None
    return int(year), int(sequence)


def compare_cve_ids(first: str, second: str) -> int:
    """Order CVE ids newest first.

    Returns a negative number when *first* sorts before *second*. Ids that
    cannot both be parsed fall back to descending string comparison.
    """
    first_key = parse_cve_id(first)
    second_key = parse_cve_id(second)
    if first_key is None or second_key is None:
        return (first < second) - (first > second)
    return (first_key < second_key) - (first_key > second_key)


def sort_cve_entries(entries: Sequence[ListingEntry]) -> list[ListingEntry]:
    """Return CVE entries sorted by year then sequence, descending."""
    return sorted(entries, key=cmp_to_key(lambda a, b: compare_cve_ids(a.id, b.id)))


def truncate_listing(
    cve_entries: Sequence[ListingEntry],
    other_entries: Sequence[ListingEntry],
    top: int = 0,
) -> tuple[list[ListingEntry], list[ListingEntry]]:
    """Sort CVE entries and apply the shared top-N quota.

    CVE entries are served first; whatever quota remains is filled from
    *other_entries* in discovery order. ``top == 0`` disables truncation.
    """
    cves = sort_cve_entries(cve_entries)
    others = list(other_entries)
    if top <= 0:
        return cves, others

    cves = cves[:top]
    remaining = top - len(cves)
    return cves, others[: max(remaining, 0)]
