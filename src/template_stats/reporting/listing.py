"""Changelog-style listing lines for templates."""

from __future__ import annotations

from collections.abc import Sequence

from template_stats.constants.reporting import LISTING_FIELD_AUTHOR, LISTING_FIELD_SEVERITY
from template_stats.model import ListingEntry, TemplateAddition
from template_stats.scanner.cve import truncate_listing
from template_stats.utils import explode_authors_and_join, format_author_handles


def format_listing_entry(entry: ListingEntry, fields: Sequence[str] = ()) -> str:
    """Render ``[<id>] <name>`` followed by the requested optional fields."""
    text = f"[{entry.id}] {entry.name}"
    for field in fields:
        if field == LISTING_FIELD_AUTHOR:
            text = f"{text} ({', '.join(format_author_handles(entry.author))})"
        elif field == LISTING_FIELD_SEVERITY:
            text = f"{text} [{entry.severity}]"
    return text + "\n"


def render_listing(
    cve_entries: Sequence[ListingEntry],
    other_entries: Sequence[ListingEntry],
    *,
    fields: Sequence[str] = (),
    top: int = 0,
) -> str:
    """Render newest CVEs first, then other templates in discovery order."""
    cves, others = truncate_listing(cve_entries, other_entries, top)
    return "".join(format_listing_entry(entry, fields) for entry in (*cves, *others))


def format_addition_line(addition: TemplateAddition) -> str:
    """Render ``- <path> by @a,@b`` for a newly added template."""
    return f"- {addition.path} by {explode_authors_and_join(addition.author)}\n"


def render_additions(additions: Sequence[TemplateAddition]) -> str:
    """Render one attributed line per added template."""
    return "".join(format_addition_line(addition) for addition in additions)
