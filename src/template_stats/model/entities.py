"""Dataclasses flowing through the aggregation pipeline."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

from template_stats.constants.reporting import ALL_DIMENSIONS
from template_stats.constants.templates import CVE_PREFIX
from template_stats.types import JsonObject


@dataclass(frozen=True)
class TemplateRecord:
    """Metadata extracted from a single decoded template."""

    id: str
    name: str
    author: str
    severity: str | None
    tags: str
    protocol_types: tuple[str, ...] = ()
    has_author: bool = True
    has_tags: bool = True
    has_description: bool = True
    has_reference: bool = True


@dataclass(frozen=True)
class ListingEntry:
    """A template shown in the CVE-aware changelog listing."""

    id: str
    name: str
    author: str
    severity: str

    @property
    def is_cve(self) -> bool:
        """Whether the identifier names a CVE."""
        return self.id.startswith(CVE_PREFIX)


@dataclass(frozen=True)
class RankedEntry:
    """A label and its occurrence count."""

    name: str
    count: int

    def to_dict(self) -> JsonObject:
        """Serialize to a JSON-compatible dict."""
        return {"name": self.name, "count": self.count}


@dataclass(frozen=True)
class AggregatedOutput:
    """Ranked lists for each requested dimension; ``None`` marks an absent dimension."""

    tags: tuple[RankedEntry, ...] | None = None
    authors: tuple[RankedEntry, ...] | None = None
    directory: tuple[RankedEntry, ...] | None = None
    severity: tuple[RankedEntry, ...] | None = None
    types: tuple[RankedEntry, ...] | None = None

    def dimension(self, name: str) -> tuple[RankedEntry, ...] | None:
        """Return the ranked list for a dimension name."""
        return getattr(self, name)

    def max_item_count(self) -> int:
        """Length of the longest present ranked list."""
        lengths = [len(entries) for entries in (self.dimension(name) for name in ALL_DIMENSIONS) if entries]
        return max(lengths, default=0)

    def to_dict(self) -> JsonObject:
        """Serialize present, non-empty dimensions in fixed key order."""
        payload: JsonObject = {}
        for name in ALL_DIMENSIONS:
            entries = self.dimension(name)
            if entries:
                payload[name] = [entry.to_dict() for entry in entries]
        return payload


@dataclass
class StatsResult:
    """Outcome of a directory walk over the template root."""

    tags: Counter[str] = field(default_factory=Counter)
    authors: Counter[str] = field(default_factory=Counter)
    directory: Counter[str] = field(default_factory=Counter)
    severity: Counter[str] = field(default_factory=Counter)
    types: Counter[str] = field(default_factory=Counter)
    cve_entries: list[ListingEntry] = field(default_factory=list)
    other_entries: list[ListingEntry] = field(default_factory=list)
    scanned_files: int = 0
    parsed_templates: int = 0

    def counts_for(self, name: str) -> Counter[str]:
        """Return the frequency table for a dimension name."""
        return getattr(self, name)


@dataclass(frozen=True)
class TemplateAddition:
    """A newly added template path and its raw author field."""

    path: str
    author: str


@dataclass
class AdditionsResult:
    """Outcome of processing a template additions file."""

    additions: list[TemplateAddition] = field(default_factory=list)
    cve_entries: list[ListingEntry] = field(default_factory=list)
    other_entries: list[ListingEntry] = field(default_factory=list)
