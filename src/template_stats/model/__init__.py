"""Core data models for template-stats."""

from .entities import (
    AdditionsResult,
    AggregatedOutput,
    ListingEntry,
    RankedEntry,
    StatsResult,
    TemplateAddition,
    TemplateRecord,
)

__all__ = [
    "AdditionsResult",
    "AggregatedOutput",
    "ListingEntry",
    "RankedEntry",
    "StatsResult",
    "TemplateAddition",
    "TemplateRecord",
]
