"""Constants for stats dimensions, table rendering, and listing fields."""

from __future__ import annotations

from template_stats.types import Dimension, ListingField

DIMENSION_TAGS: Dimension = "tags"
DIMENSION_AUTHORS: Dimension = "authors"
DIMENSION_DIRECTORY: Dimension = "directory"
DIMENSION_SEVERITY: Dimension = "severity"
DIMENSION_TYPES: Dimension = "types"

# Order is shared by JSON keys and table columns.
ALL_DIMENSIONS: tuple[Dimension, ...] = (
    DIMENSION_TAGS,
    DIMENSION_AUTHORS,
    DIMENSION_DIRECTORY,
    DIMENSION_SEVERITY,
    DIMENSION_TYPES,
)

TABLE_HEADERS: tuple[str, ...] = (
    "Tag",
    "Count",
    "Author",
    "Count",
    "Directory",
    "Count",
    "Severity",
    "Count",
    "Type",
    "Count",
)

JSON_INDENT: int = 2

LISTING_FIELD_AUTHOR: ListingField = "author"
LISTING_FIELD_SEVERITY: ListingField = "severity"

# Accepted -fields spellings, including aliases.
LISTING_FIELDS_BY_NAME: dict[str, ListingField] = {
    "author": LISTING_FIELD_AUTHOR,
    "authors": LISTING_FIELD_AUTHOR,
    "severity": LISTING_FIELD_SEVERITY,
}
