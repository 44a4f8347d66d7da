"""Constants for template discovery and metadata extraction."""

from __future__ import annotations

TEMPLATE_EXTENSION: str = ".yaml"
DEFAULT_TEMPLATES_DIRNAME: str = "nuclei-templates"

INFO_KEY: str = "info"
ID_KEY: str = "id"

CVE_PREFIX: str = "CVE-"
CVE_SEGMENT_SEPARATOR: str = "-"
CVE_MIN_SEGMENTS: int = 3

FIELD_SEPARATOR: str = ","
AUTHOR_HANDLE_PREFIX: str = "@"

# Top-level template section -> protocol type label.
PROTOCOL_SECTION_LABELS: tuple[tuple[str, str], ...] = (
    ("requests", "http"),
    ("dns", "dns"),
    ("network", "network"),
    ("file", "file"),
)
