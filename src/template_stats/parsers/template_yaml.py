"""Decoder and metadata extractor for YAML detection templates."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from template_stats.constants.templates import ID_KEY, INFO_KEY, PROTOCOL_SECTION_LABELS, TEMPLATE_EXTENSION
from template_stats.exceptions import TemplateParseError
from template_stats.model import ListingEntry, TemplateRecord
from template_stats.utils import to_text


def is_template_file(path: Path) -> bool:
    """Return whether *path* carries the template extension (case-insensitive)."""
    return path.suffix.lower() == TEMPLATE_EXTENSION


def load_template_document(path: Path) -> dict[str, Any]:
    """Read and decode a template file into a generic mapping.

    Only the first YAML document in the stream is decoded.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise TemplateParseError(f"Could not read {path}: {exc}") from exc

    try:
        payload = next(yaml.safe_load_all(text), None)
    except yaml.YAMLError as exc:
        raise TemplateParseError(f"Could not parse {path}: {exc}") from exc

    if payload is None:
        raise TemplateParseError(f"Could not parse {path}: empty document")
    if not isinstance(payload, dict):
        raise TemplateParseError(f"Could not parse {path}: top level must be a YAML mapping")
    return payload


def template_info(document: Mapping[str, Any]) -> Mapping[str, Any] | None:
    """Return the ``info`` mapping, or ``None`` when absent or not a mapping."""
    info = document.get(INFO_KEY)
    if isinstance(info, Mapping):
        return info
    return None


def protocol_types(document: Mapping[str, Any]) -> tuple[str, ...]:
    """Infer protocol labels from the top-level sections present."""
    return tuple(label for section, label in PROTOCOL_SECTION_LABELS if section in document)


def extract_template_record(document: Mapping[str, Any]) -> TemplateRecord | None:
    """Extract metadata from a decoded template.

    Returns ``None`` when the document has no ``id`` or no ``info`` mapping;
    such files are skipped rather than treated as errors.
    """
    if ID_KEY not in document:
        return None
    info = template_info(document)
    if info is None:
        return None

    return TemplateRecord(
        id=to_text(document[ID_KEY]),
        name=to_text(info.get("name")),
        author=to_text(info.get("author")),
        severity=to_text(info["severity"]) if "severity" in info else None,
        tags=to_text(info.get("tags")),
        protocol_types=protocol_types(document),
        has_author="author" in info,
        has_tags=info.get("tags") is not None,
        has_description=info.get("description") is not None,
        has_reference=info.get("reference") is not None,
    )


def to_listing_entry(record: TemplateRecord) -> ListingEntry:
    """Project a record onto the fields shown in changelog listings."""
    return ListingEntry(
        id=record.id,
        name=record.name,
        author=record.author,
        severity=record.severity or "",
    )
