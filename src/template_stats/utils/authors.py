"""Helpers for comma-separated author fields."""

from __future__ import annotations

from template_stats.constants.templates import AUTHOR_HANDLE_PREFIX, FIELD_SEPARATOR


def explode_comma_separated_field(field: str) -> list[str]:
    """Split a comma-separated field into trimmed, lower-cased tokens."""
    return [part.strip().lower() for part in field.split(FIELD_SEPARATOR)]


def _handle(author: str) -> str:
    author = author.strip()
    if author.startswith(AUTHOR_HANDLE_PREFIX):
        return author
    return f"{AUTHOR_HANDLE_PREFIX}{author}"


def format_author_handles(author: str) -> list[str]:
    """Return ``@``-prefixed handles for each author in a comma-separated field."""
    return [_handle(part) for part in author.split(FIELD_SEPARATOR)]


def explode_authors_and_join(author: str) -> str:
    """Render an author field as ``@a,@b`` for template addition lines."""
    return FIELD_SEPARATOR.join(format_author_handles(author))
