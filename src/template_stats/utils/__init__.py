"""Shared utility helpers."""

from __future__ import annotations

from .authors import explode_authors_and_join, explode_comma_separated_field, format_author_handles
from .text import to_text

__all__ = ["explode_authors_and_join", "explode_comma_separated_field", "format_author_handles", "to_text"]
