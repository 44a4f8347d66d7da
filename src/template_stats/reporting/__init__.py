"""Reporting package for template-stats outputs."""

from __future__ import annotations

from .json_writer import render_json
from .listing import format_addition_line, format_listing_entry, render_additions, render_listing
from .table import render_table

__all__ = [
    "format_addition_line",
    "format_listing_entry",
    "render_additions",
    "render_json",
    "render_listing",
    "render_table",
]
