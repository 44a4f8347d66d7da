"""Parsing-related exceptions."""

from __future__ import annotations

from template_stats.exceptions.base import TemplateStatsError


class TemplateParseError(TemplateStatsError, ValueError):
    """Raised when a template file cannot be read or decoded."""
