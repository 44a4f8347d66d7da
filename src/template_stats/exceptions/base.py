"""Base exception type."""

from __future__ import annotations


class TemplateStatsError(Exception):
    """Base class for all template-stats errors."""
