"""Configuration-related exceptions."""

from __future__ import annotations

from template_stats.exceptions.base import TemplateStatsError


class ConfigError(TemplateStatsError, ValueError):
    """Raised when run configuration is invalid."""
