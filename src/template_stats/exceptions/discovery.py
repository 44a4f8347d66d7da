"""Discovery-related exceptions."""

from __future__ import annotations

from template_stats.exceptions.base import TemplateStatsError


class DiscoveryError(TemplateStatsError, OSError):
    """Raised when the template root or an additions file cannot be read."""
