"""Shared exception hierarchy for template-stats."""

from __future__ import annotations

from .base import TemplateStatsError
from .config import ConfigError
from .discovery import DiscoveryError
from .parsing import TemplateParseError

__all__ = ["ConfigError", "DiscoveryError", "TemplateParseError", "TemplateStatsError"]
