"""Run configuration for template-stats.

This package facade re-exports the public names so callers can use
``from template_stats.config import ...``.
"""

from __future__ import annotations

from template_stats.config.loader import build_config, default_template_root, parse_listing_fields
from template_stats.config.model import StatsConfig

__all__ = ["StatsConfig", "build_config", "default_template_root", "parse_listing_fields"]
