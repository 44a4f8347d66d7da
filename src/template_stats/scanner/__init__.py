"""Scanner orchestration package."""

from __future__ import annotations

from typing import Any

__all__ = ["collect_template_additions", "collect_template_stats"]


def __getattr__(name: str) -> Any:
    """Lazily expose scanner APIs to avoid import cycles at package import time."""
    if name in {"collect_template_additions", "collect_template_stats"}:
        from .orchestrator import collect_template_additions, collect_template_stats

        exports = {
            "collect_template_additions": collect_template_additions,
            "collect_template_stats": collect_template_stats,
        }
        return exports[name]
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
