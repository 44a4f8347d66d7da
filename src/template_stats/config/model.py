"""Config data model for template-stats runs."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from template_stats.constants.reporting import ALL_DIMENSIONS
from template_stats.types import Dimension, ListingField


@dataclass(frozen=True)
class StatsConfig:
    """Resolved run config, built once by the CLI."""

    template_root: Path
    top: int = 0
    dimensions: tuple[Dimension, ...] = ALL_DIMENSIONS
    verbose: bool = False
    list_cves_reverse: bool = False
    fields: tuple[ListingField, ...] = ()
    additions_file: Path | None = None
    output_path: Path | None = None
    json_output: bool = False
