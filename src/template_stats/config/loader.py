"""Config construction and normalization for template-stats runs."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from template_stats.config.model import StatsConfig
from template_stats.constants.reporting import ALL_DIMENSIONS, LISTING_FIELDS_BY_NAME
from template_stats.constants.templates import DEFAULT_TEMPLATES_DIRNAME, FIELD_SEPARATOR
from template_stats.exceptions import ConfigError, DiscoveryError
from template_stats.types import ListingField

logger = logging.getLogger(__name__)


def default_template_root() -> Path:
    """Return the conventional template directory under the user's home."""
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as exc:
        raise DiscoveryError(f"Could not determine home directory: {exc}") from exc
    return home / DEFAULT_TEMPLATES_DIRNAME


def parse_listing_fields(raw: str | None) -> tuple[ListingField, ...]:
    """Parse the comma-separated ``-fields`` value into unique field names.

    Unknown names are logged and skipped.
    """
    if not raw:
        return ()
    fields: list[ListingField] = []
    for token in raw.split(FIELD_SEPARATOR):
        name = token.strip().lower()
        if not name:
            continue
        field = LISTING_FIELDS_BY_NAME.get(name)
        if field is None:
            logger.warning("Ignoring unknown listing field '%s'", token.strip())
            continue
        if field not in fields:
            fields.append(field)
    return tuple(fields)


def build_config(
    *,
    template_root: Path | None = None,
    top: int = 0,
    dimensions: Iterable[str] = (),
    verbose: bool = False,
    list_cves_reverse: bool = False,
    fields: str | None = None,
    additions_file: Path | None = None,
    output_path: Path | None = None,
    json_output: bool = False,
) -> StatsConfig:
    """Normalize raw option values and build an immutable ``StatsConfig``.

    An empty *dimensions* selection means every dimension is reported. A
    negative *top* disables truncation, the same as zero.
    """
    selected = set(dimensions)
    unknown = selected - set(ALL_DIMENSIONS)
    if unknown:
        raise ConfigError(f"Unknown dimension(s): {', '.join(sorted(unknown))}")
    resolved_dimensions = tuple(name for name in ALL_DIMENSIONS if name in selected) or ALL_DIMENSIONS

    return StatsConfig(
        template_root=template_root if template_root is not None else default_template_root(),
        top=max(top, 0),
        dimensions=resolved_dimensions,
        verbose=verbose,
        list_cves_reverse=list_cves_reverse,
        fields=parse_listing_fields(fields),
        additions_file=additions_file,
        output_path=output_path,
        json_output=json_output,
    )
