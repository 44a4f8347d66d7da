"""CLI run handlers and output sinks."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TextIO

from template_stats.config import StatsConfig
from template_stats.exceptions import TemplateStatsError
from template_stats.reporting import render_additions, render_json, render_listing, render_table
from template_stats.scanner import collect_template_additions, collect_template_stats
from template_stats.scanner.ranking import rank_dimensions


@contextmanager
def open_output(path: Path | None) -> Iterator[TextIO]:
    """Yield the output file at *path*, or stdout when no path is given."""
    if path is None:
        yield sys.stdout
        return
    try:
        handle = path.open("w", encoding="utf-8")
    except OSError as exc:
        raise TemplateStatsError(f"Could not create output file: {exc}") from exc
    with handle:
        yield handle


def handle_stats(config: StatsConfig) -> int:
    """Aggregate the template directory and write a table, JSON or CVE listing."""
    result = collect_template_stats(config)

    with open_output(config.output_path) as stream:
        if config.list_cves_reverse:
            stream.write(
                render_listing(result.cve_entries, result.other_entries, fields=config.fields, top=config.top)
            )
            return 0

        output = rank_dimensions(result, config.dimensions, config.top)
        stream.write(render_json(output) if config.json_output else render_table(output))
    return 0


def handle_additions(config: StatsConfig) -> int:
    """Write attributed lines (or a CVE listing) for templates in the additions file."""
    result = collect_template_additions(config)

    with open_output(config.output_path) as stream:
        if config.list_cves_reverse:
            stream.write(
                render_listing(result.cve_entries, result.other_entries, fields=config.fields, top=config.top)
            )
            return 0

        stream.write(render_additions(result.additions))
    return 0
