"""Markdown-compatible table rendering of aggregated stats."""

from __future__ import annotations

from template_stats.constants.reporting import ALL_DIMENSIONS, TABLE_HEADERS
from template_stats.model import AggregatedOutput


def build_rows(output: AggregatedOutput) -> list[list[str]]:
    """Build the fixed ten-column row matrix, padding short lists with blanks."""
    rows = [[""] * len(TABLE_HEADERS) for _ in range(output.max_item_count())]
    for column, name in enumerate(ALL_DIMENSIONS):
        for index, entry in enumerate(output.dimension(name) or ()):
            rows[index][column * 2] = entry.name
            rows[index][column * 2 + 1] = str(entry.count)
    return rows


def render_table(output: AggregatedOutput) -> str:
    """Render aggregated stats as a bordered table.

    Label columns are left-aligned and count columns right-aligned.
    """
    rows = build_rows(output)
    widths = [len(header) for header in TABLE_HEADERS]
    for row in rows:
        for column, cell in enumerate(row):
            widths[column] = max(widths[column], len(cell))

    def _line(cells: list[str] | tuple[str, ...], *, header: bool = False) -> str:
        rendered = []
        for column, cell in enumerate(cells):
            if column % 2 and not header:
                rendered.append(f"{cell:>{widths[column]}}")
            else:
                rendered.append(f"{cell:<{widths[column]}}")
        return "| " + " | ".join(rendered) + " |"

    separator = "|" + "|".join("-" * (width + 2) for width in widths) + "|"
    lines = [_line(TABLE_HEADERS, header=True), separator]
    lines.extend(_line(row) for row in rows)
    return "\n".join(lines) + "\n"
