"""JSON encoding of aggregated stats."""

from __future__ import annotations

import json

from template_stats.constants.reporting import JSON_INDENT
from template_stats.model import AggregatedOutput


def render_json(output: AggregatedOutput) -> str:
    """Render present dimensions as a JSON document with a trailing newline."""
    return json.dumps(output.to_dict(), indent=JSON_INDENT) + "\n"
