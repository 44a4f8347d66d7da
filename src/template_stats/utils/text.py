"""Uniform stringification of decoded YAML values."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from template_stats.constants.templates import FIELD_SEPARATOR


def to_text(value: object) -> str:
    """Render a decoded YAML value as text.

    ``None`` becomes an empty string, booleans render in YAML spelling and
    sequences are joined with commas so list-valued ``tags``/``author``
    fields explode the same way as comma-separated strings.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Mapping):
        return str(dict(value))
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        return FIELD_SEPARATOR.join(to_text(item) for item in value)
    return str(value)
