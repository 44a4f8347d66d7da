"""Shared pytest fixtures for building template trees."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

HTTP_TEMPLATE = """\
id: {id}
info:
  name: {name}
  author: {author}
  severity: {severity}
  tags: {tags}
  description: Sample template
  reference: https://example.com
requests:
  - method: GET
    path:
      - "{{{{BaseURL}}}}/"
"""

@pytest.fixture()
def template_root(tmp_path: Path) -> Path:
    """Return an empty template directory."""
    root = tmp_path / "templates"
    root.mkdir()
    return root


@pytest.fixture()
def write_template(template_root: Path) -> Callable[..., Path]:
    """Return a helper that writes an HTTP template under the template root."""

    def _write(
        relative: str,
        *,
        id: str = "sample",
        name: str = "Sample",
        author: str = "alice",
        severity: str = "high",
        tags: str = "xss",
        content: str | None = None,
    ) -> Path:
        path = template_root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        if content is None:
            content = HTTP_TEMPLATE.format(id=id, name=name, author=author, severity=severity, tags=tags)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
