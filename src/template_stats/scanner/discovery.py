"""Template file discovery and path labelling."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from template_stats.exceptions import DiscoveryError

logger = logging.getLogger(__name__)


def discover_template_files(root: Path) -> list[Path]:
    """Return every file beneath *root* in lexical walk order.

    All files are returned regardless of extension; callers decide which
    ones to decode. Any directory listing failure aborts discovery.
    """
    if not root.is_dir():
        raise DiscoveryError(f"Template directory does not exist or is not a directory: {root}")

    def _raise(exc: OSError) -> None:
        raise DiscoveryError(f"Could not list {exc.filename}: {exc.strerror}") from exc

    discovered: list[Path] = []
    for dirpath, _dirnames, filenames in os.walk(root, onerror=_raise):
        base = Path(dirpath)
        discovered.extend(base / name for name in filenames)

    logger.debug("Discovered %d files under %s", len(discovered), root)
    return sorted(discovered, key=lambda path: _relative_parts(path, root))


def directory_label(path: Path, root: Path) -> str:
    """Return the first path segment of *path* relative to *root*.

    Files directly under the root are labelled with their own file name.
    """
    parts = _relative_parts(path, root)
    return parts[0] if parts else path.name


def read_additions_file(path: Path) -> list[str]:
    """Read a newline-delimited list of template paths, skipping blank lines."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DiscoveryError(f"Could not open addition file {path}: {exc}") from exc
    return [line.strip() for line in text.splitlines() if line.strip()]


def _relative_parts(path: Path, root: Path) -> tuple[str, ...]:
    try:
        return path.relative_to(root).parts
    except ValueError:
        return path.parts
