"""Branding constants for CLI help output."""

from __future__ import annotations

PROG_NAME: str = "template-stats"
CLI_DESCRIPTION: str = "Aggregate metadata statistics over a directory of detection templates."
