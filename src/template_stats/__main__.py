"""Allow ``python -m template_stats``."""

from __future__ import annotations

from template_stats.cli.main import main

raise SystemExit(main())
