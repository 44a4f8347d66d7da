"""CLI entrypoint for template-stats."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from template_stats import __version__
from template_stats.cli.handlers import handle_additions, handle_stats
from template_stats.config import build_config
from template_stats.constants.branding import CLI_DESCRIPTION, PROG_NAME
from template_stats.constants.reporting import (
    DIMENSION_AUTHORS,
    DIMENSION_DIRECTORY,
    DIMENSION_SEVERITY,
    DIMENSION_TAGS,
    DIMENSION_TYPES,
)
from template_stats.exceptions import ConfigError, TemplateStatsError


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI parser.

    Options keep their single-dash spelling (``-top``, ``-lcr``) and also
    accept a double-dash form.
    """
    parser = argparse.ArgumentParser(prog=PROG_NAME, description=CLI_DESCRIPTION, allow_abbrev=False)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-top", "--top", dest="top", type=int, default=0, help="Output top N entries (0 or less = all)")

    dimensions = parser.add_argument_group("dimensions", "Restrict output to the selected dimensions (default: all)")
    dimensions.add_argument("-tags", "--tags", dest=DIMENSION_TAGS, action="store_true", help="Show tags data")
    dimensions.add_argument(
        "-authors", "--authors", dest=DIMENSION_AUTHORS, action="store_true", help="Show author data"
    )
    dimensions.add_argument(
        "-directory", "--directory", dest=DIMENSION_DIRECTORY, action="store_true", help="Show directory data"
    )
    dimensions.add_argument(
        "-severity", "--severity", dest=DIMENSION_SEVERITY, action="store_true", help="Show severity data"
    )
    dimensions.add_argument("-types", "--types", dest=DIMENSION_TYPES, action="store_true", help="Show types data")

    parser.add_argument("-v", "--verbose", dest="verbose", action="store_true", help="Use verbose mode")
    parser.add_argument(
        "-lcr",
        "--list-cves-reverse",
        dest="list_cves_reverse",
        action="store_true",
        help="List CVEs newest first, followed by other templates",
    )
    parser.add_argument(
        "-fields",
        "--fields",
        dest="fields",
        default="",
        help="Comma-separated fields to include in listings: author,severity",
    )
    parser.add_argument("-ta", "--template-additions", dest="additions_file", type=Path, help="Template additions file")
    parser.add_argument("-output", "--output", dest="output", type=Path, help="Output file (default: stdout)")
    parser.add_argument("-json", "--json", dest="json_output", action="store_true", help="Show output in JSON format")
    parser.add_argument(
        "-path",
        "--path",
        dest="path",
        type=Path,
        default=None,
        help="Template directory (default: ~/nuclei-templates)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    selected = [
        name
        for name in (DIMENSION_TAGS, DIMENSION_AUTHORS, DIMENSION_DIRECTORY, DIMENSION_SEVERITY, DIMENSION_TYPES)
        if getattr(args, name)
    ]

    try:
        config = build_config(
            template_root=args.path,
            top=args.top,
            dimensions=selected,
            verbose=args.verbose,
            list_cves_reverse=args.list_cves_reverse,
            fields=args.fields,
            additions_file=args.additions_file,
            output_path=args.output,
            json_output=args.json_output,
        )
        if config.additions_file is not None:
            return handle_additions(config)
        return handle_stats(config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except (TemplateStatsError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
