"""End-to-end pipelines for template statistics and addition listings."""

from __future__ import annotations

import logging
from pathlib import Path

from template_stats.config import StatsConfig
from template_stats.constants.templates import ID_KEY
from template_stats.exceptions import ConfigError, TemplateParseError
from template_stats.model import AdditionsResult, StatsResult, TemplateAddition, TemplateRecord
from template_stats.parsers import extract_template_record, is_template_file, load_template_document
from template_stats.parsers.template_yaml import template_info
from template_stats.scanner.aggregator import TemplateAggregator
from template_stats.scanner.discovery import discover_template_files, read_additions_file

logger = logging.getLogger(__name__)


def collect_template_stats(config: StatsConfig) -> StatsResult:
    """Walk the template root and aggregate metadata from every template.

    Unreadable or undecodable files are logged and skipped. In CVE listing
    mode the result carries listing buckets instead of content counts.
    """
    root = config.template_root
    aggregator = TemplateAggregator(listing_mode=config.list_cves_reverse)

    for path in discover_template_files(root):
        aggregator.count_file(path, root)

        if not is_template_file(path):
            logger.debug("[ignored] %s", path)
            continue

        try:
            document = load_template_document(path)
        except TemplateParseError as exc:
            logger.error("%s", exc)
            continue

        record = extract_template_record(document)
        if record is None:
            logger.debug("Skipping %s: missing id or info", path)
            continue

        if not aggregator.listing_mode:
            _log_advisories(record, path)
        aggregator.add(record)

    result = aggregator.result
    logger.debug("Processed %d files (%d templates) under %s", result.scanned_files, result.parsed_templates, root)
    return result


def collect_template_additions(config: StatsConfig) -> AdditionsResult:
    """Resolve each path in the additions file and collect attributed entries.

    Entries without ``info`` or ``info.author`` are skipped. In CVE listing
    mode entries are routed to the listing buckets instead.
    """
    if config.additions_file is None:
        raise ConfigError("An additions file is required to list template additions")

    aggregator = TemplateAggregator(listing_mode=True)
    additions: list[TemplateAddition] = []

    for relative in read_additions_file(config.additions_file):
        path = config.template_root / relative
        if not is_template_file(path):
            logger.warning("ignoring %s", path)
            continue

        try:
            document = load_template_document(path)
        except TemplateParseError as exc:
            logger.error("%s", exc)
            continue

        if ID_KEY not in document:
            logger.debug("Skipping %s: missing id", relative)
            continue
        info = template_info(document)
        if info is None:
            logger.warning("no info found for template %s", relative)
            continue
        if "author" not in info:
            logger.warning("no author found for template %s", relative)
            continue

        record = extract_template_record(document)
        assert record is not None
        if config.list_cves_reverse:
            aggregator.add(record)
        else:
            additions.append(TemplateAddition(path=relative, author=record.author))

    return AdditionsResult(
        additions=additions,
        cve_entries=aggregator.result.cve_entries,
        other_entries=aggregator.result.other_entries,
    )


def _log_advisories(record: TemplateRecord, path: Path) -> None:
    if not record.has_tags:
        logger.debug("[lint] No tags found for template %s", path)
    if not record.has_description:
        logger.debug("[lint] No description found for template %s", path)
    if not record.has_reference:
        logger.debug("[lint] No reference found for template %s", path)
    if not record.has_author:
        logger.warning("[lint] no author found for template %s", path)
