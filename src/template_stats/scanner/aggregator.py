"""Frequency aggregation over extracted template records."""

from __future__ import annotations

from pathlib import Path

from template_stats.constants.templates import FIELD_SEPARATOR
from template_stats.model import ListingEntry, StatsResult, TemplateRecord
from template_stats.parsers import to_listing_entry
from template_stats.scanner.discovery import directory_label
from template_stats.utils import explode_comma_separated_field


class TemplateAggregator:
    """Fold template records into frequency tables or changelog listing buckets.

    In listing mode records are classified into CVE and non-CVE entries and
    content frequency tables are left untouched. Directory counts are kept in
    both modes since they are taken for every discovered file.
    """

    def __init__(self, *, listing_mode: bool = False) -> None:
        self._listing_mode = listing_mode
        self.result = StatsResult()

    @property
    def listing_mode(self) -> bool:
        return self._listing_mode

    def count_file(self, path: Path, root: Path) -> None:
        """Count a discovered file toward its top-level directory."""
        self.result.scanned_files += 1
        self.result.directory[directory_label(path, root)] += 1

    def add(self, record: TemplateRecord) -> None:
        """Fold one record into the tables for the active mode."""
        self.result.parsed_templates += 1
        if self._listing_mode:
            self.add_listing_entry(to_listing_entry(record))
            return

        result = self.result
        for tag in record.tags.split(FIELD_SEPARATOR):
            result.tags[tag] += 1
        for author in explode_comma_separated_field(record.author):
            result.authors[author] += 1
        if record.severity is not None:
            result.severity[record.severity.lower()] += 1
        for protocol in record.protocol_types:
            result.types[protocol] += 1

    def add_listing_entry(self, entry: ListingEntry) -> None:
        """Append an entry to the CVE or non-CVE bucket."""
        if entry.is_cve:
            self.result.cve_entries.append(entry)
        else:
            self.result.other_entries.append(entry)
