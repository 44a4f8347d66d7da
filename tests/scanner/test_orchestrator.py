"""Tests for the stats and additions pipelines."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

import pytest

from template_stats.config import StatsConfig
from template_stats.exceptions import ConfigError, DiscoveryError
from template_stats.scanner import collect_template_additions, collect_template_stats


def test_collects_counts_across_tree(template_root: Path, write_template: Callable[..., Path]) -> None:
    write_template("http/a.yaml", author="Alice, bob", tags="xss,sqli", severity="High")
    write_template("http/cves/b.yaml", author="alice", tags="xss", severity="low")
    write_template("dns/c.yaml", author="carol", tags="dns", severity="info")
    (template_root / "README.md").write_text("# templates\n", encoding="utf-8")

    result = collect_template_stats(StatsConfig(template_root=template_root))

    assert result.scanned_files == 4
    assert result.parsed_templates == 3
    assert result.directory == {"http": 2, "dns": 1, "README.md": 1}
    assert result.tags == {"xss": 2, "sqli": 1, "dns": 1}
    assert result.authors == {"alice": 2, "bob": 1, "carol": 1}
    assert result.severity == {"high": 1, "low": 1, "info": 1}
    assert result.types == {"http": 3}


def test_broken_files_are_skipped_and_logged(
    template_root: Path,
    write_template: Callable[..., Path],
    caplog: pytest.LogCaptureFixture,
) -> None:
    write_template("http/good.yaml")
    write_template("http/broken.yaml", content="id: [oops\n")
    write_template("http/no-id.yaml", content="info:\n  name: nothing\n")

    with caplog.at_level(logging.DEBUG, logger="template_stats"):
        result = collect_template_stats(StatsConfig(template_root=template_root))

    assert result.parsed_templates == 1
    assert result.directory == {"http": 3}
    assert any("broken.yaml" in record.message and record.levelno == logging.ERROR for record in caplog.records)


def test_lint_advisories_are_debug_and_author_is_warning(
    write_template: Callable[..., Path],
    template_root: Path,
    caplog: pytest.LogCaptureFixture,
) -> None:
    write_template("misc/bare.yaml", content="id: bare\ninfo:\n  name: Bare\n")

    with caplog.at_level(logging.DEBUG, logger="template_stats"):
        result = collect_template_stats(StatsConfig(template_root=template_root))

    levels = {
        record.message.split(" found")[0]: record.levelno for record in caplog.records if "[lint]" in record.message
    }
    assert levels["[lint] No tags"] == logging.DEBUG
    assert levels["[lint] No description"] == logging.DEBUG
    assert levels["[lint] No reference"] == logging.DEBUG
    assert levels["[lint] no author"] == logging.WARNING
    assert result.tags == {"": 1}
    assert result.authors == {"": 1}


def test_ignored_files_logged_in_debug(template_root: Path, caplog: pytest.LogCaptureFixture) -> None:
    (template_root / "notes.txt").write_text("x", encoding="utf-8")

    with caplog.at_level(logging.DEBUG, logger="template_stats"):
        collect_template_stats(StatsConfig(template_root=template_root))

    assert any(record.message.startswith("[ignored]") for record in caplog.records)


def test_run_summary_is_debug_only(
    template_root: Path,
    write_template: Callable[..., Path],
    caplog: pytest.LogCaptureFixture,
) -> None:
    write_template("http/a.yaml")

    with caplog.at_level(logging.DEBUG, logger="template_stats"):
        collect_template_stats(StatsConfig(template_root=template_root))

    summary = [record for record in caplog.records if record.message.startswith("Processed ")]
    assert [record.levelno for record in summary] == [logging.DEBUG]


def test_listing_mode_collects_entries(template_root: Path, write_template: Callable[..., Path]) -> None:
    write_template("http/cves/a.yaml", id="CVE-2021-1")
    write_template("http/b.yaml", id="panel")

    result = collect_template_stats(StatsConfig(template_root=template_root, list_cves_reverse=True))

    assert [entry.id for entry in result.cve_entries] == ["CVE-2021-1"]
    assert [entry.id for entry in result.other_entries] == ["panel"]
    assert not result.tags


def test_missing_root_is_fatal(tmp_path: Path) -> None:
    with pytest.raises(DiscoveryError):
        collect_template_stats(StatsConfig(template_root=tmp_path / "missing"))


def test_additions_collects_attributed_entries(
    template_root: Path,
    write_template: Callable[..., Path],
    tmp_path: Path,
    caplog: pytest.LogCaptureFixture,
) -> None:
    write_template("http/a.yaml", author="alice,bob")
    write_template("http/no-author.yaml", content="id: x\ninfo:\n  name: X\n")
    write_template("http/no-info.yaml", content="id: y\n")
    additions = tmp_path / "additions.txt"
    additions.write_text(
        "http/a.yaml\nhttp/no-author.yaml\nhttp/no-info.yaml\nhttp/readme.md\nhttp/missing.yaml\n",
        encoding="utf-8",
    )
    config = StatsConfig(template_root=template_root, additions_file=additions)

    with caplog.at_level(logging.DEBUG, logger="template_stats"):
        result = collect_template_additions(config)

    assert [(item.path, item.author) for item in result.additions] == [("http/a.yaml", "alice,bob")]
    messages = [record.message for record in caplog.records]
    assert "no author found for template http/no-author.yaml" in messages
    assert "no info found for template http/no-info.yaml" in messages
    assert any(message.startswith("ignoring ") for message in messages)


def test_additions_with_listing_mode(template_root: Path, write_template: Callable[..., Path], tmp_path: Path) -> None:
    write_template("http/cves/a.yaml", id="CVE-2020-5")
    write_template("http/b.yaml", id="panel")
    additions = tmp_path / "additions.txt"
    additions.write_text("http/cves/a.yaml\nhttp/b.yaml\n", encoding="utf-8")

    result = collect_template_additions(
        StatsConfig(template_root=template_root, additions_file=additions, list_cves_reverse=True)
    )

    assert result.additions == []
    assert [entry.id for entry in result.cve_entries] == ["CVE-2020-5"]
    assert [entry.id for entry in result.other_entries] == ["panel"]


def test_additions_requires_file(template_root: Path) -> None:
    with pytest.raises(ConfigError):
        collect_template_additions(StatsConfig(template_root=template_root))
