# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for hook source discovery."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from hookshim.config import DEFAULT_SOURCE_DIR
from hookshim.hooks import ScanError
from hookshim.hooks.scanner import scan_hook_sources


def test_missing_source_directory_yields_empty_report(repo: Path) -> None:
    report = scan_hook_sources(repo / DEFAULT_SOURCE_DIR)
    assert report.definitions == ()
    assert report.skipped == ()


def test_only_recognised_hook_files_are_returned(repo: Path, write_hook) -> None:
    write_hook("pre-push", "echo push\n")
    write_hook("pre-commit", "echo commit\n")
    write_hook("readme.txt", "docs\n")
    write_hook("pre-commit.sample", "sample\n")

    report = scan_hook_sources(repo / DEFAULT_SOURCE_DIR)

    assert [definition.name for definition in report.definitions] == ["pre-commit", "pre-push"]
    assert report.definitions[0].source_path == repo / DEFAULT_SOURCE_DIR / "pre-commit"


def test_directories_named_like_hooks_are_skipped(repo: Path, write_hook) -> None:
    write_hook("commit-msg", "echo msg\n")
    (repo / DEFAULT_SOURCE_DIR / "pre-commit").mkdir()

    report = scan_hook_sources(repo / DEFAULT_SOURCE_DIR)

    assert [definition.name for definition in report.definitions] == ["commit-msg"]
    assert report.skipped == ("pre-commit",)


def test_source_path_that_is_a_file_is_scan_error(tmp_path: Path) -> None:
    bogus = tmp_path / "hooks"
    bogus.write_text("not a directory", encoding="utf-8")
    with pytest.raises(ScanError):
        scan_hook_sources(bogus)


@pytest.mark.skipif(os.name == "nt" or os.geteuid() == 0, reason="requires POSIX permissions as non-root")
def test_unreadable_source_directory_is_scan_error(repo: Path, write_hook) -> None:
    write_hook("pre-commit", "echo hi\n")
    source_dir = repo / DEFAULT_SOURCE_DIR
    source_dir.chmod(0o000)
    try:
        with pytest.raises(ScanError):
            scan_hook_sources(source_dir)
    finally:
        source_dir.chmod(0o755)
