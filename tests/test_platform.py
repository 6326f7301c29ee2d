# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for platform capability selection."""

from __future__ import annotations

import os
import stat
from pathlib import Path

import pytest

from hookshim.platform import PosixPlatform, WindowsPlatform, detect_platform


def test_detect_platform_by_os_name() -> None:
    assert isinstance(detect_platform("nt"), WindowsPlatform)
    assert isinstance(detect_platform("posix"), PosixPlatform)


@pytest.mark.skipif(os.name == "nt", reason="requires POSIX permissions")
def test_posix_mark_executable_adds_execute_bits(tmp_path: Path) -> None:
    path = tmp_path / "hook"
    path.write_text("#!/bin/sh\n", encoding="utf-8")
    path.chmod(0o644)
    platform = PosixPlatform()
    assert not platform.is_executable(path)
    platform.mark_executable(path)
    assert stat.S_IMODE(path.stat().st_mode) == 0o755
    assert platform.is_executable(path)


def test_windows_mark_executable_is_noop(tmp_path: Path) -> None:
    path = tmp_path / "hook"
    path.write_text("#!/bin/sh\n", encoding="utf-8")
    before = path.stat().st_mode
    platform = WindowsPlatform()
    platform.mark_executable(path)
    assert path.stat().st_mode == before
    assert platform.is_executable(path)
    assert platform.requires_executable is False
