# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from hookshim.config import DEFAULT_SOURCE_DIR

HookWriter = Callable[[str, str], Path]


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    """Return a repository root with an empty ``.git/hooks`` directory."""
    (tmp_path / ".git" / "hooks").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def hooks_dir(repo: Path) -> Path:
    """Return the git hooks directory of :func:`repo`."""
    return repo / ".git" / "hooks"


@pytest.fixture
def write_hook(repo: Path) -> HookWriter:
    """Return a helper writing a hook source file under the default source directory."""

    def _write(name: str, content: str) -> Path:
        source_dir = repo / DEFAULT_SOURCE_DIR
        source_dir.mkdir(parents=True, exist_ok=True)
        path = source_dir / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
