# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Locate the git directory and hooks directory for a repository."""

from __future__ import annotations

from pathlib import Path
from typing import Final

from .errors import ConfigurationError

GIT_ENTRY: Final[str] = ".git"
_GITDIR_PREFIX: Final[str] = "gitdir:"


def find_repo_root(start: Path) -> Path:
    """Return the nearest ancestor of ``start`` that contains a ``.git`` entry.

    Args:
        start: Directory where the search begins.

    Returns:
        Path: Resolved repository root.

    Raises:
        ConfigurationError: Raised when no ancestor is a git repository.
    """

    origin = start.resolve()
    for candidate in (origin, *origin.parents):
        entry = candidate / GIT_ENTRY
        if entry.is_dir() or entry.is_file():
            return candidate
    raise ConfigurationError(f"Git directory not found in '{origin}' or its parent directories")


def find_git_dir(repo_root: Path) -> Path:
    """Return the git directory backing ``repo_root``.

    Worktrees and submodules store a ``gitdir: <path>`` pointer in a ``.git``
    file instead of a directory; relative pointers resolve against the root.

    Args:
        repo_root: Repository root directory.

    Returns:
        Path: Directory holding git metadata.

    Raises:
        ConfigurationError: Raised when ``.git`` is missing or points nowhere.
    """

    entry = repo_root / GIT_ENTRY
    if entry.is_dir():
        return entry
    if not entry.is_file():
        raise ConfigurationError(f"Not a git repository (missing {GIT_ENTRY} in '{repo_root}')")

    try:
        content = entry.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise ConfigurationError(f"Unable to read {entry}: {exc}") from exc
    if not content.startswith(_GITDIR_PREFIX):
        raise ConfigurationError(f"Malformed git file {entry}: expected '{_GITDIR_PREFIX} <path>'")

    git_dir = Path(content[len(_GITDIR_PREFIX) :].strip())
    if not git_dir.is_absolute():
        git_dir = repo_root / git_dir
    if not git_dir.is_dir():
        raise ConfigurationError(f"Git directory '{git_dir}' referenced by {entry} does not exist")
    return git_dir


def _common_dir(git_dir: Path) -> Path:
    """Return the shared git directory for linked worktrees, else ``git_dir``."""

    pointer = git_dir / "commondir"
    if not pointer.is_file():
        return git_dir
    try:
        raw = pointer.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise ConfigurationError(f"Unable to read {pointer}: {exc}") from exc
    common = Path(raw)
    return common if common.is_absolute() else (git_dir / common).resolve()


def resolve_hooks_dir(repo_root: Path) -> Path:
    """Return the existing hooks directory for ``repo_root``.

    Args:
        repo_root: Repository root directory.

    Returns:
        Path: ``<git-dir>/hooks``.

    Raises:
        ConfigurationError: Raised when the repository or hooks directory is missing.
    """

    hooks_dir = _common_dir(find_git_dir(repo_root)) / "hooks"
    if not hooks_dir.is_dir():
        raise ConfigurationError(f"Git hooks directory not found: {hooks_dir}")
    return hooks_dir


__all__ = ["GIT_ENTRY", "find_git_dir", "find_repo_root", "resolve_hooks_dir"]
