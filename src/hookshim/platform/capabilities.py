# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Platform capability sets used when generating and installing shims."""

from __future__ import annotations

import os
import stat
from pathlib import Path, PurePath
from typing import Final, Protocol

_EXECUTE_BITS: Final[int] = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


class PlatformCapabilities(Protocol):
    """Describe how a platform runs hook scripts."""

    name: str
    default_directive: str
    requires_executable: bool

    def mark_executable(self, path: Path) -> None:
        """Ensure ``path`` can be executed by git."""

    def is_executable(self, path: Path) -> bool:
        """Return whether git can execute ``path`` as a hook."""

    def script_path(self, path: PurePath) -> str:
        """Return ``path`` rendered for inclusion in shim text."""


class PosixPlatform:
    """Unix-like systems: ``/bin/sh`` shims with the executable bit set."""

    name = "posix"
    default_directive = "#!/bin/sh"
    requires_executable = True

    def mark_executable(self, path: Path) -> None:
        """Add execute permission for user, group, and other to ``path``.

        Args:
            path: Installed shim location.

        Raises:
            OSError: Propagated when the mode cannot be read or changed.
        """

        mode = path.stat().st_mode
        path.chmod(stat.S_IMODE(mode) | _EXECUTE_BITS)

    def is_executable(self, path: Path) -> bool:
        try:
            return bool(path.stat().st_mode & stat.S_IXUSR)
        except OSError:
            return False

    def script_path(self, path: PurePath) -> str:
        return str(path)


class WindowsPlatform:
    """Git for Windows runs hooks through its bundled shell; mode bits are ignored."""

    name = "windows"
    default_directive = "#!/usr/bin/env bash"
    requires_executable = False

    def mark_executable(self, path: Path) -> None:
        """No-op: Windows has no executable permission bit."""

    def is_executable(self, path: Path) -> bool:
        return path.is_file()

    def script_path(self, path: PurePath) -> str:
        return path.as_posix()


def detect_platform(os_name: str | None = None) -> PlatformCapabilities:
    """Return the capability set for the running interpreter.

    Args:
        os_name: Optional override for :data:`os.name`, mainly for tests.

    Returns:
        PlatformCapabilities: Windows capabilities on ``nt``, POSIX otherwise.
    """

    if (os_name or os.name) == "nt":
        return WindowsPlatform()
    return PosixPlatform()


__all__ = [
    "PlatformCapabilities",
    "PosixPlatform",
    "WindowsPlatform",
    "detect_platform",
]
