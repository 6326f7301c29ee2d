# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Discover user-authored hook scripts in the project's hook source directory."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .errors import ScanError
from .models import HookDefinition
from .registry import is_supported, normalise_hook_order


@dataclass(frozen=True, slots=True)
class ScanReport:
    """Hook definitions found during a scan plus recognised names that were not files."""

    definitions: tuple[HookDefinition, ...] = ()
    skipped: tuple[str, ...] = ()


def scan_hook_sources(source_root: Path) -> ScanReport:
    """Return hook definitions for every recognised hook file in ``source_root``.

    Entries whose names are not git hook names are ignored so documentation and
    helper scripts can live alongside hooks. A missing directory yields an empty
    report.

    Args:
        source_root: Directory holding user hook scripts.

    Returns:
        ScanReport: Definitions and skipped names, each sorted by hook name.

    Raises:
        ScanError: Raised when the directory exists but cannot be listed.
    """

    definitions: list[HookDefinition] = []
    skipped: list[str] = []
    try:
        with os.scandir(source_root) as entries:
            for entry in entries:
                if not is_supported(entry.name):
                    continue
                if entry.is_file():
                    definitions.append(HookDefinition(name=entry.name, source_path=Path(entry.path)))
                else:
                    skipped.append(entry.name)
    except FileNotFoundError:
        return ScanReport()
    except OSError as exc:
        raise ScanError(f"Unable to read hook source directory {source_root}: {exc}") from exc

    definitions.sort(key=lambda definition: definition.name)
    return ScanReport(definitions=tuple(definitions), skipped=normalise_hook_order(skipped))


__all__ = ["ScanReport", "scan_hook_sources"]
