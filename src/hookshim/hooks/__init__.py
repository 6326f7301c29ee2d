# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Hook discovery, shim generation, and installation services."""

from __future__ import annotations

from .errors import ConfigurationError, GenerationError, HookshimError, InstallError, ScanError
from .models import HookDefinition, HookError, InstallationTarget, InstallResult, RunStatus
from .registry import available_hooks, is_supported, normalise_hook_order
from .repository import find_repo_root, resolve_hooks_dir
from .runner import install_hooks

HOOK_NAMES: tuple[str, ...] = available_hooks()

__all__ = [
    "ConfigurationError",
    "GenerationError",
    "HOOK_NAMES",
    "HookDefinition",
    "HookError",
    "HookshimError",
    "InstallError",
    "InstallResult",
    "InstallationTarget",
    "RunStatus",
    "ScanError",
    "available_hooks",
    "find_repo_root",
    "install_hooks",
    "is_supported",
    "normalise_hook_order",
    "resolve_hooks_dir",
]
