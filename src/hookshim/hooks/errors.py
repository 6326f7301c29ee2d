# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised by hook installation operations."""

from __future__ import annotations


class HookshimError(RuntimeError):
    """Base class for every failure surfaced by the installation engine."""


class ConfigurationError(HookshimError):
    """Raised when the repository root or its git hooks directory cannot be resolved."""


class ScanError(HookshimError):
    """Raised when the hook source directory exists but cannot be read."""


class HookScopedError(HookshimError):
    """Failure confined to a single hook; sibling hooks are still attempted."""

    def __init__(self, hook: str, message: str) -> None:
        """Initialise the error with the hook it applies to.

        Args:
            hook: Name of the hook whose processing failed.
            message: Human-readable description of the failure.
        """

        super().__init__(message)
        self.hook = hook


class GenerationError(HookScopedError):
    """Raised when a hook source cannot be read while building its shim."""


class InstallError(HookScopedError):
    """Raised when a shim cannot be written or marked executable."""


__all__ = [
    "ConfigurationError",
    "GenerationError",
    "HookScopedError",
    "HookshimError",
    "InstallError",
    "ScanError",
]
