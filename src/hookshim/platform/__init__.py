# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Platform-specific behaviour (interpreter defaults, permissions)."""

from __future__ import annotations

from .capabilities import PlatformCapabilities, PosixPlatform, WindowsPlatform, detect_platform

__all__ = [
    "PlatformCapabilities",
    "PosixPlatform",
    "WindowsPlatform",
    "detect_platform",
]
