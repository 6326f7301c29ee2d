# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared rich console used for installer output."""

from __future__ import annotations

from functools import lru_cache

from rich.console import Console


@lru_cache(maxsize=2)
def get_console(*, emoji: bool) -> Console:
    """Return the process-wide console for the given emoji preference.

    The console is not bound to a file, so it always writes to the current
    ``sys.stdout``. Colour follows rich's terminal and ``NO_COLOR`` detection.

    Args:
        emoji: ``True`` when rich should render ``:emoji:`` codes.

    Returns:
        Console: Cached console instance.
    """

    return Console(emoji=emoji, highlight=False, soft_wrap=True)


__all__ = ["get_console"]
