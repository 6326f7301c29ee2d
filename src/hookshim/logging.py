# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing messages and per-hook status lines."""

from __future__ import annotations

from typing import Final

from rich.text import Text

from .console import get_console

_LEVELS: Final[dict[str, tuple[str, str]]] = {
    "info": ("ℹ️", "cyan"),
    "ok": ("✅", "green"),
    "warn": ("⚠️", "yellow"),
    "fail": ("❌", "red"),
}

_STATUS_STYLES: Final[dict[str, str]] = {
    "installed": "green",
    "would install": "cyan",
    "unchanged": "dim",
    "failed": "bold red",
}


def _emit(level: str, msg: str, *, use_emoji: bool) -> None:
    symbol, style = _LEVELS[level]
    text = Text(style=style)
    if use_emoji:
        text.append(f"{symbol} ")
    text.append(msg)
    get_console(emoji=use_emoji).print(text)


def info(msg: str, *, use_emoji: bool) -> None:
    """Emit an informational message."""

    _emit("info", msg, use_emoji=use_emoji)


def ok(msg: str, *, use_emoji: bool) -> None:
    """Emit a success message."""

    _emit("ok", msg, use_emoji=use_emoji)


def warn(msg: str, *, use_emoji: bool) -> None:
    """Emit a warning message."""

    _emit("warn", msg, use_emoji=use_emoji)


def fail(msg: str, *, use_emoji: bool) -> None:
    """Emit an error message."""

    _emit("fail", msg, use_emoji=use_emoji)


def hook_status(name: str, status: str, detail: str | None = None, *, use_emoji: bool) -> None:
    """Print one aligned ``<hook>  <status>`` line.

    Args:
        name: Git hook name.
        status: Outcome label such as ``installed`` or ``failed``.
        detail: Optional trailing explanation, typically an error message.
        use_emoji: Emoji preference forwarded to the console.
    """

    text = Text("  ")
    text.append(f"{name:<22}", style="bold")
    text.append(status, style=_STATUS_STYLES.get(status, ""))
    if detail:
        text.append(f": {detail}", style="dim")
    get_console(emoji=use_emoji).print(text)


__all__ = ["fail", "hook_status", "info", "ok", "warn"]
