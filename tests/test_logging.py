# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for user-facing output helpers."""

from __future__ import annotations

import pytest

from hookshim.console import get_console
from hookshim.logging import fail, hook_status, info, ok, warn


@pytest.mark.parametrize(
    ("emit", "symbol"),
    [(info, "ℹ️"), (ok, "✅"), (warn, "⚠️"), (fail, "❌")],
)
def test_levels_prefix_symbol_only_with_emoji(emit, symbol: str, capsys: pytest.CaptureFixture[str]) -> None:
    emit("message", use_emoji=True)
    emit("message", use_emoji=False)
    with_emoji, without_emoji = capsys.readouterr().out.splitlines()
    assert with_emoji == f"{symbol} message"
    assert without_emoji == "message"


def test_output_is_plain_when_not_a_terminal(capsys: pytest.CaptureFixture[str]) -> None:
    fail("broken [red]markup[/red]", use_emoji=False)
    out = capsys.readouterr().out
    assert "\x1b[" not in out
    assert out == "broken [red]markup[/red]\n"


def test_hook_status_aligns_names(capsys: pytest.CaptureFixture[str]) -> None:
    hook_status("pre-commit", "installed", use_emoji=False)
    hook_status("reference-transaction", "unchanged", use_emoji=False)
    first, second = capsys.readouterr().out.splitlines()
    assert first.split() == ["pre-commit", "installed"]
    assert second.split() == ["reference-transaction", "unchanged"]
    assert first.index("installed") == second.index("unchanged")


def test_hook_status_appends_detail(capsys: pytest.CaptureFixture[str]) -> None:
    hook_status("pre-push", "failed", "Permission denied", use_emoji=False)
    assert capsys.readouterr().out.strip().endswith("failed: Permission denied")


def test_console_is_shared_per_emoji_flag() -> None:
    assert get_console(emoji=True) is get_console(emoji=True)
    assert get_console(emoji=True) is not get_console(emoji=False)
