# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for interpreter marker resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from hookshim.hooks import GenerationError, HookDefinition
from hookshim.hooks.interpreter import (
    InterpreterFamily,
    classify_marker,
    resolve_interpreter,
    split_marker,
)
from hookshim.platform import PosixPlatform, WindowsPlatform


def _definition(path: Path, content: str | bytes) -> HookDefinition:
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_text(content, encoding="utf-8")
    return HookDefinition(name="pre-commit", source_path=path)


@pytest.mark.parametrize(
    ("line", "family"),
    [
        ("#!/bin/sh", InterpreterFamily.SHELL),
        ("#!/bin/bash -e", InterpreterFamily.SHELL),
        ("#!/usr/bin/env sh", InterpreterFamily.SHELL),
        ("#!/usr/bin/env bash", InterpreterFamily.SHELL),
        ("#! /usr/bin/env zsh", InterpreterFamily.SHELL),
        ("#!/usr/bin/env python", InterpreterFamily.PYTHON),
        ("#!/usr/bin/env python3", InterpreterFamily.PYTHON),
        ("#!/usr/bin/python3.12", InterpreterFamily.PYTHON),
        ("#!/usr/bin/env -S python3 -u", InterpreterFamily.PYTHON),
        ("#!/usr/bin/env perl", InterpreterFamily.PERL),
        ("#!/usr/bin/env ruby", InterpreterFamily.RUBY),
        ("#!/usr/bin/env node", InterpreterFamily.NODE),
    ],
)
def test_classify_recognised_markers(line: str, family: InterpreterFamily) -> None:
    assert classify_marker(line) is family


@pytest.mark.parametrize("line", ["#!/usr/bin/env fish", "#!", "#!/usr/bin/env", "echo hi", "# comment"])
def test_classify_unrecognised_markers(line: str) -> None:
    assert classify_marker(line) is None


def test_split_marker_keeps_remainder_as_single_argument() -> None:
    assert split_marker("#!/usr/bin/env -S bash -e") == ("/usr/bin/env", "-S bash -e")
    assert split_marker("#!/bin/sh") == ("/bin/sh",)
    assert split_marker("echo") == ()


def test_recognised_marker_is_preserved_exactly(tmp_path: Path) -> None:
    definition = _definition(tmp_path / "pre-commit", "#!/usr/bin/env bash\necho ok\n")
    directive = resolve_interpreter(definition, PosixPlatform())
    assert directive.line == "#!/usr/bin/env bash"
    assert directive.preserved is True
    assert directive.family is InterpreterFamily.SHELL
    assert directive.command == ("/usr/bin/env", "bash")


def test_crlf_and_bom_are_stripped(tmp_path: Path) -> None:
    definition = _definition(tmp_path / "pre-commit", b"\xef\xbb\xbf#!/bin/sh\r\necho ok\r\n")
    directive = resolve_interpreter(definition, PosixPlatform())
    assert directive.line == "#!/bin/sh"


@pytest.mark.parametrize(
    ("platform", "expected"),
    [(PosixPlatform(), "#!/bin/sh"), (WindowsPlatform(), "#!/usr/bin/env bash")],
)
def test_missing_marker_uses_platform_default(tmp_path: Path, platform, expected: str) -> None:
    definition = _definition(tmp_path / "pre-commit", "echo ok\n")
    directive = resolve_interpreter(definition, platform)
    assert directive.line == expected
    assert directive.preserved is False
    assert directive.command == ("sh",)


def test_empty_source_uses_platform_default(tmp_path: Path) -> None:
    definition = _definition(tmp_path / "pre-commit", "")
    assert resolve_interpreter(definition, PosixPlatform()).line == "#!/bin/sh"


def test_unrecognised_marker_keeps_command_but_not_line(tmp_path: Path) -> None:
    definition = _definition(tmp_path / "pre-commit", "#!/usr/bin/env fish\necho ok\n")
    directive = resolve_interpreter(definition, PosixPlatform())
    assert directive.line == "#!/bin/sh"
    assert directive.family is InterpreterFamily.SHELL
    assert directive.command == ("/usr/bin/env", "fish")


def test_unreadable_source_raises_generation_error(tmp_path: Path) -> None:
    definition = HookDefinition(name="pre-push", source_path=tmp_path / "missing")
    with pytest.raises(GenerationError) as excinfo:
        resolve_interpreter(definition, PosixPlatform())
    assert excinfo.value.hook == "pre-push"
