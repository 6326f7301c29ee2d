# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve the interpreter directive a generated shim should start with."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import PurePosixPath
from typing import Final

from ..platform import PlatformCapabilities
from .errors import GenerationError
from .models import HookDefinition

MARKER: Final[str] = "#!"
_BOM: Final[str] = "\ufeff"
_FIRST_LINE_LIMIT: Final[int] = 4096


class InterpreterFamily(str, Enum):
    """Languages the shim generator can emit a delegating body for."""

    SHELL = "shell"
    PYTHON = "python"
    PERL = "perl"
    RUBY = "ruby"
    NODE = "node"


_FAMILY_PATTERNS: Final[tuple[tuple[InterpreterFamily, re.Pattern[str]], ...]] = (
    (InterpreterFamily.SHELL, re.compile(r"(?:ba|da|z|k|mk|a)?sh")),
    (InterpreterFamily.PYTHON, re.compile(r"python(?:\d+(?:\.\d+)*)?")),
    (InterpreterFamily.PERL, re.compile(r"perl(?:\d+(?:\.\d+)*)?")),
    (InterpreterFamily.RUBY, re.compile(r"ruby(?:\d+(?:\.\d+)*)?")),
    (InterpreterFamily.NODE, re.compile(r"node(?:js)?")),
)


@dataclass(frozen=True, slots=True)
class InterpreterDirective:
    """First line of a shim plus the command used to run the hook source.

    ``command`` mirrors how the kernel splits a marker line: the interpreter
    path followed by at most one argument holding the rest of the line.
    """

    line: str
    family: InterpreterFamily
    command: tuple[str, ...]
    preserved: bool


def _program_name(command: tuple[str, ...]) -> str | None:
    """Return the program a marker command ultimately runs."""

    program = PurePosixPath(command[0]).name
    if program != "env":
        return program
    if len(command) < 2:
        return None
    for token in command[1].split():
        if token.startswith("-") or "=" in token:
            continue
        return PurePosixPath(token).name
    return None


def classify_marker(line: str) -> InterpreterFamily | None:
    """Return the interpreter family named by a marker ``line``.

    Args:
        line: Candidate first line of a hook script.

    Returns:
        InterpreterFamily | None: Family for recognised interpreters, else ``None``.
    """

    command = split_marker(line)
    if not command:
        return None
    program = _program_name(command)
    if program is None:
        return None
    for family, pattern in _FAMILY_PATTERNS:
        if pattern.fullmatch(program):
            return family
    return None


def split_marker(line: str) -> tuple[str, ...]:
    """Split a marker line into the interpreter and its optional single argument."""

    if not line.startswith(MARKER):
        return ()
    return tuple(line[len(MARKER) :].strip().split(None, 1))


def read_first_line(definition: HookDefinition) -> str:
    """Return the first line of the hook source without line terminators.

    Args:
        definition: Hook whose source script is inspected.

    Returns:
        str: First line with a leading BOM and trailing whitespace removed.

    Raises:
        GenerationError: Raised when the source file cannot be read.
    """

    try:
        with definition.source_path.open("rb") as handle:
            raw = handle.readline(_FIRST_LINE_LIMIT)
    except OSError as exc:
        raise GenerationError(
            definition.name,
            f"Unable to read hook source {definition.source_path}: {exc}",
        ) from exc
    return raw.decode("utf-8", errors="replace").lstrip(_BOM).rstrip()


def resolve_interpreter(
    definition: HookDefinition,
    platform: PlatformCapabilities,
) -> InterpreterDirective:
    """Return the directive the shim for ``definition`` should use.

    A recognised marker is copied verbatim. An unrecognised marker still
    decides which command runs the source, but the shim itself falls back to the
    platform default. Sources without a marker run through ``sh``.

    Args:
        definition: Hook whose source script is inspected.
        platform: Capability set providing the default directive.

    Returns:
        InterpreterDirective: Directive and delegation command for the shim.

    Raises:
        GenerationError: Raised when the source file cannot be read.
    """

    first_line = read_first_line(definition)
    command = split_marker(first_line)
    if command:
        family = classify_marker(first_line)
        if family is not None:
            return InterpreterDirective(line=first_line, family=family, command=command, preserved=True)
        return InterpreterDirective(
            line=platform.default_directive,
            family=InterpreterFamily.SHELL,
            command=command,
            preserved=False,
        )
    return InterpreterDirective(
        line=platform.default_directive,
        family=InterpreterFamily.SHELL,
        command=("sh",),
        preserved=False,
    )


__all__ = [
    "InterpreterDirective",
    "InterpreterFamily",
    "MARKER",
    "classify_marker",
    "read_first_line",
    "resolve_interpreter",
    "split_marker",
]
