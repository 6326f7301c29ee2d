# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render the delegating shim scripts written into ``.git/hooks``."""

from __future__ import annotations

import json
import shlex
from pathlib import Path, PurePosixPath
from typing import Final

from .. import __version__
from ..platform import PlatformCapabilities
from .interpreter import InterpreterDirective, InterpreterFamily
from .models import HookDefinition, InstallationTarget

GENERATED_BANNER: Final[str] = "This hook was generated by hookshim"


def _single_quoted(text: str) -> str:
    """Return ``text`` as a single-quoted Perl/Ruby string literal."""

    escaped = text.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def interpreter_flags(directive: InterpreterDirective) -> tuple[str, ...]:
    """Return the marker argument to forward to the source's interpreter.

    Markers naming the interpreter directly (``#!/usr/bin/python3 -u``) carry
    flags meant for it. ``env`` markers use the argument to name the program,
    so nothing is forwarded for them.
    """

    if PurePosixPath(directive.command[0]).name == "env":
        return ()
    return directive.command[1:]


def _shell_body(directive: InterpreterDirective, script: str) -> list[str]:
    command = " ".join(shlex.quote(part) for part in directive.command)
    return [f'exec {command} {shlex.quote(script)} "$@"']


def _python_body(directive: InterpreterDirective, script: str) -> list[str]:
    argv = ", ".join(repr(part) for part in (*interpreter_flags(directive), script))
    return [
        "import subprocess",
        "import sys",
        "",
        f"status = subprocess.call([sys.executable, {argv}, *sys.argv[1:]])",
        "sys.exit(status if status >= 0 else 128 - status)",
    ]


def _perl_body(directive: InterpreterDirective, script: str) -> list[str]:
    argv = ", ".join(_single_quoted(part) for part in (*interpreter_flags(directive), script))
    return [
        f"exec {{ $^X }} $^X, {argv}, @ARGV",
        '    or die "hookshim: unable to run hook source: $!\\n";',
    ]


def _ruby_body(directive: InterpreterDirective, script: str) -> list[str]:
    argv = ", ".join(_single_quoted(part) for part in (*interpreter_flags(directive), script))
    return [
        'require "rbconfig"',
        "",
        f"exec(RbConfig.ruby, {argv}, *ARGV)",
    ]


def _node_body(directive: InterpreterDirective, script: str) -> list[str]:
    argv = ", ".join(json.dumps(part) for part in (*interpreter_flags(directive), script))
    return [
        'const { spawnSync } = require("child_process");',
        "",
        "const result = spawnSync(",
        "  process.execPath,",
        f"  [{argv}, ...process.argv.slice(2)],",
        '  { stdio: "inherit" },',
        ");",
        "if (result.error) {",
        "  throw result.error;",
        "}",
        "process.exit(result.status === null ? 1 : result.status);",
    ]


_BODIES = {
    InterpreterFamily.SHELL: _shell_body,
    InterpreterFamily.PYTHON: _python_body,
    InterpreterFamily.PERL: _perl_body,
    InterpreterFamily.RUBY: _ruby_body,
    InterpreterFamily.NODE: _node_body,
}


def _comment_prefix(family: InterpreterFamily) -> str:
    return "//" if family is InterpreterFamily.NODE else "#"


def script_reference(source_path: Path, platform: PlatformCapabilities) -> str:
    """Return how a shim refers to ``source_path``.

    Git runs hooks from different directories: the top of the working tree for
    most client hooks, ``$GIT_DIR`` for receive-side hooks and in bare
    repositories. Shims therefore embed an absolute path. The directory is
    resolved but the file name is kept, so a symlinked hook stays a symlink.

    Args:
        source_path: Location of the user-authored hook script.
        platform: Capability set controlling path rendering.

    Returns:
        str: Absolute path to the hook source.
    """

    reference = source_path.parent.resolve() / source_path.name
    return platform.script_path(reference)


def render_shim(
    definition: HookDefinition,
    directive: InterpreterDirective,
    *,
    platform: PlatformCapabilities,
) -> str:
    """Return the shim text for ``definition``.

    The shim starts with ``directive.line``, carries a generated-file banner,
    and hands its arguments and standard streams to the source script while
    exiting with the script's status.

    Args:
        definition: Hook being installed.
        directive: Resolved interpreter directive for the hook source.
        platform: Capability set controlling path rendering.

    Returns:
        str: LF-terminated shim content.
    """

    script = script_reference(definition.source_path, platform)
    comment = _comment_prefix(directive.family)
    lines = [
        directive.line,
        comment,
        f"{comment} {GENERATED_BANNER} v{__version__}. Do not edit this file;",
        f"{comment} change {script} and re-run `hookshim install` instead.",
        comment,
        "",
        *_BODIES[directive.family](directive, script),
    ]
    return "\n".join(lines) + "\n"


def generate_target(
    definition: HookDefinition,
    directive: InterpreterDirective,
    *,
    hooks_dir: Path,
    platform: PlatformCapabilities,
) -> InstallationTarget:
    """Bundle the rendered shim for ``definition`` with its destination."""

    return InstallationTarget(
        name=definition.name,
        hooks_dir=hooks_dir,
        content=render_shim(definition, directive, platform=platform),
        executable=platform.requires_executable,
    )


__all__ = [
    "GENERATED_BANNER",
    "generate_target",
    "interpreter_flags",
    "render_shim",
    "script_reference",
]
