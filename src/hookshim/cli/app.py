# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands."""

from __future__ import annotations

import typer

from . import hooks

app = typer.Typer(
    name="hookshim",
    help="Install git hook shims that delegate to version-controlled hook scripts.",
    no_args_is_help=True,
    add_completion=False,
)
hooks.register(app)

__all__ = ["app"]
