# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI commands for installing git hook shims."""

from __future__ import annotations

import typer

from ..config import DEFAULT_SOURCE_DIR
from ..hooks import available_hooks
from ._hooks_cli_models import (
    DRY_RUN_OPTION,
    EMOJI_OPTION,
    JOBS_OPTION,
    ROOT_OPTION,
    SOURCE_DIR_OPTION,
    HookCLIOptions,
)
from ._hooks_cli_services import emit_hooks_summary, perform_installation
from .shared import CLIError, build_cli_logger


def install(
    root: ROOT_OPTION = None,
    source_dir: SOURCE_DIR_OPTION = DEFAULT_SOURCE_DIR,
    dry_run: DRY_RUN_OPTION = False,
    jobs: JOBS_OPTION = 1,
    emoji: EMOJI_OPTION = True,
) -> None:
    """Install git hook shims for the current repository.

    Raises:
        typer.Exit: Always raised to terminate the command with an exit status.
    """

    options = HookCLIOptions.from_cli(root, source_dir, dry_run=dry_run, jobs=jobs, emoji=emoji)
    logger = build_cli_logger(emoji=options.emoji)
    try:
        result = perform_installation(options, logger=logger)
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc

    emit_hooks_summary(result, options, logger=logger)
    raise typer.Exit(code=0 if result.ok else 1)


def list_hooks() -> None:
    """Print every git hook name hookshim recognises."""

    for name in available_hooks():
        typer.echo(name)


def register(app: typer.Typer) -> None:
    """Register hook subcommands on the Typer application.

    Args:
        app: Typer application receiving the commands.
    """

    app.command(name="install")(install)
    app.command(name="list-hooks")(list_hooks)


__all__ = ["install", "list_hooks", "register"]
