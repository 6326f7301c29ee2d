# SPDX-License-Identifier: MIT
"""Helper services used by the git hooks CLI command."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from ..config import InstallationConfig
from ..hooks import HookshimError, InstallResult, RunStatus, find_repo_root, install_hooks
from ._hooks_cli_models import HookCLIOptions
from .shared import CLIError, CLILogger


def build_config(options: HookCLIOptions, *, env: Mapping[str, str] | None = None) -> InstallationConfig:
    """Resolve the repository root and environment into an installation config.

    Args:
        options: Normalized CLI options.
        env: Optional environment mapping used instead of :data:`os.environ`.

    Returns:
        InstallationConfig: Configuration for a single installation run.

    Raises:
        HookshimError: Raised when no repository root can be located.
    """

    root = options.root if options.root is not None else find_repo_root(Path.cwd())
    return InstallationConfig.from_environment(
        root,
        env=env,
        source_dir=options.source_dir,
        dry_run=options.dry_run,
        max_workers=options.jobs,
        emoji=options.emoji,
    )


def perform_installation(options: HookCLIOptions, *, logger: CLILogger) -> InstallResult:
    """Install hooks for the provided options.

    Args:
        options: Normalized CLI options containing paths and runtime flags.
        logger: Logger used to emit user-facing messages.

    Returns:
        The result reported by :func:`install_hooks`.

    Raises:
        CLIError: Raised when the repository or hook sources cannot be used.
    """

    try:
        return install_hooks(build_config(options))
    except HookshimError as exc:
        logger.fail(str(exc))
        raise CLIError(str(exc)) from exc


def emit_hooks_summary(
    result: InstallResult,
    options: HookCLIOptions,
    *,
    logger: CLILogger,
) -> None:
    """Emit per-hook details after attempting hook installation.

    Args:
        result: The installation result from :func:`perform_installation`.
        options: CLI options controlling dry-run behaviour.
        logger: Logger used to display the summary.
    """

    if result.status is RunStatus.SKIPPED:
        return
    if options.dry_run and result.installed_hooks:
        logger.warn(f"DRY RUN: would install {', '.join(result.installed_hooks)}")
    if result.skipped_hooks:
        logger.warn(f"Ignored non-file hook sources: {', '.join(result.skipped_hooks)}")
    for error in result.errors:
        logger.fail(f"{error.name}: {error.cause}")


__all__ = [
    "build_config",
    "emit_hooks_summary",
    "perform_installation",
]
