# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Execution utilities for installing project git hooks."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..config import SKIP_ENV_VAR, InstallationConfig
from ..logging import info, ok, warn
from ..platform import PlatformCapabilities, detect_platform
from .errors import ConfigurationError, GenerationError
from .installer import install_shims
from .interpreter import resolve_interpreter
from .models import HookError, InstallationTarget, InstallResult, RunStatus
from .repository import resolve_hooks_dir
from .scanner import ScanReport, scan_hook_sources
from .shim import generate_target


@dataclass(frozen=True, slots=True)
class HookDirectories:
    """Describe filesystem locations used during hook installation."""

    project_root: Path
    target_dir: Path
    source_dir: Path


@dataclass(slots=True)
class GenerationOutcome:
    """Shims generated for a scan plus the hooks whose sources could not be read."""

    targets: list[InstallationTarget]
    errors: list[HookError]


def install_hooks(
    config: InstallationConfig,
    *,
    platform: PlatformCapabilities | None = None,
) -> InstallResult:
    """Install shims for every hook script found in the project's source directory.

    Phases run in order: configuration, scan, interpreter resolution, shim
    generation, installation. Configuration and scan failures abort the run.
    Generation and installation failures are collected per hook so the
    remaining hooks are still installed.

    Args:
        config: Settings resolved by the caller for this run.
        platform: Optional capability set; detected from the interpreter when omitted.

    Returns:
        InstallResult: ``skipped`` when the override is set, ``failed`` when any
        hook failed, otherwise ``success``.

    Raises:
        ConfigurationError: Raised when the repository or hooks directory is missing.
        ScanError: Raised when the hook source directory cannot be read.
    """

    if config.skip:
        info(f"{SKIP_ENV_VAR} is set, skipping hook installation", use_emoji=config.emoji)
        return InstallResult.skipped()

    capabilities = platform or detect_platform()
    directories = _prepare_directories(config)
    report = scan_hook_sources(directories.source_dir)
    generated = _generate_targets(report, directories=directories, platform=capabilities)

    result = install_shims(config, generated.targets, platform=capabilities)
    result.skipped_hooks.extend(report.skipped)
    if generated.errors:
        for error in generated.errors:
            warn(f"Failed to prepare {error.name} hook: {error.cause}", use_emoji=config.emoji)
        result.errors = sorted([*result.errors, *generated.errors], key=lambda error: error.name)
        result.status = RunStatus.FAILED

    _emit_summary(result, config)
    return result


def _prepare_directories(config: InstallationConfig) -> HookDirectories:
    """Return validated directories required for hook installation.

    Raises:
        ConfigurationError: Raised when required directories are missing.
    """

    project_root = config.repo_root.resolve()
    if not project_root.is_dir():
        raise ConfigurationError(f"Repository root does not exist: {project_root}")
    return HookDirectories(
        project_root=project_root,
        target_dir=resolve_hooks_dir(project_root),
        source_dir=project_root / config.source_dir,
    )


def _generate_targets(
    report: ScanReport,
    *,
    directories: HookDirectories,
    platform: PlatformCapabilities,
) -> GenerationOutcome:
    """Resolve interpreters and render shims for every scanned hook."""

    outcome = GenerationOutcome(targets=[], errors=[])
    for definition in report.definitions:
        try:
            directive = resolve_interpreter(definition, platform)
        except GenerationError as exc:
            outcome.errors.append(HookError(name=exc.hook, cause=str(exc)))
            continue
        outcome.targets.append(
            generate_target(
                definition,
                directive,
                hooks_dir=directories.target_dir,
                platform=platform,
            ),
        )
    return outcome


def _emit_summary(result: InstallResult, config: InstallationConfig) -> None:
    """Log a one-line summary for ``result``."""

    installed = len(result.installed_hooks)
    unchanged = len(result.unchanged_hooks)
    if result.status is RunStatus.FAILED:
        warn(
            f"Installed {installed} hooks ({unchanged} unchanged); {len(result.errors)} failed",
            use_emoji=config.emoji,
        )
    elif config.dry_run:
        ok(f"Dry run complete: would install {installed} hooks", use_emoji=config.emoji)
    else:
        ok(f"Installed {installed} hooks ({unchanged} unchanged)", use_emoji=config.emoji)


__all__ = ["install_hooks"]
