# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Write generated shims into the git hooks directory."""

from __future__ import annotations

import os
import tempfile
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from functools import partial
from pathlib import Path
from typing import Final

from ..config import InstallationConfig
from ..logging import hook_status
from ..platform import PlatformCapabilities
from .errors import InstallError
from .models import HookError, HookOutcome, HookStatus, InstallationTarget, InstallResult, RunStatus

_BASE_MODE: Final[int] = 0o644


def _is_current(target: InstallationTarget, payload: bytes, platform: PlatformCapabilities) -> bool:
    """Return whether the destination already holds ``payload`` with usable permissions."""

    destination = target.destination
    if destination.is_symlink() or not destination.is_file():
        return False
    try:
        existing = destination.read_bytes()
    except OSError:
        return False
    if existing != payload:
        return False
    return not target.executable or platform.is_executable(destination)


def _atomic_write(target: InstallationTarget, payload: bytes, platform: PlatformCapabilities) -> None:
    """Write ``payload`` beside the destination and move it into place.

    Raises:
        InstallError: Raised when writing, marking executable, or renaming fails.
    """

    destination = target.destination
    fd, temp_name = tempfile.mkstemp(dir=target.hooks_dir, prefix=f".{target.name}.", suffix=".tmp")
    temp_path = Path(temp_name)
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(payload)
        temp_path.chmod(_BASE_MODE)
        if target.executable:
            try:
                platform.mark_executable(temp_path)
            except OSError as exc:
                raise InstallError(target.name, f"Unable to mark {destination} executable: {exc}") from exc
        os.replace(temp_path, destination)
    except OSError as exc:
        raise InstallError(target.name, f"Unable to write {destination}: {exc}") from exc
    finally:
        if temp_path.exists():
            temp_path.unlink()


def install_target(
    target: InstallationTarget,
    *,
    platform: PlatformCapabilities,
    dry_run: bool = False,
) -> HookOutcome:
    """Install a single shim, replacing whatever occupied the destination.

    Args:
        target: Generated shim and its destination.
        platform: Capability set used to mark the shim executable.
        dry_run: When ``True`` report the outcome without touching the filesystem.

    Returns:
        HookOutcome: ``unchanged`` when the destination already matches, else ``installed``.

    Raises:
        InstallError: Raised when the shim cannot be written or made executable.
    """

    payload = target.payload()
    if _is_current(target, payload, platform):
        return HookOutcome(name=target.name, status=HookStatus.UNCHANGED, path=target.destination)
    if not dry_run:
        try:
            _atomic_write(target, payload, platform)
        except OSError as exc:
            raise InstallError(target.name, f"Unable to write {target.destination}: {exc}") from exc
    return HookOutcome(name=target.name, status=HookStatus.INSTALLED, path=target.destination)


def _attempt(
    target: InstallationTarget,
    *,
    platform: PlatformCapabilities,
    dry_run: bool,
) -> HookOutcome:
    """Return the outcome for ``target``, converting install failures into ``failed``."""

    try:
        return install_target(target, platform=platform, dry_run=dry_run)
    except InstallError as exc:
        return HookOutcome(name=target.name, status=HookStatus.FAILED, path=target.destination, error=str(exc))


def install_targets(
    targets: Sequence[InstallationTarget],
    *,
    platform: PlatformCapabilities,
    dry_run: bool = False,
    max_workers: int = 1,
) -> list[HookOutcome]:
    """Install every target, continuing past per-hook failures.

    Args:
        targets: Generated shims to install.
        platform: Capability set used to mark shims executable.
        dry_run: When ``True`` avoid filesystem mutations.
        max_workers: Thread pool size; ``1`` installs serially.

    Returns:
        list[HookOutcome]: Outcomes sorted by hook name regardless of completion order.
    """

    runner = partial(_attempt, platform=platform, dry_run=dry_run)
    if max_workers > 1 and len(targets) > 1:
        outcomes: list[HookOutcome] = []
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = [executor.submit(runner, target) for target in targets]
            for future in as_completed(futures):
                outcomes.append(future.result())
    else:
        outcomes = [runner(target) for target in targets]
    return sorted(outcomes, key=lambda outcome: outcome.name)


def install_shims(
    config: InstallationConfig,
    targets: Sequence[InstallationTarget],
    *,
    platform: PlatformCapabilities,
) -> InstallResult:
    """Install ``targets`` according to ``config`` and aggregate the outcomes.

    Args:
        config: Run configuration; ``skip`` suppresses every write.
        targets: Generated shims to install.
        platform: Capability set used to mark shims executable.

    Returns:
        InstallResult: ``skipped`` when the override is active, otherwise the
        per-hook outcomes with ``failed`` status if any hook failed.
    """

    if config.skip:
        return InstallResult.skipped()

    result = InstallResult(status=RunStatus.SUCCESS)
    outcomes = install_targets(
        targets,
        platform=platform,
        dry_run=config.dry_run,
        max_workers=config.max_workers,
    )
    installed_label = "would install" if config.dry_run else "installed"
    for outcome in outcomes:
        if outcome.status is HookStatus.INSTALLED:
            hook_status(outcome.name, installed_label, use_emoji=config.emoji)
            result.installed_hooks.append(outcome.name)
        elif outcome.status is HookStatus.UNCHANGED:
            hook_status(outcome.name, "unchanged", use_emoji=config.emoji)
            result.unchanged_hooks.append(outcome.name)
        else:
            hook_status(outcome.name, "failed", outcome.error, use_emoji=config.emoji)
            result.errors.append(HookError(name=outcome.name, cause=outcome.error or "unknown error"))
    if result.errors:
        result.status = RunStatus.FAILED
    return result


__all__ = ["install_shims", "install_target", "install_targets"]
