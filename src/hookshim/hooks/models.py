# SPDX-License-Identifier: MIT
"""Dataclasses describing hook definitions, install targets, and outcomes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


@dataclass(frozen=True, slots=True)
class HookDefinition:
    """User-authored hook script discovered in the source directory."""

    name: str
    source_path: Path


@dataclass(frozen=True, slots=True)
class InstallationTarget:
    """Generated shim content bound for ``hooks_dir/<name>``."""

    name: str
    hooks_dir: Path
    content: str
    executable: bool = True

    @property
    def destination(self) -> Path:
        """Return the path the shim is written to."""

        return self.hooks_dir / self.name

    def payload(self) -> bytes:
        """Return the exact bytes written to disk."""

        return self.content.encode("utf-8")


class HookStatus(str, Enum):
    """Per-hook installation outcome."""

    INSTALLED = "installed"
    UNCHANGED = "unchanged"
    FAILED = "failed"


class RunStatus(str, Enum):
    """Aggregate outcome of an installation run."""

    SUCCESS = "success"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class HookOutcome:
    """Result of writing a single shim."""

    name: str
    status: HookStatus
    path: Path
    error: str | None = None


@dataclass(frozen=True, slots=True)
class HookError:
    """Hook name paired with the reason it could not be installed."""

    name: str
    cause: str


@dataclass(slots=True)
class InstallResult:
    """Aggregate outcome from attempting to install git hooks."""

    status: RunStatus
    installed_hooks: list[str] = field(default_factory=list)
    unchanged_hooks: list[str] = field(default_factory=list)
    skipped_hooks: list[str] = field(default_factory=list)
    errors: list[HookError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """Return ``True`` unless at least one hook failed."""

        return self.status is not RunStatus.FAILED

    @classmethod
    def skipped(cls) -> InstallResult:
        """Return the result reported when the skip override is active."""

        return cls(status=RunStatus.SKIPPED)


__all__ = [
    "HookDefinition",
    "HookError",
    "HookOutcome",
    "HookStatus",
    "InstallResult",
    "InstallationTarget",
    "RunStatus",
]
