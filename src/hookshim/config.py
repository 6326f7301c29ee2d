# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Run configuration for hook installation."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field

SKIP_ENV_VAR: Final[str] = "NO_HOOKSHIM_HOOKS"
DEFAULT_SOURCE_DIR: Final[Path] = Path(".hookshim") / "hooks"


def skip_requested(env: Mapping[str, str] | None = None) -> bool:
    """Return whether the skip override is present in ``env``.

    Args:
        env: Environment mapping; defaults to :data:`os.environ`.

    Returns:
        bool: ``True`` when :data:`SKIP_ENV_VAR` is set, even to an empty value.
    """

    environment = os.environ if env is None else env
    return SKIP_ENV_VAR in environment


class InstallationConfig(BaseModel):
    """Immutable settings resolved once at the start of an installation run."""

    model_config = ConfigDict(frozen=True)

    repo_root: Path
    skip: bool = False
    source_dir: Path = DEFAULT_SOURCE_DIR
    dry_run: bool = False
    max_workers: int = Field(default=1, ge=1)
    emoji: bool = True

    @property
    def source_root(self) -> Path:
        """Return the directory holding user-authored hook scripts."""

        return self.repo_root / self.source_dir

    @classmethod
    def from_environment(
        cls,
        repo_root: Path,
        *,
        env: Mapping[str, str] | None = None,
        **overrides: Any,
    ) -> InstallationConfig:
        """Build a configuration reading the skip override from ``env``.

        Args:
            repo_root: Repository root resolved by the caller.
            env: Environment mapping; defaults to :data:`os.environ`.
            **overrides: Additional field values such as ``dry_run``.

        Returns:
            InstallationConfig: Configuration for a single installation run.
        """

        return cls(repo_root=Path(repo_root), skip=skip_requested(env), **overrides)


__all__ = [
    "DEFAULT_SOURCE_DIR",
    "InstallationConfig",
    "SKIP_ENV_VAR",
    "skip_requested",
]
