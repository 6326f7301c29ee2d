# SPDX-License-Identifier: MIT
"""Data structures for the git hooks CLI command."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

ROOT_OPTION = Annotated[
    Path | None,
    typer.Option(
        "--root",
        "-r",
        help="Repository root. Defaults to the nearest ancestor containing .git.",
    ),
]
SOURCE_DIR_OPTION = Annotated[
    Path,
    typer.Option(
        "--source-dir",
        help="Directory of user hook scripts, relative to the repository root.",
    ),
]
DRY_RUN_OPTION = Annotated[
    bool,
    typer.Option("--dry-run", help="Show actions without modifying files."),
]
JOBS_OPTION = Annotated[
    int,
    typer.Option("--jobs", "-j", min=1, help="Number of hooks to install concurrently."),
]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji output."),
]


@dataclass(slots=True)
class HookCLIOptions:
    """Capture CLI options for hook installation."""

    root: Path | None
    source_dir: Path
    dry_run: bool
    jobs: int
    emoji: bool

    @classmethod
    def from_cli(
        cls,
        root: Path | None,
        source_dir: Path,
        *,
        dry_run: bool,
        jobs: int,
        emoji: bool,
    ) -> "HookCLIOptions":
        """Return options parsed from CLI arguments."""

        return cls(
            root=root.resolve() if root is not None else None,
            source_dir=source_dir,
            dry_run=dry_run,
            jobs=jobs,
            emoji=emoji,
        )


__all__ = [
    "DRY_RUN_OPTION",
    "EMOJI_OPTION",
    "HookCLIOptions",
    "JOBS_OPTION",
    "ROOT_OPTION",
    "SOURCE_DIR_OPTION",
]
