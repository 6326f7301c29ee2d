# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Registry helpers describing the git hook names the installer recognises."""

from __future__ import annotations

from collections.abc import Iterable

# Hook names documented by githooks(5).
_GIT_HOOKS: tuple[str, ...] = (
    "applypatch-msg",
    "pre-applypatch",
    "post-applypatch",
    "pre-commit",
    "pre-merge-commit",
    "prepare-commit-msg",
    "commit-msg",
    "post-commit",
    "pre-rebase",
    "post-checkout",
    "post-merge",
    "pre-push",
    "pre-receive",
    "update",
    "proc-receive",
    "post-receive",
    "post-update",
    "reference-transaction",
    "push-to-checkout",
    "pre-auto-gc",
    "post-rewrite",
    "sendemail-validate",
    "fsmonitor-watchman",
    "p4-changelist",
    "p4-prepare-changelist",
    "p4-post-changelist",
    "p4-pre-submit",
    "post-index-change",
)
_GIT_HOOK_SET: frozenset[str] = frozenset(_GIT_HOOKS)


def available_hooks() -> tuple[str, ...]:
    """Return every git hook name the installer recognises.

    Returns:
        tuple[str, ...]: Supported git hook identifiers in workflow order.
    """

    return _GIT_HOOKS


def is_supported(name: str) -> bool:
    """Return whether ``name`` identifies a recognised git hook.

    Args:
        name: Hook name supplied by the caller.

    Returns:
        bool: ``True`` when the hook is recognised by the registry.
    """

    return name in _GIT_HOOK_SET


def normalise_hook_order(hooks: Iterable[str]) -> tuple[str, ...]:
    """Return recognised hook names deduplicated and sorted by name.

    Args:
        hooks: Hook names provided by the caller.

    Returns:
        tuple[str, ...]: Stable ordering used for reporting; unknown names are dropped.
    """

    return tuple(sorted({hook for hook in hooks if hook in _GIT_HOOK_SET}))


__all__ = ["available_hooks", "is_supported", "normalise_hook_order"]
