# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Build and launch the ESLint command line."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .core.process import CommandLaunchError, run_passthrough

LOCAL_BIN_DIR: Final[Path] = Path("node_modules") / ".bin"
NPX_COMMAND: Final[tuple[str, ...]] = ("npx", "eslint")
FIX_FLAG: Final[str] = "--fix"
IGNORE_PATTERN_FLAG: Final[str] = "--ignore-pattern"


class ESLintLaunchError(CommandLaunchError):
    """Raised when ESLint (or ``npx``) cannot be started."""


@dataclass(slots=True, frozen=True)
class ESLintInvocation:
    """Fully resolved ESLint command line."""

    executable: tuple[str, ...]
    arguments: tuple[str, ...]

    @property
    def argv(self) -> tuple[str, ...]:
        """Return the executable followed by its arguments."""

        return (*self.executable, *self.arguments)


def _local_binary_names() -> tuple[str, ...]:
    if os.name == "nt":
        return ("eslint.cmd", "eslint")
    return ("eslint",)


def resolve_eslint_executable(root: Path) -> tuple[str, ...]:
    """Return the command prefix used to run ESLint for ``root``.

    The project-local ``node_modules/.bin/eslint`` wins; otherwise ESLint is
    resolved through ``npx``.

    Args:
        root: Project directory whose ``node_modules`` is searched.

    Returns:
        tuple[str, ...]: Executable path or ``("npx", "eslint")``.
    """

    bin_dir = root / LOCAL_BIN_DIR
    for name in _local_binary_names():
        candidate = bin_dir / name
        if candidate.is_file():
            return (str(candidate.resolve()),)
    return NPX_COMMAND


def build_eslint_args(
    *,
    fix: bool,
    ignore_patterns: Sequence[str],
    paths: Sequence[str],
) -> tuple[str, ...]:
    """Return ESLint arguments in the order fix flag, ignore patterns, paths.

    Args:
        fix: Whether ``--fix`` should be passed.
        ignore_patterns: Patterns forwarded as ``--ignore-pattern`` pairs.
        paths: Target paths forwarded verbatim.

    Returns:
        tuple[str, ...]: Argument list for ESLint.
    """

    arguments: list[str] = []
    if fix:
        arguments.append(FIX_FLAG)
    for pattern in ignore_patterns:
        arguments.extend((IGNORE_PATTERN_FLAG, pattern))
    arguments.extend(paths)
    return tuple(arguments)


def run_eslint(invocation: ESLintInvocation, *, cwd: Path) -> int:
    """Run ESLint with inherited standard streams and return its exit status.

    Args:
        invocation: Resolved command line.
        cwd: Working directory for the child process.

    Returns:
        int: ESLint's exit status.

    Raises:
        ESLintLaunchError: If the executable cannot be started.
    """

    try:
        return run_passthrough(invocation.argv, cwd=cwd)
    except CommandLaunchError as exc:
        raise ESLintLaunchError(exc.command, exc.reason) from exc


__all__ = [
    "ESLintInvocation",
    "ESLintLaunchError",
    "build_eslint_args",
    "resolve_eslint_executable",
    "run_eslint",
]
