# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Launch child processes without a shell, sharing the caller's terminal."""

from __future__ import annotations

import shutil
import subprocess  # nosec B404
from collections.abc import Mapping, Sequence
from pathlib import Path


class CommandLaunchError(RuntimeError):
    """Raised when an executable cannot be started at all."""

    def __init__(self, command: Sequence[str], reason: str) -> None:
        """Record the command that failed to start.

        Args:
            command: Command sequence that failed to launch.
            reason: Human-readable description of the launch failure.
        """

        super().__init__(reason)
        self.command = tuple(command)
        self.reason = reason


def _resolve_command(command: Sequence[str]) -> list[str]:
    """Return ``command`` with its executable resolved to a concrete path.

    Absolute executables must exist; bare names are looked up on ``PATH``.

    Raises:
        ValueError: If ``command`` is empty.
        FileNotFoundError: If the executable cannot be located.
    """

    if not command:
        raise ValueError("cannot launch an empty command")
    executable, *arguments = command
    if Path(executable).is_absolute():
        if not Path(executable).exists():
            raise FileNotFoundError(f"Executable '{executable}' does not exist")
        return [executable, *arguments]
    located = shutil.which(executable)
    if located is None:
        raise FileNotFoundError(f"Executable '{executable}' was not found on PATH")
    return [located, *arguments]


def run_passthrough(
    args: Sequence[str],
    *,
    cwd: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> int:
    """Run ``args`` with inherited stdin, stdout and stderr.

    Args:
        args: Command whose first entry names the executable.
        cwd: Working directory for the child.
        env: Replacement environment; the current one is inherited when omitted.

    Returns:
        int: Exit status of the child, unchanged.

    Raises:
        CommandLaunchError: If the executable is missing or cannot be executed.
    """

    try:
        resolved = _resolve_command(args)
        completed = subprocess.run(  # nosec B603
            resolved,
            cwd=cwd,
            env=dict(env) if env is not None else None,
            check=False,
        )
    except (FileNotFoundError, PermissionError) as exc:
        raise CommandLaunchError(args, str(exc)) from exc
    except OSError as exc:
        raise CommandLaunchError(args, f"Failed to launch '{args[0]}': {exc}") from exc
    return completed.returncode


__all__ = ["CommandLaunchError", "run_passthrough"]
