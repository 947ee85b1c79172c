# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging, errors, environment flags)."""

from __future__ import annotations

import os
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Final

from rich.console import Console
from rich.text import Text

from ..core.console import detect_tty, get_console_manager
from ..core.logging import fail as core_fail

DEBUG_ENV_VAR: Final[str] = "APX_LINT_DEBUG"
NO_COLOR_ENV_VAR: Final[str] = "NO_COLOR"
_TRUTHY: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


def env_flag(name: str, env: Mapping[str, str] | None = None) -> bool:
    """Return ``True`` when the environment variable ``name`` is truthy."""

    source = os.environ if env is None else env
    return source.get(name, "").strip().lower() in _TRUTHY


@dataclass(slots=True)
class CLILogger:
    """Console logger for CLI commands honouring colour, emoji and debug settings."""

    console: Console
    use_emoji: bool
    use_color: bool
    debug_enabled: bool = False
    _key_value_re: re.Pattern[str] = field(default=re.compile(r"([\w-]+)=(\".*?\"|\S+)"))

    def fail(self, message: str) -> None:
        """Log a failure message honouring emoji preferences."""

        core_fail(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def debug(self, message: str) -> None:
        """Emit a debug message when debug logging is enabled.

        ``key=value`` pairs are highlighted; values of ``command`` stand out.

        Args:
            message: Debug payload rendered with simple highlighting.
        """

        if not self.debug_enabled:
            return
        text = Text("[debug] ", style="bold cyan")
        cursor = 0
        for match in self._key_value_re.finditer(message):
            start, end = match.span()
            if start > cursor:
                text.append(message[cursor:start], style="dim")
            key, raw_value = match.group(1), match.group(2)
            text.append(key, style="bold magenta")
            text.append("=", style="dim")
            value_style = "bold blue" if key in {"command", "cmd"} else "bold green"
            text.append(raw_value, style=value_style)
            cursor = end
        if cursor < len(message):
            text.append(message[cursor:], style="dim")
        self.console.print(text)


def build_cli_logger(
    *,
    emoji: bool = True,
    debug: bool | None = None,
    no_color: bool | None = None,
) -> CLILogger:
    """Return a ``CLILogger`` configured for the current terminal.

    Args:
        emoji: Whether log output may include emoji glyphs.
        debug: Whether debug logging should be enabled; defaults to the
            ``APX_LINT_DEBUG`` environment variable.
        no_color: Whether terminal colour output should be disabled; defaults
            to the presence of ``NO_COLOR``.

    Returns:
        CLILogger: Logger instance bound to the shared Rich console.
    """

    debug_enabled = env_flag(DEBUG_ENV_VAR) if debug is None else debug
    disable_color = bool(os.environ.get(NO_COLOR_ENV_VAR)) if no_color is None else no_color
    use_color = detect_tty() and not disable_color
    console = get_console_manager().get(color=use_color, emoji=emoji)
    return CLILogger(
        console=console,
        use_emoji=emoji,
        use_color=use_color,
        debug_enabled=debug_enabled,
    )


__all__: Final = [
    "CLIError",
    "CLILogger",
    "DEBUG_ENV_VAR",
    "build_cli_logger",
    "env_flag",
]
