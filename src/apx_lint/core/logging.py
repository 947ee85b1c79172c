# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Failure lines printed by the CLI, with optional colour and emoji."""

from __future__ import annotations

from typing import Final

from rich.text import Text

from .console import detect_tty, get_console_manager

FAIL_PREFIX: Final[str] = "✗ "
FAIL_STYLE: Final[str] = "bold red"


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Print ``msg`` as an error line.

    Args:
        msg: Message text; printed literally, never parsed as Rich markup.
        use_emoji: Whether the failure glyph prefixes the message.
        use_color: Explicit colour flag; defaults to TTY detection.
    """

    color_enabled = detect_tty() if use_color is None else use_color
    console = get_console_manager().get(color=color_enabled, emoji=use_emoji)
    text = Text(f"{FAIL_PREFIX if use_emoji else ''}{msg}")
    if color_enabled:
        text.stylize(FAIL_STYLE)
    console.print(text)


__all__ = ["FAIL_PREFIX", "fail"]
