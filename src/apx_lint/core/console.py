# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared Rich consoles bound to the current standard output stream."""

from __future__ import annotations

import sys
from functools import lru_cache
from typing import Literal, TextIO, TypeAlias

from rich.console import Console

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


def detect_tty(stream: TextIO | None = None) -> bool:
    """Return ``True`` when ``stream`` (default ``sys.stdout``) is a terminal."""

    target = sys.stdout if stream is None else stream
    try:
        return target.isatty()
    except (AttributeError, ValueError):
        return False


class RichConsoleManager:
    """Hand out one :class:`Console` per output stream and presentation flags."""

    def __init__(self) -> None:
        self._cache: dict[tuple[int, bool, bool], Console] = {}

    def get(self, *, color: bool, emoji: bool) -> Console:
        """Return a console writing to the live ``sys.stdout``.

        Consoles are keyed on the identity of ``sys.stdout`` so a stream
        swapped in by a test runner gets its own console.

        Args:
            color: Whether ANSI colour output is wanted; only honoured on a TTY.
            emoji: Whether Rich should render emoji glyphs.

        Returns:
            Console: Cached or newly constructed console.
        """

        stream = sys.stdout
        key = (id(stream), color, emoji)
        console = self._cache.get(key)
        if console is None or console.file is not stream:
            tty = detect_tty(stream)
            colorful = color and tty
            color_system: ColorSystem | None = "auto" if colorful else None
            console = Console(
                file=stream,
                color_system=color_system,
                force_terminal=tty,
                no_color=not colorful,
                emoji=emoji,
                highlight=False,
                soft_wrap=True,
            )
            self._cache[key] = console
        return console


@lru_cache(maxsize=1)
def get_console_manager() -> RichConsoleManager:
    """Return the process-wide :class:`RichConsoleManager`."""

    return RichConsoleManager()


__all__ = ["RichConsoleManager", "detect_tty", "get_console_manager"]
