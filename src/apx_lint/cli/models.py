# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared data structures for the apx-lint CLI."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Final

LONG_FLAG_PREFIX: Final[str] = "--"
FIX_FLAG: Final[str] = "--fix"
HELP_FLAGS: Final[frozenset[str]] = frozenset({"--help", "-h"})
VERSION_FLAGS: Final[frozenset[str]] = frozenset({"--version", "-v"})
_RECOGNISED_FLAGS: Final[frozenset[str]] = HELP_FLAGS | VERSION_FLAGS | {FIX_FLAG}


@dataclass(slots=True, frozen=True)
class LintArguments:
    """Raw ``apx-lint`` command line split into its recognised parts."""

    show_help: bool
    show_version: bool
    fix: bool
    paths: tuple[str, ...]
    ignored_flags: tuple[str, ...] = ()


@dataclass(slots=True, frozen=True)
class LintCLIOptions:
    """Capture the classified command line of an ``apx-lint`` run."""

    root: Path
    fix: bool
    paths: tuple[str, ...]
    ignored_flags: tuple[str, ...] = ()


def classify_tokens(tokens: Sequence[str] | None) -> LintArguments:
    """Classify every command-line token by exact match.

    ``--help``/``-h``, ``--version``/``-v`` and ``--fix`` are recognised
    anywhere, including after ``--``. Any other token starting with ``--`` is
    tolerated and never forwarded to ESLint; every remaining non-empty token
    (``-hv`` included) is a candidate path.

    Args:
        tokens: Command-line tokens in the order they were given.

    Returns:
        LintArguments: Classified arguments.
    """

    raw = tuple(tokens or ())
    paths: list[str] = []
    flags: list[str] = []
    for token in raw:
        if token in _RECOGNISED_FLAGS or not token:
            continue
        if token.startswith(LONG_FLAG_PREFIX):
            flags.append(token)
        else:
            paths.append(token)
    return LintArguments(
        show_help=any(token in HELP_FLAGS for token in raw),
        show_version=any(token in VERSION_FLAGS for token in raw),
        fix=FIX_FLAG in raw,
        paths=tuple(paths),
        ignored_flags=tuple(flags),
    )


def build_lint_options(arguments: LintArguments, *, root: Path | None = None) -> LintCLIOptions:
    """Construct :class:`LintCLIOptions` for a lint run.

    Args:
        arguments: Classified command-line arguments.
        root: Project root; defaults to the current working directory.

    Returns:
        LintCLIOptions: Options for the run.
    """

    return LintCLIOptions(
        root=(root or Path.cwd()).resolve(),
        fix=arguments.fix,
        paths=arguments.paths,
        ignored_flags=arguments.ignored_flags,
    )


__all__ = [
    "LintArguments",
    "LintCLIOptions",
    "build_lint_options",
    "classify_tokens",
]
