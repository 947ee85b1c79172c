# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve effective lint targets and ignore patterns for a project root."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .models import ProjectSettings
from .sources import first_result, ignore_sources, settings_sources

DEFAULT_PATHS: Final[tuple[str, ...]] = ("src/**/*.{js,jsx,ts,tsx}",)


@dataclass(slots=True, frozen=True)
class ProjectDiscovery:
    """Settings and ignore patterns discovered for a single invocation."""

    settings: ProjectSettings | None
    ignore_patterns: tuple[str, ...]
    settings_source: str | None = None
    ignore_source: str | None = None


def load_project_settings(root: Path) -> ProjectSettings | None:
    """Return the first parseable project settings document under ``root``.

    Args:
        root: Project directory to probe.

    Returns:
        ProjectSettings | None: Settings from the winning candidate, or
        ``None`` when no candidate exists or parses.
    """

    found = first_result(settings_sources(root))
    return found[0] if found is not None else None


def load_ignore_patterns(root: Path) -> tuple[str, ...]:
    """Return ignore patterns from the first readable ignore file under ``root``.

    Later candidates are never merged in.

    Args:
        root: Project directory to probe.

    Returns:
        tuple[str, ...]: Patterns in file order; empty when no file is found.
    """

    found = first_result(ignore_sources(root))
    return found[0] if found is not None else ()


def discover_project(root: Path) -> ProjectDiscovery:
    """Probe ``root`` once for settings and ignore patterns.

    Args:
        root: Project directory to probe.

    Returns:
        ProjectDiscovery: Discovery outcome including the winning source names.
    """

    settings_found = first_result(settings_sources(root))
    ignore_found = first_result(ignore_sources(root))
    return ProjectDiscovery(
        settings=settings_found[0] if settings_found else None,
        ignore_patterns=ignore_found[0] if ignore_found else (),
        settings_source=settings_found[1].name if settings_found else None,
        ignore_source=ignore_found[1].name if ignore_found else None,
    )


def resolve_target_paths(
    cli_paths: Sequence[str],
    settings: ProjectSettings | None,
) -> tuple[str, ...]:
    """Return the paths to lint.

    Explicit CLI paths win over configured paths, which win over
    :data:`DEFAULT_PATHS`.

    Args:
        cli_paths: Paths supplied on the command line.
        settings: Discovered project settings, if any.

    Returns:
        tuple[str, ...]: Target paths in order.
    """

    if cli_paths:
        return tuple(cli_paths)
    if settings is not None and settings.paths:
        return settings.paths
    return DEFAULT_PATHS


__all__ = [
    "DEFAULT_PATHS",
    "ProjectDiscovery",
    "discover_project",
    "load_ignore_patterns",
    "load_project_settings",
    "resolve_target_paths",
]
