# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Project settings and ignore-pattern discovery."""

from __future__ import annotations

from .models import IgnoreDocument, ProjectSettings
from .resolver import (
    DEFAULT_PATHS,
    ProjectDiscovery,
    discover_project,
    load_ignore_patterns,
    load_project_settings,
    resolve_target_paths,
)
from .sources import parse_ignore_lines

__all__ = [
    "DEFAULT_PATHS",
    "IgnoreDocument",
    "ProjectDiscovery",
    "ProjectSettings",
    "discover_project",
    "load_ignore_patterns",
    "load_project_settings",
    "parse_ignore_lines",
    "resolve_target_paths",
]
