# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Distribution metadata lookups."""

from __future__ import annotations

from importlib import metadata
from typing import Final

DISTRIBUTION_NAME: Final[str] = "apx-lint"
PROJECT_TITLE: Final[str] = "APX Lint"
UNKNOWN_VERSION: Final[str] = "unknown"


def resolve_version(distribution: str = DISTRIBUTION_NAME) -> str:
    """Return the installed version of ``distribution``.

    Args:
        distribution: Distribution name to look up.

    Returns:
        str: Version string, or ``"unknown"`` when the metadata is unavailable.
    """

    try:
        version = metadata.version(distribution)
    except metadata.PackageNotFoundError:
        return UNKNOWN_VERSION
    return version or UNKNOWN_VERSION


__all__ = ["DISTRIBUTION_NAME", "PROJECT_TITLE", "UNKNOWN_VERSION", "resolve_version"]
