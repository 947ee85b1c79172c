# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Named presets computed once at import time."""

from __future__ import annotations

from types import MappingProxyType
from typing import Final

from .builder import BuildOptions, build_config_from
from .models import LintConfig
from .rules import RELAXED_RULES

PRESET_OPTIONS: Final[MappingProxyType[str, BuildOptions]] = MappingProxyType(
    {
        "recommended": BuildOptions(),
        "strict": BuildOptions(strict=True),
        "relaxed": BuildOptions(rules=RELAXED_RULES),
    }
)

RECOMMENDED: Final[LintConfig] = build_config_from(PRESET_OPTIONS["recommended"])
STRICT: Final[LintConfig] = build_config_from(PRESET_OPTIONS["strict"])
RELAXED: Final[LintConfig] = build_config_from(PRESET_OPTIONS["relaxed"])

PRESETS: Final[MappingProxyType[str, LintConfig]] = MappingProxyType(
    {
        "recommended": RECOMMENDED,
        "strict": STRICT,
        "relaxed": RELAXED,
    }
)

DEFAULT_PRESET: Final[str] = "recommended"


def _preset_key(name: str) -> str:
    key = name.strip().lower()
    if key not in PRESETS:
        known = ", ".join(PRESETS)
        raise KeyError(f"unknown preset '{name}' (expected one of: {known})")
    return key


def get_preset(name: str) -> LintConfig:
    """Return the preset registered under ``name``.

    Args:
        name: Preset name; matching ignores case and surrounding whitespace.

    Returns:
        LintConfig: Shared, immutable preset configuration.

    Raises:
        KeyError: If ``name`` does not match a known preset.
    """

    return PRESETS[_preset_key(name)]


def get_preset_options(name: str) -> BuildOptions:
    """Return the :class:`BuildOptions` a preset is built from.

    Raises:
        KeyError: If ``name`` does not match a known preset.
    """

    return PRESET_OPTIONS[_preset_key(name)]


__all__ = [
    "DEFAULT_PRESET",
    "PRESETS",
    "PRESET_OPTIONS",
    "RECOMMENDED",
    "RELAXED",
    "STRICT",
    "get_preset",
    "get_preset_options",
]
