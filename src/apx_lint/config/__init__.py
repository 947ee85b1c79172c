# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rule tables, presets and the pure config builder."""

from __future__ import annotations

from .builder import (
    BuildOptions,
    build_config,
    build_config_from,
    count_by_severity,
    disable_rules,
    merge_rule_tables,
    override_rule_severity,
)
from .models import ConfigFormat, LintConfig
from .presets import (
    DEFAULT_PRESET,
    PRESET_OPTIONS,
    PRESETS,
    RECOMMENDED,
    RELAXED,
    STRICT,
    get_preset,
    get_preset_options,
)
from .rules import BASE_RULES, RELAXED_RULES, STRICT_RULES
from .types import RuleTable, RuleValue, freeze, thaw

__all__ = [
    "BASE_RULES",
    "BuildOptions",
    "ConfigFormat",
    "DEFAULT_PRESET",
    "LintConfig",
    "PRESETS",
    "PRESET_OPTIONS",
    "RECOMMENDED",
    "RELAXED",
    "RELAXED_RULES",
    "RuleTable",
    "RuleValue",
    "STRICT",
    "STRICT_RULES",
    "build_config",
    "build_config_from",
    "count_by_severity",
    "disable_rules",
    "freeze",
    "get_preset",
    "get_preset_options",
    "merge_rule_tables",
    "override_rule_severity",
    "thaw",
]
