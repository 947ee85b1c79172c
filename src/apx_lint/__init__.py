# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shareable ESLint configuration presets and the apx-lint wrapper.

Downstream projects consume the frozen presets and the pure helpers::

    from apx_lint import build_config, disable_rules, merge_rule_tables

    config = build_config(strict=True, rules=disable_rules("no-console"))
    payload = config.to_dict()
"""

from __future__ import annotations

from .config import (
    BASE_RULES,
    PRESETS,
    RECOMMENDED,
    RELAXED,
    RELAXED_RULES,
    STRICT,
    STRICT_RULES,
    BuildOptions,
    ConfigFormat,
    LintConfig,
    build_config,
    build_config_from,
    disable_rules,
    get_preset,
    merge_rule_tables,
    override_rule_severity,
)
from .metadata import resolve_version
from .severity import Severity, normalize_severity, rule_severity

__version__ = resolve_version()

__all__ = [
    "BASE_RULES",
    "BuildOptions",
    "ConfigFormat",
    "LintConfig",
    "PRESETS",
    "RECOMMENDED",
    "RELAXED",
    "RELAXED_RULES",
    "STRICT",
    "STRICT_RULES",
    "Severity",
    "__version__",
    "build_config",
    "build_config_from",
    "disable_rules",
    "get_preset",
    "merge_rule_tables",
    "normalize_severity",
    "override_rule_severity",
    "rule_severity",
]
