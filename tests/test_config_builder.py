# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the pure rule-table helpers and config builder."""

from __future__ import annotations

import dataclasses

import pytest

from apx_lint.config import (
    BASE_RULES,
    STRICT_RULES,
    BuildOptions,
    build_config,
    build_config_from,
    count_by_severity,
    disable_rules,
    merge_rule_tables,
    override_rule_severity,
    thaw,
)
from apx_lint.severity import Severity


def test_build_config_without_overrides_reproduces_base_rules() -> None:
    config = build_config()

    assert thaw(config.rules) == thaw(BASE_RULES)
    assert config.rules is not BASE_RULES


def test_build_config_returns_fresh_objects() -> None:
    first = build_config()
    second = build_config()

    assert first is not second
    assert first.rules is not second.rules


def test_strict_overlay_applies_stricter_severities() -> None:
    config = build_config(strict=True)

    for rule_id, entry in STRICT_RULES.items():
        assert config.rules[rule_id] == entry
    assert config.rules["no-console"] == "error"
    assert config.rules["semi"] == BASE_RULES["semi"]


def test_ignore_rules_force_off_over_base_and_strict() -> None:
    ignored = ["no-console", "@typescript-eslint/no-unused-vars", "import/extensions", "custom/unknown"]

    config = build_config(strict=True, ignore_rules=ignored)

    for rule_id in ignored:
        assert config.rules[rule_id] == "off"


def test_ignore_rules_accepts_a_single_identifier() -> None:
    config = build_config(ignore_rules="no-console")

    assert config.rules["no-console"] == "off"
    assert "n" not in config.rules


def test_custom_rules_take_final_precedence() -> None:
    config = build_config(
        strict=True,
        ignore_rules=["no-console", "no-debugger"],
        rules={"no-console": "warn", "max-len": ["error", 120]},
    )

    assert config.rules["no-console"] == "warn"
    assert config.rules["no-debugger"] == "off"
    assert config.rules["max-len"] == ("error", 120)


def test_custom_rules_replace_entries_without_merging_options() -> None:
    config = build_config(rules={"indent": ["error", 2]})

    assert config.rules["indent"] == ("error", 2)


def test_unknown_rule_identifiers_are_accepted() -> None:
    config = build_config(rules={"react/jsx-no-bind": "warn", "team/custom-rule": ["error", {"level": 3}]})

    assert config.rules["react/jsx-no-bind"] == "warn"
    assert thaw(config.rules["team/custom-rule"]) == ["error", {"level": 3}]


def test_building_never_mutates_base_rules() -> None:
    build_config(rules={"no-console": "off"})
    build_config(rules={"no-console": "off"})

    assert BASE_RULES["no-console"] == "warn"


def test_build_config_copies_caller_overrides() -> None:
    overrides = {"max-len": ["error", 120]}

    config = build_config(rules=overrides)
    overrides["max-len"].append("extra")

    assert config.rules["max-len"] == ("error", 120)
    assert overrides == {"max-len": ["error", 120, "extra"]}


def test_base_rules_and_built_rules_are_read_only() -> None:
    config = build_config()

    with pytest.raises(TypeError):
        BASE_RULES["no-console"] = "off"  # type: ignore[index]
    with pytest.raises(TypeError):
        config.rules["indent"][2]["SwitchCase"] = 2  # type: ignore[index]
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.rules = {}  # type: ignore[misc]


def test_build_config_from_options_matches_keyword_form() -> None:
    options = BuildOptions(rules={"semi": "off"}, ignore_rules=("quotes",), strict=True)

    from_options = build_config_from(options)
    from_keywords = build_config(rules={"semi": "off"}, ignore_rules=("quotes",), strict=True)

    assert thaw(from_options.rules) == thaw(from_keywords.rules)
    assert thaw(build_config_from().rules) == thaw(BASE_RULES)


def test_disable_rules_maps_every_identifier_off() -> None:
    assert disable_rules("no-console", "no-debugger") == {"no-console": "off", "no-debugger": "off"}
    assert disable_rules() == {}


def test_merge_rule_tables_later_tables_win_wholesale() -> None:
    team = {"max-len": ["error", 120], "indent": ["error", 2]}
    project = {"indent": "off", "no-eval": "error"}

    merged = merge_rule_tables(BASE_RULES, team, project)

    assert merged["indent"] == "off"
    assert merged["max-len"] == ["error", 120]
    assert merged["no-eval"] == "error"
    assert merged["semi"] == BASE_RULES["semi"]
    assert team == {"max-len": ["error", 120], "indent": ["error", 2]}


def test_merge_rule_tables_does_not_deep_merge_options() -> None:
    first = {"rule": ["error", {"a": 1}]}
    second = {"rule": ["warn", {"b": 2}]}

    assert merge_rule_tables(first, second) == {"rule": ["warn", {"b": 2}]}
    assert merge_rule_tables() == {}


def test_override_rule_severity_canonicalises_keywords() -> None:
    result = override_rule_severity({"no-console": "ERROR", "semi": 1, "quotes": Severity.WARN})

    assert result == {"no-console": "error", "semi": 1, "quotes": "warn"}


def test_override_rule_severity_keeps_base_options() -> None:
    result = override_rule_severity({"indent": "warn", "no-console": "off"}, base=BASE_RULES)

    assert result == {"indent": ["warn", 4, {"SwitchCase": 1}], "no-console": "off"}
    assert BASE_RULES["indent"][0] == 2


def test_override_rule_severity_rejects_unknown_severity() -> None:
    with pytest.raises(ValueError):
        override_rule_severity({"no-console": "fatal"})


def test_count_by_severity_covers_every_rule() -> None:
    counts = count_by_severity(BASE_RULES)

    assert sum(counts.values()) == len(BASE_RULES)
    assert counts[Severity.OFF] > 0
    assert counts[Severity.WARN] > 0
    assert counts[Severity.ERROR] > 0
