# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the named preset registry."""

from __future__ import annotations

import json

import pytest

from apx_lint.config import (
    BASE_RULES,
    DEFAULT_PRESET,
    PRESETS,
    RECOMMENDED,
    RELAXED,
    RELAXED_RULES,
    STRICT,
    STRICT_RULES,
    ConfigFormat,
    get_preset,
    get_preset_options,
    thaw,
)


def test_registry_exposes_three_presets() -> None:
    assert list(PRESETS) == ["recommended", "strict", "relaxed"]
    assert PRESETS[DEFAULT_PRESET] is RECOMMENDED


def test_recommended_preset_matches_base_rules() -> None:
    assert thaw(RECOMMENDED.rules) == thaw(BASE_RULES)


def test_strict_preset_overlays_strict_rules() -> None:
    assert thaw(STRICT.rules) == {**thaw(BASE_RULES), **thaw(STRICT_RULES)}


def test_relaxed_preset_turns_relaxed_rules_off() -> None:
    for rule_id in RELAXED_RULES:
        assert RELAXED.rules[rule_id] == "off"
    assert RELAXED.rules["no-debugger"] == BASE_RULES["no-debugger"]


@pytest.mark.parametrize("name", ["strict", " STRICT ", "Strict"])
def test_get_preset_ignores_case_and_whitespace(name: str) -> None:
    assert get_preset(name) is STRICT


def test_get_preset_rejects_unknown_name() -> None:
    with pytest.raises(KeyError, match="unknown preset 'pedantic'"):
        get_preset("pedantic")
    with pytest.raises(KeyError):
        get_preset_options("pedantic")


def test_preset_options_describe_each_preset() -> None:
    assert get_preset_options("recommended").strict is False
    assert get_preset_options("strict").strict is True
    assert get_preset_options("relaxed").rules is RELAXED_RULES


def test_flat_rendering_includes_shared_blocks() -> None:
    payload = json.loads(RECOMMENDED.render())

    assert set(payload) == {"languageOptions", "plugins", "rules", "settings"}
    assert payload["rules"]["indent"] == [2, 4, {"SwitchCase": 1}]
    assert payload["languageOptions"]["parser"] == "@typescript-eslint/parser"
    assert payload["plugins"]["react"] == "eslint-plugin-react"
    assert payload["settings"]["react"]["version"] == "detect"


def test_eslintrc_rendering_uses_legacy_shape() -> None:
    payload = json.loads(STRICT.render(ConfigFormat.ESLINTRC))

    assert payload["parser"] == "@typescript-eslint/parser"
    assert payload["parserOptions"]["ecmaFeatures"] == {"jsx": True}
    assert "@typescript-eslint" in payload["plugins"]
    assert payload["extends"]
    assert payload["globals"]["window"] == "readonly"
    assert payload["rules"]["no-console"] == "error"
