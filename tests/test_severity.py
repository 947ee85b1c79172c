# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for severity normalisation helpers."""

from __future__ import annotations

import pytest

from apx_lint.severity import (
    Severity,
    is_rule_enabled,
    normalize_severity,
    rule_severity,
    severity_to_number,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("off", Severity.OFF),
        (" Warn ", Severity.WARN),
        ("ERROR", Severity.ERROR),
        (0, Severity.OFF),
        (1, Severity.WARN),
        (2, Severity.ERROR),
        (Severity.WARN, Severity.WARN),
    ],
)
def test_normalize_severity_accepts_keywords_and_aliases(raw: str | int | Severity, expected: Severity) -> None:
    assert normalize_severity(raw) is expected


@pytest.mark.parametrize("raw", ["fatal", "", 3, -1, True])
def test_normalize_severity_rejects_invalid_values(raw: str | int) -> None:
    with pytest.raises(ValueError, match="invalid severity"):
        normalize_severity(raw)


def test_severity_to_number_uses_eslint_aliases() -> None:
    assert severity_to_number("off") == 0
    assert severity_to_number(Severity.WARN) == 1
    assert severity_to_number(2) == 2


def test_rule_severity_reads_leading_item_of_option_entries() -> None:
    assert rule_severity("warn") is Severity.WARN
    assert rule_severity(["error", "single"]) is Severity.ERROR
    assert rule_severity((2, 4, {"SwitchCase": 1})) is Severity.ERROR


def test_rule_severity_rejects_empty_entries() -> None:
    with pytest.raises(ValueError):
        rule_severity([])


def test_is_rule_enabled() -> None:
    assert is_rule_enabled("warn")
    assert is_rule_enabled([1, {"extensions": [".tsx"]}])
    assert not is_rule_enabled(0)
    assert not is_rule_enabled("off")
