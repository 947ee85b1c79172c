# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and helpers."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from .config.types import RuleValue


class Severity(str, Enum):
    """Severity levels understood by ESLint rule entries."""

    OFF = "off"
    WARN = "warn"
    ERROR = "error"


_NUMERIC_ALIASES: Final[Mapping[int, Severity]] = {
    0: Severity.OFF,
    1: Severity.WARN,
    2: Severity.ERROR,
}

_SEVERITY_TO_NUMBER: Final[Mapping[Severity, int]] = {
    severity: number for number, severity in _NUMERIC_ALIASES.items()
}


def normalize_severity(value: str | int | Severity) -> Severity:
    """Return the :class:`Severity` described by ``value``.

    Args:
        value: Severity keyword (``"off"``, ``"warn"``, ``"error"``), numeric
            alias (``0``, ``1``, ``2``) or an existing :class:`Severity`.

    Returns:
        Severity: Normalised severity.

    Raises:
        ValueError: If ``value`` is not a recognised severity.
    """

    if isinstance(value, Severity):
        return value
    if isinstance(value, bool):
        raise ValueError(f"invalid severity {value!r}")
    if isinstance(value, int):
        try:
            return _NUMERIC_ALIASES[value]
        except KeyError as exc:
            raise ValueError(f"invalid severity {value!r}") from exc
    try:
        return Severity(value.strip().lower())
    except (AttributeError, ValueError) as exc:
        raise ValueError(f"invalid severity {value!r}") from exc


def severity_to_number(value: str | int | Severity) -> int:
    """Return the numeric alias used by ESLint for ``value``."""

    return _SEVERITY_TO_NUMBER[normalize_severity(value)]


def rule_severity(entry: RuleValue) -> Severity:
    """Extract the severity from a rule table entry.

    Args:
        entry: Bare severity or a sequence whose first item is the severity
            followed by rule options.

    Returns:
        Severity: Severity of the rule entry.

    Raises:
        ValueError: If the entry does not start with a recognised severity.
    """

    if isinstance(entry, Sequence) and not isinstance(entry, str):
        if not entry:
            raise ValueError("rule entry must not be empty")
        return normalize_severity(entry[0])
    return normalize_severity(entry)


def is_rule_enabled(entry: RuleValue) -> bool:
    """Return ``True`` when ``entry`` reports at ``warn`` or ``error``."""

    return rule_severity(entry) is not Severity.OFF


__all__ = [
    "Severity",
    "is_rule_enabled",
    "normalize_severity",
    "rule_severity",
    "severity_to_number",
]
