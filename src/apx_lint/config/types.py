# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared type aliases and deep-freeze helpers for configuration data."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Any, TypeAlias

RuleValue: TypeAlias = str | int | Sequence[Any]
RuleTable: TypeAlias = Mapping[str, RuleValue]
FrozenRuleTable: TypeAlias = MappingProxyType[str, RuleValue]


def freeze(value: Any) -> Any:
    """Return a deeply immutable copy of a JSON-like ``value``.

    Mappings become read-only :class:`types.MappingProxyType` views over fresh
    dictionaries and lists become tuples. Scalars are returned unchanged.

    Args:
        value: JSON-like payload composed of mappings, sequences and scalars.

    Returns:
        Any: Immutable equivalent of ``value``.
    """

    if isinstance(value, Mapping):
        return MappingProxyType({str(key): freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze(item) for item in value)
    return value


def thaw(value: Any) -> Any:
    """Return a mutable, JSON-serialisable copy of ``value``.

    Args:
        value: Payload previously produced by :func:`freeze` or plain JSON data.

    Returns:
        Any: Equivalent structure built from ``dict`` and ``list`` instances.
    """

    if isinstance(value, Mapping):
        return {key: thaw(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [thaw(item) for item in value]
    return value


def freeze_rules(rules: RuleTable) -> FrozenRuleTable:
    """Return a frozen copy of ``rules`` with every entry deep-frozen."""

    return MappingProxyType({rule_id: freeze(entry) for rule_id, entry in rules.items()})


__all__ = [
    "FrozenRuleTable",
    "RuleTable",
    "RuleValue",
    "freeze",
    "freeze_rules",
    "thaw",
]
