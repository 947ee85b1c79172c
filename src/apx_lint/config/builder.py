# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Pure helpers that derive rule tables and configs from the base rules.

Precedence applied by :func:`build_config`, later steps winning on collision:

1. :data:`~apx_lint.config.rules.BASE_RULES`
2. :data:`~apx_lint.config.rules.STRICT_RULES` when ``strict`` is requested
3. ``"off"`` for every identifier in ``ignore_rules``
4. ``rules`` overrides, replacing whole entries (options are never deep merged)

None of the helpers mutate their inputs.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Final

from ..severity import Severity, normalize_severity, rule_severity
from .models import LintConfig
from .rules import BASE_RULES, STRICT_RULES
from .types import RuleTable, RuleValue, freeze_rules, thaw

OFF: Final[str] = Severity.OFF.value


@dataclass(slots=True, frozen=True)
class BuildOptions:
    """Options accepted by :func:`build_config_from`."""

    rules: RuleTable = field(default_factory=dict)
    ignore_rules: tuple[str, ...] = ()
    strict: bool = False


def _coerce_rule_ids(rule_ids: str | Iterable[str]) -> tuple[str, ...]:
    if isinstance(rule_ids, str):
        return (rule_ids,)
    return tuple(rule_ids)


def disable_rules(*rule_ids: str) -> dict[str, RuleValue]:
    """Return a rule table turning every identifier in ``rule_ids`` off.

    Args:
        *rule_ids: Rule identifiers to disable.

    Returns:
        dict[str, RuleValue]: New table mapping each identifier to ``"off"``.
    """

    return {rule_id: OFF for rule_id in rule_ids}


def merge_rule_tables(*tables: RuleTable) -> dict[str, RuleValue]:
    """Merge rule tables left to right.

    Later tables replace earlier entries for the same identifier wholesale;
    option payloads are never merged recursively.

    Args:
        *tables: Rule tables in increasing order of precedence.

    Returns:
        dict[str, RuleValue]: New merged table.
    """

    merged: dict[str, RuleValue] = {}
    for table in tables:
        merged.update(table)
    return merged


def override_rule_severity(
    overrides: Mapping[str, str | int | Severity],
    *,
    base: RuleTable | None = None,
) -> dict[str, RuleValue]:
    """Return a rule table assigning new severities to existing rules.

    Without ``base`` every identifier simply maps to its new severity. When
    ``base`` is supplied, entries that carry options in ``base`` keep those
    options and only their leading severity is replaced. Severity keywords are
    canonicalised to lower case; numeric aliases are kept as given.

    Args:
        overrides: Mapping of rule identifier to the new severity.
        base: Optional table providing option payloads to preserve.

    Returns:
        dict[str, RuleValue]: New table containing one entry per override.

    Raises:
        ValueError: If an override is not a recognised severity.
    """

    result: dict[str, RuleValue] = {}
    for rule_id, raw_severity in overrides.items():
        normalized = normalize_severity(raw_severity)
        # Numeric aliases are kept as written; keywords are canonicalised.
        severity: RuleValue = raw_severity if isinstance(raw_severity, int) else normalized.value
        existing = base.get(rule_id) if base is not None else None
        if isinstance(existing, (list, tuple)) and len(existing) > 1:
            result[rule_id] = [severity, *thaw(existing[1:])]
        else:
            result[rule_id] = severity
    return result


def build_config(
    *,
    rules: RuleTable | None = None,
    ignore_rules: str | Iterable[str] = (),
    strict: bool = False,
) -> LintConfig:
    """Return a complete :class:`LintConfig` derived from the base rules.

    Unknown rule identifiers are accepted as-is; ESLint reports them at lint
    time.

    Args:
        rules: Entries replacing the computed ones per identifier.
        ignore_rules: Identifiers forced to ``"off"`` before ``rules`` apply.
        strict: Whether to overlay :data:`STRICT_RULES` first.

    Returns:
        LintConfig: Fresh configuration with a frozen copy of the final rules.
    """

    layers: list[RuleTable] = [BASE_RULES]
    if strict:
        layers.append(STRICT_RULES)
    layers.append(disable_rules(*_coerce_rule_ids(ignore_rules)))
    if rules:
        layers.append(rules)
    return LintConfig(rules=freeze_rules(merge_rule_tables(*layers)))


def build_config_from(options: BuildOptions | None = None) -> LintConfig:
    """Return :func:`build_config` applied to a :class:`BuildOptions` bundle."""

    resolved = options or BuildOptions()
    return build_config(
        rules=resolved.rules,
        ignore_rules=resolved.ignore_rules,
        strict=resolved.strict,
    )


def count_by_severity(rules: RuleTable) -> dict[Severity, int]:
    """Return how many entries of ``rules`` report at each severity.

    Args:
        rules: Rule table to summarise.

    Returns:
        dict[Severity, int]: Count per severity, including zero counts.

    Raises:
        ValueError: If an entry does not start with a recognised severity.
    """

    counts = {severity: 0 for severity in Severity}
    for entry in rules.values():
        counts[rule_severity(entry)] += 1
    return counts


__all__ = [
    "BuildOptions",
    "build_config",
    "build_config_from",
    "count_by_severity",
    "disable_rules",
    "merge_rule_tables",
    "override_rule_severity",
]
