# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration object handed to ESLint."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .defaults import LANGUAGE_OPTIONS, LEGACY_EXTENDS, PLUGINS, SETTINGS
from .types import FrozenRuleTable, thaw


class ConfigFormat(str, Enum):
    """Serialisation shapes supported by :meth:`LintConfig.render`."""

    FLAT = "flat"
    ESLINTRC = "eslintrc"


@dataclass(slots=True, frozen=True)
class LintConfig:
    """Complete ESLint configuration produced by the config builder.

    Only ``rules`` differs between presets; the language options, plugin
    registrations and settings blocks are shared, read-only views.
    """

    rules: FrozenRuleTable
    language_options: Mapping[str, Any] = field(default_factory=lambda: LANGUAGE_OPTIONS)
    plugins: Mapping[str, str] = field(default_factory=lambda: PLUGINS)
    settings: Mapping[str, Any] = field(default_factory=lambda: SETTINGS)

    def to_dict(self) -> dict[str, Any]:
        """Return the flat-config shape as plain JSON-compatible data.

        Returns:
            dict[str, Any]: ``languageOptions``, ``plugins``, ``rules`` and
            ``settings`` blocks. Plugins are referenced by package name.
        """

        return {
            "languageOptions": thaw(self.language_options),
            "plugins": dict(self.plugins),
            "rules": thaw(self.rules),
            "settings": thaw(self.settings),
        }

    def to_eslintrc(self) -> dict[str, Any]:
        """Return the legacy ``.eslintrc`` shape as plain JSON-compatible data.

        Returns:
            dict[str, Any]: Payload with ``extends``, ``parser``,
            ``parserOptions``, ``plugins``, ``globals``, ``rules`` and
            ``settings`` keys.
        """

        language_options = thaw(self.language_options)
        return {
            "extends": list(LEGACY_EXTENDS),
            "parser": language_options.get("parser"),
            "parserOptions": language_options.get("parserOptions", {}),
            "plugins": list(self.plugins),
            "globals": language_options.get("globals", {}),
            "rules": thaw(self.rules),
            "settings": thaw(self.settings),
        }

    def render(self, fmt: ConfigFormat = ConfigFormat.FLAT, *, indent: int | None = 2) -> str:
        """Serialise the configuration to JSON.

        Args:
            fmt: Output shape to produce.
            indent: Indentation forwarded to :func:`json.dumps`.

        Returns:
            str: JSON document describing the configuration.
        """

        payload = self.to_eslintrc() if fmt is ConfigFormat.ESLINTRC else self.to_dict()
        return json.dumps(payload, indent=indent)


__all__ = ["ConfigFormat", "LintConfig"]
