# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Fixed configuration blocks shared by every preset."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Final

from .types import freeze

PARSER_PACKAGE: Final[str] = "@typescript-eslint/parser"

_BROWSER_GLOBALS: Final[tuple[str, ...]] = (
    "window",
    "document",
    "navigator",
    "console",
    "localStorage",
    "sessionStorage",
    "fetch",
)

_DOM_GLOBALS: Final[tuple[str, ...]] = (
    "HTMLElement",
    "HTMLDivElement",
    "HTMLInputElement",
    "HTMLButtonElement",
    "HTMLFormElement",
    "HTMLSpanElement",
    "HTMLAnchorElement",
    "HTMLImageElement",
    "Element",
    "Node",
    "NodeList",
    "Event",
    "MouseEvent",
    "KeyboardEvent",
)

_NODE_GLOBALS: Final[tuple[str, ...]] = (
    "process",
    "__dirname",
    "__filename",
    "module",
    "require",
    "exports",
    "global",
    "Buffer",
)

GLOBALS: Final[MappingProxyType[str, str]] = MappingProxyType(
    {name: "readonly" for name in (*_BROWSER_GLOBALS, *_DOM_GLOBALS, *_NODE_GLOBALS)}
)

PARSER_OPTIONS: Final[MappingProxyType[str, Any]] = freeze(
    {
        "ecmaVersion": "latest",
        "sourceType": "module",
        "ecmaFeatures": {"jsx": True},
    }
)

LANGUAGE_OPTIONS: Final[MappingProxyType[str, Any]] = MappingProxyType(
    {
        "parser": PARSER_PACKAGE,
        "parserOptions": PARSER_OPTIONS,
        "globals": GLOBALS,
    }
)

# Plugin namespace -> npm package providing it.
PLUGINS: Final[MappingProxyType[str, str]] = MappingProxyType(
    {
        "@typescript-eslint": "@typescript-eslint/eslint-plugin",
        "react": "eslint-plugin-react",
        "react-hooks": "eslint-plugin-react-hooks",
        "jsx-a11y": "eslint-plugin-jsx-a11y",
        "import": "eslint-plugin-import",
    }
)

SETTINGS: Final[MappingProxyType[str, Any]] = freeze(
    {
        "react": {"version": "detect"},
        "import/resolver": {
            "typescript": {"alwaysTryTypes": True, "project": "./tsconfig.json"},
            "node": {"extensions": [".js", ".jsx", ".ts", ".tsx"]},
        },
    }
)

# Shareable configs extended by the legacy ``.eslintrc`` rendering.
LEGACY_EXTENDS: Final[tuple[str, ...]] = (
    "eslint:recommended",
    "plugin:@typescript-eslint/recommended",
    "plugin:react/recommended",
    "plugin:react-hooks/recommended",
    "plugin:jsx-a11y/recommended",
    "plugin:import/errors",
    "plugin:import/warnings",
    "plugin:import/typescript",
    "airbnb",
)

__all__ = [
    "GLOBALS",
    "LANGUAGE_OPTIONS",
    "LEGACY_EXTENDS",
    "PARSER_OPTIONS",
    "PARSER_PACKAGE",
    "PLUGINS",
    "SETTINGS",
]
