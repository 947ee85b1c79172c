# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry points."""

from __future__ import annotations

from .commands import export_app, lint_app

app = lint_app
config_app = export_app


def main() -> None:
    """Run the ``apx-lint`` console script."""

    app()


def config_main() -> None:
    """Run the ``apx-lint-config`` console script."""

    config_app()


__all__ = ["app", "config_app", "config_main", "main"]
