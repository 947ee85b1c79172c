# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command registry."""

from __future__ import annotations

from .export import export_app
from .lint import lint_app

__all__ = ["export_app", "lint_app"]
