# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""apx-lint CLI package exports."""

from __future__ import annotations

from typing import Final

from .app import app, config_app, config_main, main

__all__: Final[list[str]] = ["app", "config_app", "config_main", "main"]
