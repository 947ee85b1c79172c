# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Pydantic models describing project settings and ignore documents."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _coerce_patterns(value: Any) -> Any:
    """Return ``value`` as a sequence of patterns, ``None`` when empty."""

    if value is None:
        return None
    if isinstance(value, str):
        return (value,) if value else None
    if isinstance(value, Sequence) and not value:
        return None
    return value


class ProjectSettings(BaseModel):
    """Settings read from ``.apxlintrc.json``, ``.apxlintrc`` or ``package.json``."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    paths: tuple[str, ...] | None = None

    @field_validator("paths", mode="before")
    @classmethod
    def _normalise_paths(cls, value: Any) -> Any:
        """Accept a single glob string in place of a list."""

        return _coerce_patterns(value)


class IgnoreDocument(BaseModel):
    """JSON variant of the ignore file."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    ignore: tuple[str, ...] | None = None
    ignore_patterns: tuple[str, ...] | None = Field(default=None, alias="ignorePatterns")

    @property
    def patterns(self) -> tuple[str, ...]:
        """Return ``ignore`` when present, otherwise ``ignorePatterns``."""

        if self.ignore is not None:
            return self.ignore
        return self.ignore_patterns or ()


__all__ = ["IgnoreDocument", "ProjectSettings"]
