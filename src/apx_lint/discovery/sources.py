# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Concrete discovery sources for project settings and ignore patterns.

Every source either returns a result or ``None``. ``None`` means the file is
missing or could not be read or decoded, and discovery moves on to the next
candidate. A document that decodes always wins, even when its shape is wrong.
Sources never raise and never log.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from collections.abc import Iterable
from pathlib import Path
from typing import Any, Final, Generic, TypeVar

from pydantic import ValidationError

from .models import IgnoreDocument, ProjectSettings

SETTINGS_FILENAME: Final[str] = ".apxlintrc.json"
SETTINGS_DOTFILE: Final[str] = ".apxlintrc"
PACKAGE_MANIFEST: Final[str] = "package.json"
PACKAGE_SECTION_KEY: Final[str] = "apxlint"
JSON_IGNORE_FILENAME: Final[str] = "ignore.apxlintrc"
PLAIN_IGNORE_FILENAME: Final[str] = ".apxlintignore"

ResultT = TypeVar("ResultT")


def _read_text(path: Path) -> str | None:
    """Return the UTF-8 contents of ``path`` or ``None`` when unavailable."""

    if not path.is_file():
        return None
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None


def _read_json(path: Path) -> tuple[bool, Any]:
    """Return ``(decoded, payload)`` for the JSON document at ``path``."""

    content = _read_text(path)
    if content is None:
        return False, None
    try:
        return True, json.loads(content)
    except json.JSONDecodeError:
        return False, None


def _settings_or_empty(payload: Any) -> ProjectSettings:
    """Validate a decoded settings document.

    A document that decoded but does not describe settings still wins
    discovery; it simply configures nothing.
    """

    if not isinstance(payload, dict):
        return ProjectSettings()
    try:
        return ProjectSettings.model_validate(payload)
    except ValidationError:
        return ProjectSettings()


def parse_ignore_lines(content: str) -> tuple[str, ...]:
    """Parse newline-separated ignore patterns.

    Lines are trimmed; blank lines and ``#`` comments are dropped and the
    remaining order is preserved.

    Args:
        content: Raw ignore file text.

    Returns:
        tuple[str, ...]: Patterns in file order.
    """

    stripped = (line.strip() for line in content.splitlines())
    return tuple(line for line in stripped if line and not line.startswith("#"))


class DiscoverySource(ABC, Generic[ResultT]):
    """Base class for a single candidate file probed during discovery."""

    filename: str

    def __init__(self, root: Path) -> None:
        self.path = root / self.filename

    @property
    def name(self) -> str:
        """Return the file name probed by this source."""

        return self.filename

    @abstractmethod
    def load(self) -> ResultT | None:
        """Return the parsed result or ``None`` to fall through."""

    def describe(self) -> str:
        return f"{self.filename} ({self.path})"


class JsonSettingsSource(DiscoverySource[ProjectSettings]):
    """Read settings from a standalone JSON document."""

    def __init__(self, root: Path, filename: str = SETTINGS_FILENAME) -> None:
        self.filename = filename
        super().__init__(root)

    def load(self) -> ProjectSettings | None:
        decoded, payload = _read_json(self.path)
        if not decoded:
            return None
        return _settings_or_empty(payload)


class PackageJsonSettingsSource(DiscoverySource[ProjectSettings]):
    """Read settings from the ``apxlint`` field of ``package.json``."""

    filename = PACKAGE_MANIFEST

    def load(self) -> ProjectSettings | None:
        decoded, payload = _read_json(self.path)
        if not decoded or not isinstance(payload, dict):
            return None
        section = payload.get(PACKAGE_SECTION_KEY)
        if section is None:
            return None
        return _settings_or_empty(section)

    def describe(self) -> str:
        return f"{self.filename}#{PACKAGE_SECTION_KEY} ({self.path})"


class JsonIgnoreSource(DiscoverySource[tuple[str, ...]]):
    """Read ``ignore.apxlintrc``, as JSON when possible and as lines otherwise."""

    filename = JSON_IGNORE_FILENAME

    def load(self) -> tuple[str, ...] | None:
        content = _read_text(self.path)
        if content is None:
            return None
        try:
            payload = json.loads(content)
        except json.JSONDecodeError:
            return parse_ignore_lines(content)
        if not isinstance(payload, dict):
            return ()
        try:
            return IgnoreDocument.model_validate(payload).patterns
        except ValidationError:
            return ()


class PlainIgnoreSource(DiscoverySource[tuple[str, ...]]):
    """Read ``.apxlintignore`` as gitignore-style lines."""

    filename = PLAIN_IGNORE_FILENAME

    def load(self) -> tuple[str, ...] | None:
        content = _read_text(self.path)
        if content is None:
            return None
        return parse_ignore_lines(content)


def settings_sources(root: Path) -> tuple[DiscoverySource[ProjectSettings], ...]:
    """Return the ordered settings candidates for ``root``."""

    return (
        JsonSettingsSource(root, SETTINGS_FILENAME),
        JsonSettingsSource(root, SETTINGS_DOTFILE),
        PackageJsonSettingsSource(root),
    )


def ignore_sources(root: Path) -> tuple[DiscoverySource[tuple[str, ...]], ...]:
    """Return the ordered ignore-file candidates for ``root``."""

    return (JsonIgnoreSource(root), PlainIgnoreSource(root))


def first_result(
    sources: Iterable[DiscoverySource[ResultT]],
) -> tuple[ResultT, DiscoverySource[ResultT]] | None:
    """Return the first non-``None`` result together with the source that produced it.

    Args:
        sources: Candidates in order of precedence.

    Returns:
        tuple[ResultT, DiscoverySource[ResultT]] | None: Winning result and
        source, or ``None`` when every candidate falls through.
    """

    for source in sources:
        result = source.load()
        if result is not None:
            return result, source
    return None


__all__ = [
    "DiscoverySource",
    "JSON_IGNORE_FILENAME",
    "JsonIgnoreSource",
    "JsonSettingsSource",
    "PACKAGE_MANIFEST",
    "PACKAGE_SECTION_KEY",
    "PLAIN_IGNORE_FILENAME",
    "PackageJsonSettingsSource",
    "PlainIgnoreSource",
    "SETTINGS_DOTFILE",
    "SETTINGS_FILENAME",
    "first_result",
    "ignore_sources",
    "parse_ignore_lines",
    "settings_sources",
]
