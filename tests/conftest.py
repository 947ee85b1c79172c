# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from apx_lint.eslint import ESLintInvocation


@pytest.fixture
def project_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty project directory."""

    root = tmp_path / "project"
    root.mkdir()
    monkeypatch.chdir(root)
    monkeypatch.delenv("APX_LINT_DEBUG", raising=False)
    return root.resolve()


@pytest.fixture
def eslint_calls(monkeypatch: pytest.MonkeyPatch) -> list[tuple[ESLintInvocation, Path]]:
    """Replace the ESLint launcher with a recorder that reports success."""

    calls: list[tuple[ESLintInvocation, Path]] = []

    def fake_run(invocation: ESLintInvocation, *, cwd: Path) -> int:
        calls.append((invocation, cwd))
        return 0

    monkeypatch.setattr("apx_lint.cli.services.run_eslint", fake_run)
    return calls
