# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI tests for the apx-lint command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from apx_lint.cli import app
from apx_lint.cli.models import LintArguments, classify_tokens
from apx_lint.discovery import DEFAULT_PATHS
from apx_lint.eslint import ESLintInvocation, ESLintLaunchError

Calls = list[tuple[ESLintInvocation, Path]]


def test_help_prints_usage_without_running_eslint(project_root: Path, eslint_calls: Calls) -> None:
    runner = CliRunner()

    for flag in ("--help", "-h"):
        result = runner.invoke(app, [flag])

        assert result.exit_code == 0, result.output
        assert "apx-lint [options] [path ...]" in result.output
        assert "--ignore-pattern" not in result.output
        assert ".apxlintignore" in result.output
    assert eslint_calls == []


def test_version_prints_title_and_version(
    project_root: Path,
    eslint_calls: Calls,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr("apx_lint.cli.commands.lint.resolve_version", lambda: "1.0.0")
    runner = CliRunner()

    for flag in ("--version", "-v"):
        result = runner.invoke(app, [flag])

        assert result.exit_code == 0, result.output
        assert "APX Lint v1.0.0" in result.output
    assert eslint_calls == []


def test_help_takes_precedence_over_version(project_root: Path, eslint_calls: Calls) -> None:
    result = CliRunner().invoke(app, ["--version", "--help"])

    assert result.exit_code == 0
    assert "Usage:" in result.output
    assert "APX Lint v" not in result.output


def test_default_paths_are_linted_without_configuration(project_root: Path, eslint_calls: Calls) -> None:
    result = CliRunner().invoke(app, [])

    assert result.exit_code == 0, result.output
    invocation, cwd = eslint_calls[0]
    assert invocation.executable == ("npx", "eslint")
    assert invocation.arguments == DEFAULT_PATHS
    assert cwd == project_root
    assert "Checking Code Quality" in result.output
    assert "Mode: Check" in result.output
    assert "Linting completed!" in result.output


def test_configured_paths_replace_defaults(project_root: Path, eslint_calls: Calls) -> None:
    (project_root / ".apxlintrc.json").write_text(
        json.dumps({"paths": ["src/**/*.{ts,tsx}", "lib/**/*.{ts,tsx}"]}),
        encoding="utf-8",
    )

    result = CliRunner().invoke(app, [])

    assert result.exit_code == 0, result.output
    assert eslint_calls[0][0].arguments == ("src/**/*.{ts,tsx}", "lib/**/*.{ts,tsx}")


def test_command_line_paths_win_over_configuration(project_root: Path, eslint_calls: Calls) -> None:
    (project_root / ".apxlintrc").write_text(json.dumps({"paths": ["lib/"]}), encoding="utf-8")

    result = CliRunner().invoke(app, ["src/components", "src/hooks"])

    assert result.exit_code == 0, result.output
    assert eslint_calls[0][0].arguments == ("src/components", "src/hooks")


def test_fix_and_ignore_patterns_precede_paths(project_root: Path, eslint_calls: Calls) -> None:
    (project_root / ".apxlintignore").write_text("node_modules/\n# comment\n\ndist/\n", encoding="utf-8")

    result = CliRunner().invoke(app, ["src/", "--fix"])

    assert result.exit_code == 0, result.output
    assert eslint_calls[0][0].arguments == (
        "--fix",
        "--ignore-pattern",
        "node_modules/",
        "--ignore-pattern",
        "dist/",
        "src/",
    )
    assert "Auto-fixing Issues" in result.output
    assert "Mode: Fix" in result.output
    assert "Ignoring: 2 pattern(s)" in result.output


def test_unknown_flags_are_tolerated_and_not_forwarded(project_root: Path, eslint_calls: Calls) -> None:
    result = CliRunner().invoke(app, ["--cache", "lib/", "--max-warnings=0"])

    assert result.exit_code == 0, result.output
    assert eslint_calls[0][0].arguments == ("lib/",)
    assert "--cache" not in result.output


def test_flag_with_inline_value_is_tolerated(project_root: Path, eslint_calls: Calls) -> None:
    result = CliRunner().invoke(app, ["--fix=1", "a"])

    assert result.exit_code == 0, result.output
    assert eslint_calls[0][0].arguments == ("a",)
    assert "Checking Code Quality" in result.output


def test_help_after_double_dash_still_prints_usage(project_root: Path, eslint_calls: Calls) -> None:
    result = CliRunner().invoke(app, ["--", "--help"])

    assert result.exit_code == 0, result.output
    assert "Usage:" in result.output
    assert eslint_calls == []


def test_combined_short_flags_are_treated_as_a_path(project_root: Path, eslint_calls: Calls) -> None:
    result = CliRunner().invoke(app, ["src", "-hv"])

    assert result.exit_code == 0, result.output
    assert "Usage:" not in result.output
    assert eslint_calls[0][0].arguments == ("src", "-hv")


def test_classify_tokens_matches_flags_exactly() -> None:
    arguments = classify_tokens(["src/", "--fix", "--cache", "-hv", "--fix=1", "", "-v"])

    assert arguments == LintArguments(
        show_help=False,
        show_version=True,
        fix=True,
        paths=("src/", "-hv"),
        ignored_flags=("--cache", "--fix=1"),
    )
    assert classify_tokens(None) == LintArguments(show_help=False, show_version=False, fix=False, paths=())


def test_local_eslint_binary_is_preferred(project_root: Path, eslint_calls: Calls) -> None:
    bin_dir = project_root / "node_modules" / ".bin"
    bin_dir.mkdir(parents=True)
    (bin_dir / "eslint").write_text("#!/bin/sh\n", encoding="utf-8")

    result = CliRunner().invoke(app, [])

    assert result.exit_code == 0, result.output
    assert eslint_calls[0][0].executable == (str((bin_dir / "eslint").resolve()),)


def test_eslint_exit_status_is_relayed(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("apx_lint.cli.services.run_eslint", lambda invocation, *, cwd: 2)

    result = CliRunner().invoke(app, [])

    assert result.exit_code == 2
    assert "Linting completed with issues" in result.output


def test_launch_failure_exits_with_status_one(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def fail_launch(invocation: ESLintInvocation, *, cwd: Path) -> int:
        raise ESLintLaunchError(invocation.argv, "Executable 'npx' was not found on PATH")

    monkeypatch.setattr("apx_lint.cli.services.run_eslint", fail_launch)

    result = CliRunner().invoke(app, [])

    assert result.exit_code == 1
    assert "Error running ESLint: Executable 'npx' was not found on PATH" in result.output
    assert "Linting completed" not in result.output


def test_debug_environment_variable_prints_command(
    project_root: Path,
    eslint_calls: Calls,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("APX_LINT_DEBUG", "1")
    (project_root / ".apxlintignore").write_text("dist/\n", encoding="utf-8")

    result = CliRunner().invoke(app, ["--cache", "src/"])

    assert result.exit_code == 0, result.output
    assert "[debug]" in result.output
    assert "ignored_flags=--cache" in result.output
    assert "ignore=.apxlintignore" in result.output
    assert "command=npx eslint --ignore-pattern dist/ src/" in result.output
