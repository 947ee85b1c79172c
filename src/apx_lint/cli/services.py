# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helper services for the apx-lint CLI."""

from __future__ import annotations

import shlex
from dataclasses import dataclass

from ..discovery import ProjectDiscovery, discover_project, resolve_target_paths
from ..eslint import (
    ESLintInvocation,
    ESLintLaunchError,
    build_eslint_args,
    resolve_eslint_executable,
    run_eslint,
)
from .models import LintCLIOptions
from .rendering import render_footer, render_header, render_summary
from .shared import CLIError, CLILogger


@dataclass(slots=True, frozen=True)
class LintPlan:
    """Everything resolved before ESLint is launched."""

    options: LintCLIOptions
    discovery: ProjectDiscovery
    paths: tuple[str, ...]
    invocation: ESLintInvocation


def plan_lint(options: LintCLIOptions) -> LintPlan:
    """Resolve settings, ignore patterns, paths and the ESLint command line.

    Args:
        options: Classified command-line options.

    Returns:
        LintPlan: Resolved plan for a single ESLint run.
    """

    discovery = discover_project(options.root)
    paths = resolve_target_paths(options.paths, discovery.settings)
    arguments = build_eslint_args(
        fix=options.fix,
        ignore_patterns=discovery.ignore_patterns,
        paths=paths,
    )
    invocation = ESLintInvocation(
        executable=resolve_eslint_executable(options.root),
        arguments=arguments,
    )
    return LintPlan(options=options, discovery=discovery, paths=paths, invocation=invocation)


def _log_plan(plan: LintPlan, *, logger: CLILogger) -> None:
    discovery = plan.discovery
    logger.debug(f"root={plan.options.root}")
    logger.debug(f"settings={discovery.settings_source or '<none>'} ignore={discovery.ignore_source or '<none>'}")
    if plan.options.ignored_flags:
        logger.debug(f"ignored_flags={','.join(plan.options.ignored_flags)}")
    logger.debug(f"command={shlex.join(plan.invocation.argv)}")


def execute_lint(plan: LintPlan, *, logger: CLILogger) -> int:
    """Run ESLint for ``plan`` and return its exit status.

    Args:
        plan: Resolved lint plan.
        logger: Logger used for banners and debug output.

    Returns:
        int: ESLint's exit status, relayed unchanged.

    Raises:
        CLIError: If ESLint cannot be launched; carries exit code ``1``.
    """

    _log_plan(plan, logger=logger)
    render_header(logger.console, fix=plan.options.fix)
    render_summary(
        logger.console,
        fix=plan.options.fix,
        paths=plan.paths,
        ignore_patterns=plan.discovery.ignore_patterns,
    )
    try:
        exit_code = run_eslint(plan.invocation, cwd=plan.options.root)
    except ESLintLaunchError as exc:
        raise CLIError(f"Error running ESLint: {exc.reason}", exit_code=1) from exc
    render_footer(logger.console, success=exit_code == 0)
    return exit_code


__all__ = ["LintPlan", "execute_lint", "plan_lint"]
