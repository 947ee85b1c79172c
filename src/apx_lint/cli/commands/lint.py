# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""The ``apx-lint`` command: discover project settings and run ESLint."""

from __future__ import annotations

from typing import Annotated

import typer

from ...metadata import resolve_version
from ..models import build_lint_options, classify_tokens
from ..rendering import render_help, render_version
from ..services import execute_lint, plan_lint
from ..shared import CLIError, build_cli_logger

lint_app = typer.Typer(
    name="apx-lint",
    help="Convenient wrapper for ESLint with customizable paths.",
    add_completion=False,
    pretty_exceptions_enable=False,
)


@lint_app.command(
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
    add_help_option=False,
)
def lint_command(
    tokens: Annotated[
        list[str] | None,
        typer.Argument(
            metavar="[--fix] [--help|-h] [--version|-v] [PATH]...",
            help="Flags and files, directories or globs to lint.",
            show_default=False,
        ),
    ] = None,
) -> None:
    """Lint the project with ESLint.

    Options are recognised by exact token match rather than by Click so that
    unknown flags, ``--flag=value`` forms and tokens after ``--`` behave like
    any other argument.

    Args:
        tokens: Every command-line token, in order.

    Raises:
        typer.Exit: Always raised to terminate the command with an exit status.
    """

    arguments = classify_tokens(tokens)
    logger = build_cli_logger()
    if arguments.show_help:
        render_help(logger.console)
        raise typer.Exit(code=0)
    if arguments.show_version:
        render_version(logger.console, resolve_version())
        raise typer.Exit(code=0)

    options = build_lint_options(arguments)
    plan = plan_lint(options)
    try:
        exit_code = execute_lint(plan, logger=logger)
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc
    raise typer.Exit(code=exit_code)


__all__ = ["lint_app", "lint_command"]
