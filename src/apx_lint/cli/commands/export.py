# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""The ``apx-lint-config`` command: print a preset as JSON."""

from __future__ import annotations

from dataclasses import replace
from typing import Annotated

import typer

from ...config import (
    DEFAULT_PRESET,
    PRESETS,
    ConfigFormat,
    LintConfig,
    build_config_from,
    disable_rules,
    get_preset,
    get_preset_options,
    merge_rule_tables,
)
from ..rendering import render_rule_summary
from ..shared import CLIError, build_cli_logger

export_app = typer.Typer(
    name="apx-lint-config",
    help="Print an apx-lint preset as JSON.",
    add_completion=False,
    pretty_exceptions_enable=False,
)


def _select_config(preset: str, disabled: list[str] | None) -> LintConfig:
    """Return the named preset with ``disabled`` rules switched off.

    Raises:
        CLIError: If ``preset`` is not a known preset name.
    """

    try:
        options = get_preset_options(preset)
    except KeyError as exc:
        raise CLIError(exc.args[0], exit_code=2) from exc
    if not disabled:
        return get_preset(preset)
    rules = merge_rule_tables(options.rules, disable_rules(*disabled))
    return build_config_from(replace(options, rules=rules))


@export_app.command()
def export_command(
    preset: Annotated[
        str,
        typer.Option("--preset", "-p", help="Preset to print (recommended, strict or relaxed)."),
    ] = DEFAULT_PRESET,
    fmt: Annotated[
        ConfigFormat,
        typer.Option("--format", "-f", case_sensitive=False, help="Flat config or legacy .eslintrc shape."),
    ] = ConfigFormat.FLAT,
    disable: Annotated[
        list[str] | None,
        typer.Option("--disable", "-d", help="Rule to switch off (repeatable)."),
    ] = None,
    summary: Annotated[
        bool,
        typer.Option("--summary", help="Print rule counts per severity for every preset instead."),
    ] = False,
) -> None:
    """Print a preset configuration.

    Args:
        preset: Name of the preset to print.
        fmt: Output shape.
        disable: Rule identifiers forced off in the printed configuration.
        summary: Whether to print a per-severity summary of all presets.

    Raises:
        typer.Exit: Raised with a non-zero status when the preset is unknown.
    """

    logger = build_cli_logger()
    if summary:
        render_rule_summary(logger.console, PRESETS)
        return
    try:
        config = _select_config(preset, disable)
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc
    typer.echo(config.render(fmt))


__all__ = ["export_app", "export_command"]
