# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Console rendering for the apx-lint commands."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Final

from rich import box
from rich.console import Console, Group
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

from ..config import LintConfig, count_by_severity
from ..metadata import PROJECT_TITLE
from ..severity import Severity

RULE_WIDTH: Final[int] = 60

_USAGE_OPTIONS: Final[tuple[tuple[str, str], ...]] = (
    ("--fix", "Auto-fix linting errors"),
    ("--help, -h", "Show this help message"),
    ("--version, -v", "Show version number"),
)

_USAGE_EXAMPLES: Final[tuple[tuple[str, str], ...]] = (
    ("apx-lint", "Lint default paths"),
    ("apx-lint --fix", "Lint and auto-fix default paths"),
    ("apx-lint src/", "Lint specific directory"),
    ('apx-lint --fix "src/**/*.{ts,tsx}"', "Lint and fix with custom pattern"),
)

_SETTINGS_EXAMPLE: Final[str] = """{
  "paths": ["src/**/*.{ts,tsx}", "lib/**/*.{ts,tsx}"]
}"""

_IGNORE_EXAMPLE: Final[str] = """node_modules/
dist/
build/
*.min.js"""


def _heading(title: str) -> Text:
    return Text(f"\n{title}", style="bold")


def _two_column(rows: Sequence[tuple[str, str]], *, left_style: str) -> Table:
    table = Table(box=None, show_header=False, padding=(0, 2), pad_edge=False)
    table.add_column(style=left_style, no_wrap=True)
    table.add_column()
    for left, right in rows:
        table.add_row(Text(left), Text(right))
    return table


def render_help(console: Console) -> None:
    """Print the apx-lint usage text.

    Args:
        console: Console receiving the help output.
    """

    console.print(
        Panel(
            Text(f"{PROJECT_TITLE} CLI", justify="center", style="bold"),
            box=box.DOUBLE,
            border_style="cyan",
            width=RULE_WIDTH + 6,
        )
    )
    console.print(_heading("Usage:"))
    console.print(Text("  apx-lint [options] [path ...]"))
    console.print(_heading("Options:"))
    console.print(_two_column(_USAGE_OPTIONS, left_style="green"))
    console.print(_heading("Examples:"))
    console.print(_two_column([(cmd, f"# {note}") for cmd, note in _USAGE_EXAMPLES], left_style="yellow"))
    console.print(_heading("Configuration:"))
    console.print(Text("  Create .apxlintrc.json (or .apxlintrc, or an \"apxlint\" field in package.json)"))
    console.print(Text("  in your project root to customize default paths:"))
    console.print(Text(_SETTINGS_EXAMPLE), style="dim")
    console.print(_heading("Ignore Patterns:"))
    console.print(Text("  Create ignore.apxlintrc (JSON or plain text) or .apxlintignore to exclude files:"))
    console.print(Text(_IGNORE_EXAMPLE), style="dim")
    console.print()


def render_version(console: Console, version: str) -> None:
    """Print the project title and version."""

    console.print(Text(f"{PROJECT_TITLE} v{version}", style="bold cyan"))


def render_header(console: Console, *, fix: bool) -> None:
    """Print the banner shown before ESLint runs."""

    message = "Auto-fixing Issues" if fix else "Checking Code Quality"
    console.print(Rule(style="bright_green", characters="="))
    console.print(Text(f"🚀 {PROJECT_TITLE} - {message}", style="bright_green"))
    console.print(Rule(style="bright_green", characters="="))


def render_footer(console: Console, *, success: bool) -> None:
    """Print the banner shown after ESLint exits."""

    console.print(Rule(style="bright_green", characters="="))
    if success:
        console.print(Text(f"✅ {PROJECT_TITLE} - Linting completed!", style="bright_green"))
    else:
        console.print(Text(f"⚠️  {PROJECT_TITLE} - Linting completed with issues", style="yellow"))
    console.print(Rule(style="bright_green", characters="="))


def render_summary(
    console: Console,
    *,
    fix: bool,
    paths: Sequence[str],
    ignore_patterns: Sequence[str],
) -> None:
    """Print the boxed summary of the resolved invocation.

    Args:
        console: Console receiving the summary.
        fix: Whether ESLint runs in fix mode.
        paths: Target paths forwarded to ESLint.
        ignore_patterns: Ignore patterns forwarded to ESLint.
    """

    lines = [
        Text.assemble(("Mode: ", "cyan"), ("Fix", "green") if fix else ("Check", "blue")),
        Text.assemble(("Paths: ", "cyan"), (", ".join(paths), "yellow")),
    ]
    if ignore_patterns:
        lines.append(Text.assemble(("Ignoring: ", "cyan"), (f"{len(ignore_patterns)} pattern(s)", "yellow")))
    console.print(Panel(Group(*lines), box=box.ROUNDED, border_style="cyan", expand=False, padding=(0, 2)))
    console.print(Text("\n🔍 Running ESLint...\n", style="bold cyan"))


def render_rule_summary(console: Console, presets: Mapping[str, LintConfig]) -> None:
    """Print a table counting rules per severity for each preset.

    Args:
        console: Console receiving the table.
        presets: Named configurations to summarise.
    """

    table = Table(title="Rule severities", box=box.SIMPLE, expand=False)
    table.add_column("Preset", style="bold")
    for severity in Severity:
        table.add_column(severity.value.capitalize(), justify="right")
    table.add_column("Total", justify="right")
    for name, config in presets.items():
        counts = count_by_severity(config.rules)
        table.add_row(
            name,
            *(str(counts[severity]) for severity in Severity),
            str(len(config.rules)),
        )
    console.print(table)


__all__ = [
    "render_footer",
    "render_header",
    "render_help",
    "render_rule_summary",
    "render_summary",
    "render_version",
]
