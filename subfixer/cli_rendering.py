"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics
and fix summaries.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import FixStageError
from .pipeline import FixResult


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, FixStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_fix_summary(result: FixResult) -> None:
    """Print output path and rewrite counters for one fixed file."""

    typer.echo(f"Fixed subtitle: {result.output_path}")
    typer.echo(f"Lines: {result.report.line_count}")
    typer.echo(f"Dialogue lines: {result.report.dialogue_line_count}")
    typer.echo(f"Localized digits: {result.report.localized_digit_count}")
