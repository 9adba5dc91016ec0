"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
entity lookups and normalized text.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import PanelStageError


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, PanelStageError):
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


def echo_entity(name: str, code_point: int) -> None:
    """Print one entity lookup row: reference, code point and character."""

    typer.echo(f"&{name}; U+{code_point:04X} {chr(code_point)}")


def echo_normalized_text(text: str) -> None:
    """Print normalized text with `\\r` breaks shown as newlines."""

    typer.echo(text.replace("\r", "\n"))
