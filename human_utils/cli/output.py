# Copyright (c) 2026 human-utils contributors
# SPDX-License-Identifier: Apache-2.0
"""CLI output helpers."""

import os
from typing import Any, Dict, Optional

import typer

from human_utils.cli.context import CLIContext
from human_utils.core.entries import display_path
from human_utils.utils.logger import get_logger

logger = get_logger(__name__)

NEW_COLOR = typer.colors.BRIGHT_GREEN
DELETED_COLOR = typer.colors.BRIGHT_RED


def new_path(path: str, existing_ancestor: str = "", is_dir: bool = False) -> str:
    """Render ``path`` with the part that does not exist yet highlighted."""
    shown = display_path(path, is_dir)
    if shown.startswith('"'):
        return typer.style(shown, fg=NEW_COLOR)

    if existing_ancestor:
        prefix = existing_ancestor
        if not prefix.endswith(os.sep):
            prefix += os.sep
        if shown.startswith(prefix):
            return prefix + typer.style(shown[len(prefix) :], fg=NEW_COLOR)
    return typer.style(shown, fg=NEW_COLOR)


def status_line(tag: str, path: str, existing_ancestor: str = "", is_dir: bool = False) -> str:
    """``N``/``M`` line for a created or overwritten entry."""
    return typer.style(tag, fg=NEW_COLOR) + " " + new_path(path, existing_ancestor, is_dir)


def deleted_line(path: str, is_dir: bool = False) -> str:
    return typer.style(f"D {display_path(path, is_dir)}", fg=DELETED_COLOR)


def transfer_line(
    tag: str,
    source: str,
    destination: str,
    existing_ancestor: str = "",
    source_is_dir: bool = False,
) -> str:
    """``M a -> b`` line: the old location in red, the new part in green."""
    return (
        typer.style(tag, fg=NEW_COLOR)
        + " "
        + typer.style(display_path(source, source_is_dir), fg=DELETED_COLOR)
        + " -> "
        + new_path(destination, existing_ancestor, source_is_dir)
    )


def echo_status(ctx: CLIContext, line: str) -> None:
    """Print a status line unless ``--silent`` was given."""
    if ctx.silent:
        return
    typer.echo(line, color=ctx.color)


def echo_info(ctx: CLIContext, message: str) -> None:
    """Print an informational message. Shown even with ``--silent``."""
    typer.echo(message, color=ctx.color)


def echo_warning(ctx: CLIContext, message: str) -> None:
    typer.echo(message, err=True, color=ctx.color)


def output_error(
    ctx: CLIContext,
    *,
    message: str,
    code: str,
    exit_code: int = 1,
    heading: str = "Error",
    details: Optional[Dict[str, Any]] = None,
) -> None:
    """Print ``<heading>: <message>`` to stderr then exit."""
    logger.debug("error %s: %s %s", code, message, details or {})
    typer.echo(f"{heading}: {message}", err=True, color=ctx.color)
    raise typer.Exit(exit_code)
