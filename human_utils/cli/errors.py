# Copyright (c) 2026 human-utils contributors
# SPDX-License-Identifier: Apache-2.0
"""Exception handling helpers for CLI commands."""

from typing import Any, Callable

import typer

from human_utils.cli.context import CliConfigError, CLIContext, get_cli_context
from human_utils.cli.output import output_error
from human_utils.core.entries import quote_path
from human_utils.exceptions import DeclinedError, HumanUtilsError, NotFoundError
from human_utils.utils.config import HUMAN_UTILS_CONFIG_ENV


def handle_command_error(ctx: CLIContext, exc: Exception) -> None:
    """Normalize command exceptions into user-facing output and exit codes."""
    if isinstance(exc, typer.Exit):
        raise exc

    if isinstance(exc, DeclinedError):
        raise typer.Exit(1)

    elif isinstance(exc, CliConfigError):
        output_error(
            ctx,
            message=str(exc),
            code="CLI_CONFIG",
            details={"env": HUMAN_UTILS_CONFIG_ENV},
        )

    elif isinstance(exc, NotFoundError):
        output_error(
            ctx,
            heading=f"Error for {quote_path(exc.path)}",
            message=exc.message,
            code=exc.code,
            details=exc.details,
        )

    elif isinstance(exc, HumanUtilsError):
        output_error(
            ctx,
            message=exc.message,
            code=exc.code,
            details=exc.details,
        )

    elif isinstance(exc, OSError):
        heading = f"Error for {quote_path(exc.filename)}" if exc.filename else "Error"
        output_error(
            ctx,
            heading=heading,
            message=exc.strerror or str(exc),
            code="IO_ERROR",
            details={"errno": exc.errno},
        )

    else:
        output_error(
            ctx,
            message=str(exc),
            code="CLI_ERROR",
            details={"exception": type(exc).__name__},
        )


def run(
    ctx: typer.Context,
    fn: Callable[[CLIContext], Any],
    **options: Any,
) -> None:
    """Execute a command with boilerplate: context → execute → error mapping."""
    cli_ctx = CLIContext()
    try:
        cli_ctx = get_cli_context(ctx, **options)
        fn(cli_ctx)
    except Exception as exc:  # noqa: BLE001
        handle_command_error(cli_ctx, exc)
