# Copyright (c) 2026 human-utils contributors
# SPDX-License-Identifier: Apache-2.0
"""Options accepted by every command."""

import typer

from human_utils import __version__


def _version_callback(ctx: typer.Context, value: bool) -> None:
    if value:
        typer.echo(f"{ctx.find_root().info_name} (human-utils) {__version__}")
        raise typer.Exit()


def force_option():
    return typer.Option(False, "--force", "-f", help="Do not ask for confirmation")


def silent_option():
    return typer.Option(
        False, "--silent", "-s", help="Do not print status lines (messages and errors still are)"
    )


def dry_run_option():
    return typer.Option(
        False, "--dry-run", "-n", help="Show what would happen without changing anything"
    )


def color_option():
    return typer.Option(
        None,
        "--color/--no-color",
        help="Force colored output on or off (default: config, then terminal detection)",
        show_default=False,
    )


def version_option():
    return typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    )
