# Copyright (c) 2026 human-utils contributors
# SPDX-License-Identifier: Apache-2.0
"""``nam``: rename a single file or directory."""

from typing import Optional

import typer

from human_utils.cli.context import CLIContext
from human_utils.cli.errors import run
from human_utils.cli.options import (
    color_option,
    dry_run_option,
    force_option,
    silent_option,
    version_option,
)
from human_utils.cli.output import echo_info, echo_status
from human_utils.cli.prompt import confirm_replace
from human_utils.core.entries import quote_path
from human_utils.core.operations import move_entry
from human_utils.core.transfer import plan_transfer


def rename_path(ctx: CLIContext, source: str, destination: str) -> None:
    plan = plan_transfer([source], destination, to=True, verb="rename")
    for message in plan.infos:
        echo_info(ctx, message)

    if plan.replaced and not ctx.force:
        confirm_replace(ctx, plan.replaced)

    for transfer in plan.transfers:
        move_entry(transfer.source, transfer.destination, transfer.replaced, dry_run=ctx.dry_run)
        echo_status(
            ctx, f"{quote_path(transfer.source.path)} -> {quote_path(transfer.destination)}"
        )


def register(app: typer.Typer, name: str = "nam") -> None:
    """Register the rename command under ``name``."""

    @app.command(name, context_settings={"help_option_names": ["-h", "--help"]})
    def name_command(
        ctx: typer.Context,
        source: str = typer.Argument(..., metavar="SOURCE_PATH"),
        destination: str = typer.Argument(..., metavar="DESTINATION_PATH"),
        force: bool = force_option(),
        silent: bool = silent_option(),
        dry_run: bool = dry_run_option(),
        color: Optional[bool] = color_option(),
        version: Optional[bool] = version_option(),
    ) -> None:
        """Rename a file or directory."""
        run(
            ctx,
            lambda cli_ctx: rename_path(cli_ctx, source, destination),
            force=force,
            silent=silent,
            dry_run=dry_run,
            color=color,
        )
