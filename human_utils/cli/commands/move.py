# Copyright (c) 2026 human-utils contributors
# SPDX-License-Identifier: Apache-2.0
"""``mov``/``ren``: move or rename files and directories."""

from typing import Callable, List, Optional

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
from human_utils.cli.output import echo_info, echo_status, transfer_line
from human_utils.cli.prompt import confirm_replace
from human_utils.core.operations import move_entry
from human_utils.core.transfer import plan_transfer
from human_utils.exceptions import InvalidArgumentError

MOVED_TAG = "M"


def transfer_paths(
    ctx: CLIContext,
    paths: List[str],
    into: bool,
    to: bool,
    verb: str,
    tag: str,
    operation: Callable,
) -> None:
    """Shared body of mov and cop: the last path is the destination."""
    if len(paths) < 2:
        raise InvalidArgumentError(
            f"Expected at least 2 arguments (SOURCE_PATH... DESTINATION_PATH), got {len(paths)}"
        )

    plan = plan_transfer(paths[:-1], paths[-1], into=into, to=to, verb=verb)
    for message in plan.infos:
        echo_info(ctx, message)

    if plan.replaced and not ctx.force:
        confirm_replace(ctx, plan.replaced)

    for transfer in plan.transfers:
        operation(transfer.source, transfer.destination, transfer.replaced, dry_run=ctx.dry_run)
        echo_status(
            ctx,
            transfer_line(
                tag,
                transfer.source.path,
                transfer.destination,
                transfer.existing_ancestor,
                transfer.source.is_dir,
            ),
        )


def into_option():
    return typer.Option(
        False, "--into", "-i", help="Put every SOURCE_PATH inside DESTINATION_PATH"
    )


def to_option():
    return typer.Option(
        False, "--to", "-t", help="DESTINATION_PATH is the new path of the single SOURCE_PATH"
    )


def register(app: typer.Typer, name: str = "mov") -> None:
    """Register the move command under ``name``."""

    @app.command(name, context_settings={"help_option_names": ["-h", "--help"]})
    def move_command(
        ctx: typer.Context,
        paths: Optional[List[str]] = typer.Argument(
            None, metavar="SOURCE_PATH... DESTINATION_PATH", show_default=False
        ),
        into: bool = into_option(),
        to: bool = to_option(),
        force: bool = force_option(),
        silent: bool = silent_option(),
        dry_run: bool = dry_run_option(),
        color: Optional[bool] = color_option(),
        version: Optional[bool] = version_option(),
    ) -> None:
        """Move or rename files and directories.

        A DESTINATION_PATH ending with / is a directory to move into.
        """
        run(
            ctx,
            lambda cli_ctx: transfer_paths(
                cli_ctx, paths or [], into, to, "move", MOVED_TAG, move_entry
            ),
            force=force,
            silent=silent,
            dry_run=dry_run,
            color=color,
        )
