# Copyright (c) 2026 human-utils contributors
# SPDX-License-Identifier: Apache-2.0
"""``cop``: copy files and directories."""

from typing import List, Optional

import typer

from human_utils.cli.commands.move import into_option, to_option, transfer_paths
from human_utils.cli.errors import run
from human_utils.cli.options import (
    color_option,
    dry_run_option,
    force_option,
    silent_option,
    version_option,
)
from human_utils.core.operations import copy_entry

COPIED_TAG = "C"


def register(app: typer.Typer, name: str = "cop") -> None:
    """Register the copy command under ``name``."""

    @app.command(name, context_settings={"help_option_names": ["-h", "--help"]})
    def copy_command(
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
        """Copy files and directories.

        Directories are copied recursively, symlinks are copied as links.
        """
        run(
            ctx,
            lambda cli_ctx: transfer_paths(
                cli_ctx, paths or [], into, to, "copy", COPIED_TAG, copy_entry
            ),
            force=force,
            silent=silent,
            dry_run=dry_run,
            color=color,
        )
