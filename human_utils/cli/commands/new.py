# Copyright (c) 2026 human-utils contributors
# SPDX-License-Identifier: Apache-2.0
"""``new``: create files and directories."""

from typing import List, Optional

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
from human_utils.cli.output import deleted_line, echo_info, echo_status, status_line
from human_utils.cli.prompt import confirm_all
from human_utils.core.operations import create_directory, create_file
from human_utils.core.resolver import (
    NEW_TAG,
    combine_input_paths,
    delete_clashing,
    plan_creation,
)


def file_content(words: Optional[List[str]]) -> str:
    """Words given after ``--``, joined by spaces and newline terminated."""
    text = " ".join(words or [])
    return text + "\n" if text else ""


def create_paths(
    ctx: CLIContext,
    raw_paths: List[str],
    raw_files: List[str],
    raw_directories: List[str],
) -> None:
    directory_paths, file_paths = combine_input_paths(raw_paths, raw_files, raw_directories)
    content = file_content(ctx.content)
    plan = plan_creation(directory_paths, file_paths, has_content=bool(content))

    for message in plan.infos:
        echo_info(ctx, message)

    if plan.to_confirm and not ctx.force:
        confirm_all(ctx, plan.to_confirm, "overwrite")

    delete_clashing(
        plan.clashing_with_directories,
        plan.clashing_with_files,
        dry_run=ctx.dry_run,
        on_deleted=lambda entry: echo_status(ctx, deleted_line(entry.path, entry.is_dir)),
    )

    for path in plan.directories:
        create_directory(path, dry_run=ctx.dry_run)
        echo_status(
            ctx, status_line(NEW_TAG, path, plan.existing_ancestors[path], is_dir=True)
        )

    for tag, path in plan.files:
        create_file(path, content, dry_run=ctx.dry_run)
        echo_status(ctx, status_line(tag, path, plan.existing_ancestors[path]))


def register(app: typer.Typer, name: str = "new") -> None:
    """Register the ``new`` command."""

    @app.command(name, context_settings={"help_option_names": ["-h", "--help"]})
    def new_command(
        ctx: typer.Context,
        paths: Optional[List[str]] = typer.Argument(
            None,
            help="Paths to create; a trailing / creates a directory",
            show_default=False,
        ),
        files: Optional[List[str]] = typer.Option(
            None, "--file", help="Create PATH as a file (repeatable)", show_default=False
        ),
        directories: Optional[List[str]] = typer.Option(
            None,
            "--directory",
            "-d",
            help="Create PATH as a directory (repeatable)",
            show_default=False,
        ),
        force: bool = force_option(),
        silent: bool = silent_option(),
        dry_run: bool = dry_run_option(),
        color: Optional[bool] = color_option(),
        version: Optional[bool] = version_option(),
    ) -> None:
        """Create files and directories, including missing parents.

        Words after -- become the content of the created files.
        """
        run(
            ctx,
            lambda cli_ctx: create_paths(cli_ctx, paths or [], files or [], directories or []),
            force=force,
            silent=silent,
            dry_run=dry_run,
            color=color,
        )
