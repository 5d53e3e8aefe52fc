# Copyright (c) 2026 human-utils contributors
# SPDX-License-Identifier: Apache-2.0
"""``del``/``rem``: delete files and directories."""

import os
from typing import List, Optional, Union

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
from human_utils.cli.output import deleted_line, echo_status, echo_warning
from human_utils.cli.prompt import confirm_or_abort
from human_utils.core.entries import (
    PathEntry,
    canonical_location,
    find_existing_ancestor_directory,
    normalize_path,
    quote_path,
    require_entry,
)
from human_utils.core.operations import delete_entry
from human_utils.exceptions import InvalidArgumentError, NotFoundError
from human_utils.utils.logger import get_logger

logger = get_logger(__name__)


def _lookup_all(raw_paths: List[str]) -> List[Union[PathEntry, NotFoundError]]:
    results = []
    seen = set()
    for raw in raw_paths:
        path = normalize_path(raw)
        if path in seen:
            continue
        seen.add(path)
        try:
            results.append(require_entry(path))
        except NotFoundError as e:
            results.append(e)
    return results


def _confirm_many(
    ctx: CLIContext, results: List[Union[PathEntry, NotFoundError]], verb: str
) -> List[PathEntry]:
    typer.echo("For the following...", color=ctx.color)
    entries = []
    for result in results:
        if isinstance(result, NotFoundError):
            echo_warning(ctx, f"{quote_path(result.path)} error: {result.message}")
        else:
            typer.echo(result.display(), color=ctx.color)
            entries.append(result)

    if not entries:
        echo_warning(ctx, "...no files or directories can be removed.")
        raise typer.Exit(1)

    if len(entries) == len(results):
        confirm_or_abort(f"...{verb} all?")
    else:
        confirm_or_abort(f"...{verb} all existing?")
    return entries


def delete_paths(
    ctx: CLIContext,
    raw_paths: List[str],
    verb: str = "delete",
    track_cwd_change: Optional[str] = None,
) -> None:
    if not raw_paths:
        raise InvalidArgumentError("At least one path is required")

    results = _lookup_all(raw_paths)
    if len(results) == 1:
        result = results[0]
        if isinstance(result, NotFoundError):
            if ctx.force:
                return
            raise result
        if not ctx.force:
            confirm_or_abort(
                f"{verb.capitalize()} {result.describe()} {quote_path(result.path)}?"
            )
        entries = [result]
    elif ctx.force:
        entries = [result for result in results if isinstance(result, PathEntry)]
    else:
        entries = _confirm_many(ctx, results, verb)

    original_cwd = os.getcwd()
    removed_directories = []
    for entry in entries:
        location = canonical_location(entry.path)
        if not any(location.startswith(d + os.sep) for d in removed_directories):
            delete_entry(entry, dry_run=ctx.dry_run)
        if entry.is_dir:
            removed_directories.append(location)
        echo_status(ctx, deleted_line(entry.path, entry.is_dir))

    if track_cwd_change:
        _track_cwd_change(track_cwd_change, original_cwd)


def _track_cwd_change(tracking_file: str, original_cwd: str) -> None:
    """Tell the calling shell where to go when its directory was deleted."""
    if os.path.isdir(original_cwd):
        return
    new_cwd = find_existing_ancestor_directory(original_cwd)
    if not new_cwd:
        return
    logger.info("working directory %s was deleted, moving to %s", original_cwd, new_cwd)
    with open(tracking_file, "w", encoding="utf-8") as f:
        f.write(new_cwd)


def register(app: typer.Typer, name: str = "del", verb: str = "delete") -> None:
    """Register the delete command under ``name``, prompting with ``verb``."""

    @app.command(name, context_settings={"help_option_names": ["-h", "--help"]})
    def delete_command(
        ctx: typer.Context,
        paths: Optional[List[str]] = typer.Argument(
            None, metavar="PATH...", show_default=False
        ),
        track_cwd_change: Optional[str] = typer.Option(None, "--track-cwd-change", hidden=True),
        force: bool = force_option(),
        silent: bool = silent_option(),
        dry_run: bool = dry_run_option(),
        color: Optional[bool] = color_option(),
        version: Optional[bool] = version_option(),
    ) -> None:
        """Delete files and directories."""
        run(
            ctx,
            lambda cli_ctx: delete_paths(cli_ctx, paths or [], verb, track_cwd_change),
            force=force,
            silent=silent,
            dry_run=dry_run,
            color=color,
        )
