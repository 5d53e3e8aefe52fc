# Copyright (c) 2026 human-utils contributors
# SPDX-License-Identifier: Apache-2.0
"""Runtime context for CLI commands."""

from dataclasses import dataclass, replace
from typing import List, Optional

import typer

from human_utils.utils.config import get_human_utils_config


class CliConfigError(ValueError):
    """Raised when the CLI configuration file is invalid."""


@dataclass
class CLIContext:
    """Shared state for one CLI invocation.

    ``color`` is passed straight to every echo call: True forces ANSI
    colors, False strips them and None lets click decide per stream.
    ``content`` holds the words given after ``--``, or None without ``--``.
    """

    force: bool = False
    silent: bool = False
    dry_run: bool = False
    color: Optional[bool] = None
    content: Optional[List[str]] = None


def resolve_color(color: Optional[bool]) -> Optional[bool]:
    """Command line flag first, then the ``color`` setting of the config file."""
    if color is not None:
        return color
    try:
        config = get_human_utils_config()
    except (ValueError, FileNotFoundError) as e:
        raise CliConfigError(str(e)) from e
    return config.color_override()


def get_cli_context(
    ctx: typer.Context,
    *,
    force: bool = False,
    silent: bool = False,
    dry_run: bool = False,
    color: Optional[bool] = None,
) -> CLIContext:
    """Combine the context prepared by the entry point with parsed options."""
    base = ctx.obj if isinstance(ctx.obj, CLIContext) else CLIContext()
    return replace(
        base,
        force=force,
        silent=silent,
        dry_run=dry_run,
        color=resolve_color(color),
    )
