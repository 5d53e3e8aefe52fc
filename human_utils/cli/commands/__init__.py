# Copyright (c) 2026 human-utils contributors
# SPDX-License-Identifier: Apache-2.0
"""Command registration for human-utils."""

import typer

from human_utils.cli.commands import copy, delete, move, name, new


def register_commands(app: typer.Typer, command: str) -> None:
    """Register the single command ``command`` into ``app``."""
    if command == "new":
        new.register(app)
    elif command in ("mov", "ren"):
        move.register(app, command)
    elif command == "del":
        delete.register(app, command, verb="delete")
    elif command == "rem":
        delete.register(app, command, verb="remove")
    elif command == "nam":
        name.register(app)
    elif command == "cop":
        copy.register(app)
    else:
        raise ValueError(f"Unknown command: {command}")
