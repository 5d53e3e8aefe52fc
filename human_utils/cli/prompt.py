# Copyright (c) 2026 human-utils contributors
# SPDX-License-Identifier: Apache-2.0
"""Yes/no confirmation read from standard input."""

from typing import Sequence

import typer

from human_utils.cli.context import CLIContext
from human_utils.core.entries import PathEntry, quote_path
from human_utils.exceptions import DeclinedError

PROMPT_SUFFIX = " [Y/n] "


def is_affirmative(answer: str) -> bool:
    """An empty answer or anything starting with y/Y means yes."""
    answer = answer.strip()
    return answer == "" or answer.lower().startswith("y")


def confirm(question: str) -> bool:
    """Ask once. End of input counts as no."""
    try:
        answer = typer.prompt(
            question, default="", show_default=False, prompt_suffix=PROMPT_SUFFIX
        )
    except typer.Abort:
        return False
    return is_affirmative(answer)


def confirm_or_abort(question: str) -> None:
    """Ask ``question`` and raise DeclinedError unless the answer is yes."""
    if not confirm(question):
        raise DeclinedError()


def confirm_all(ctx: CLIContext, entries: Sequence[PathEntry], action: str) -> None:
    """Confirm ``action`` for every entry: a single question or a listing."""
    if len(entries) == 1:
        entry = entries[0]
        confirm_or_abort(f"{action.capitalize()} {entry.describe()} {quote_path(entry.path)}?")
        return

    typer.echo("For the following...", color=ctx.color)
    for entry in entries:
        typer.echo(entry.display(), color=ctx.color)
    confirm_or_abort(f"...{action} all?")


def confirm_replace(ctx: CLIContext, entries: Sequence[PathEntry]) -> None:
    """Ask before a move or copy replaces existing destinations."""
    if len(entries) == 1:
        entry = entries[0]
        confirm_or_abort(
            f"{entry.describe().capitalize()} {quote_path(entry.path)} already exists, replace it?"
        )
        return
    confirm_all(ctx, entries, "overwrite")
