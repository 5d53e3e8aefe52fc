# Copyright (c) 2026 human-utils contributors
# SPDX-License-Identifier: Apache-2.0
"""Typer entrypoints for the human-utils commands.

Every command is its own executable, so each one gets a Typer app holding
a single command.
"""

import sys
from typing import List, Optional, Sequence, Tuple

import typer

from human_utils.cli.commands import register_commands
from human_utils.cli.context import CLIContext


def create_app(command: str) -> typer.Typer:
    app = typer.Typer(add_completion=False)
    register_commands(app, command)
    return app


new_app = create_app("new")
mov_app = create_app("mov")
ren_app = create_app("ren")
del_app = create_app("del")
rem_app = create_app("rem")
nam_app = create_app("nam")
cop_app = create_app("cop")


def split_content(argv: Sequence[str]) -> Tuple[List[str], Optional[List[str]]]:
    """Split ``argv`` at the first ``--`` into arguments and content words.

    The content is None when there is no ``--`` at all.
    """
    argv = list(argv)
    if "--" not in argv:
        return argv, None
    index = argv.index("--")
    return argv[:index], argv[index + 1 :]


def new_main() -> None:
    args, content = split_content(sys.argv[1:])
    new_app(args=args, prog_name="new", obj=CLIContext(content=content))


def mov_main() -> None:
    mov_app(prog_name="mov")


def ren_main() -> None:
    ren_app(prog_name="ren")


def del_main() -> None:
    del_app(prog_name="del")


def rem_main() -> None:
    rem_app(prog_name="rem")


def nam_main() -> None:
    nam_app(prog_name="nam")


def cop_main() -> None:
    cop_app(prog_name="cop")


if __name__ == "__main__":
    new_main()
