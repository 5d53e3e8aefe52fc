# Copyright (c) 2026 human-utils contributors
# SPDX-License-Identifier: Apache-2.0
"""Filesystem entries and path helpers shared by all commands."""

import os
import stat
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

from human_utils.exceptions import InvalidArgumentError, NotFoundError

_SEPARATORS = os.sep + (os.altsep or "")


class EntryKind(str, Enum):
    """What kind of object lives at a path, without following symlinks."""

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"


@dataclass(frozen=True)
class PathEntry:
    """Snapshot of one existing filesystem entry, taken from a single lstat."""

    path: str
    kind: EntryKind
    size: int = 0
    links_to_directory: bool = False

    @property
    def is_dir(self) -> bool:
        return self.kind == EntryKind.DIRECTORY

    @property
    def is_symlink(self) -> bool:
        return self.kind == EntryKind.SYMLINK

    @property
    def is_empty_file(self) -> bool:
        return self.kind == EntryKind.FILE and self.size == 0

    @property
    def usable_as_directory(self) -> bool:
        """True when paths below this entry resolve into a directory."""
        return self.is_dir or self.links_to_directory

    def describe(self) -> str:
        return "directory" if self.is_dir else "file"

    def display(self) -> str:
        return display_path(self.path, self.is_dir)


def lookup_entry(path: str) -> Optional[PathEntry]:
    """Stat ``path`` once without following symlinks.

    Returns None when nothing exists there, including when one of the
    ancestors is not a directory.
    """
    try:
        st = os.lstat(path)
    except (FileNotFoundError, NotADirectoryError):
        return None

    if stat.S_ISLNK(st.st_mode):
        return PathEntry(
            path, EntryKind.SYMLINK, st.st_size, links_to_directory=os.path.isdir(path)
        )
    if stat.S_ISDIR(st.st_mode):
        return PathEntry(path, EntryKind.DIRECTORY, st.st_size)
    return PathEntry(path, EntryKind.FILE, st.st_size)


def require_entry(path: str) -> PathEntry:
    """Like :func:`lookup_entry` but raises NotFoundError for missing paths."""
    entry = lookup_entry(path)
    if entry is None:
        raise NotFoundError(path)
    return entry


def is_directory_request(raw_path: str) -> bool:
    """A trailing separator marks a path as a directory."""
    return len(raw_path) > 0 and raw_path[-1] in _SEPARATORS


def normalize_path(raw_path: str) -> str:
    if not raw_path:
        raise InvalidArgumentError("Path cannot be empty")
    # "/" must stay the root, not become ""
    stripped = raw_path.rstrip(_SEPARATORS) or raw_path[0]
    return os.path.normpath(stripped)


def iter_ancestors(path: str) -> Iterator[str]:
    """Yield the ancestors of ``path``, nearest first.

    The empty relative root is never yielded; an absolute root is.
    """
    current = path
    while True:
        parent = os.path.dirname(current)
        if not parent or parent == current:
            return
        yield parent
        current = parent


def find_existing_ancestor_directory(path: str) -> str:
    """Return the nearest ancestor of ``path`` that is a directory, or ""."""
    for parent in iter_ancestors(path):
        entry = lookup_entry(parent)
        if entry is not None and entry.usable_as_directory:
            return parent
    return ""


def canonical_location(path: str) -> str:
    """Resolve the containing directory of ``path`` but keep its final name."""
    parent, name = os.path.split(path)
    return os.path.join(os.path.realpath(parent or os.curdir), name)


def quote_path(path: str) -> str:
    return f'"{path}"'


def display_path(path: str, is_dir: bool = False) -> str:
    """Format a path for listings: directories get a trailing separator and
    paths with whitespace are quoted."""
    if is_dir and not path.endswith(os.sep):
        path = path + os.sep
    if any(ch.isspace() for ch in path):
        return quote_path(path)
    return path
