# Copyright (c) 2026 human-utils contributors
# SPDX-License-Identifier: Apache-2.0
"""
Path set resolution for ``new``.

Turns raw command line paths into sorted directory and file requests,
rejects requests that need the same path to be both, and works out which
existing entries stand in the way of creating the rest.
"""

import os
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from human_utils.core.entries import (
    PathEntry,
    canonical_location,
    display_path,
    find_existing_ancestor_directory,
    is_directory_request,
    iter_ancestors,
    lookup_entry,
    normalize_path,
    quote_path,
)
from human_utils.core.operations import delete_entry
from human_utils.exceptions import ConflictError, InvalidArgumentError
from human_utils.utils.logger import get_logger

logger = get_logger(__name__)

NEW_TAG = "N"
MODIFIED_TAG = "M"


@dataclass
class CreationPlan:
    """Everything ``new`` is going to do, decided before touching the disk."""

    directories: List[str] = field(default_factory=list)
    files: List[Tuple[str, str]] = field(default_factory=list)
    infos: List[str] = field(default_factory=list)
    to_confirm: List[PathEntry] = field(default_factory=list)
    clashing_with_directories: List[PathEntry] = field(default_factory=list)
    clashing_with_files: List[PathEntry] = field(default_factory=list)
    existing_ancestors: Dict[str, str] = field(default_factory=dict)

    @property
    def is_noop(self) -> bool:
        return not self.directories and not self.files and not self.to_confirm


def combine_input_paths(
    raw_paths: Iterable[str],
    raw_files: Iterable[str] = (),
    raw_directories: Iterable[str] = (),
) -> Tuple[List[str], List[str]]:
    """Partition raw paths into sorted, de-duplicated directory and file paths.

    Positional paths ending with a separator are directories, all others are
    files. ``raw_files`` and ``raw_directories`` are taken as given.

    Raises:
        InvalidArgumentError: If a ``--file`` path ends with a separator, or
            a file path is the working directory or one of its ancestors.
    """
    raw_files = list(raw_files)
    for raw in raw_files:
        if is_directory_request(raw):
            raise InvalidArgumentError(
                f"File path {quote_path(raw)} cannot end with a {os.sep} "
                "when --file option is used."
            )

    directories = set(normalize_path(raw) for raw in raw_directories)
    files = set(normalize_path(raw) for raw in raw_files)
    for raw in raw_paths:
        if is_directory_request(raw):
            directories.add(normalize_path(raw))
        else:
            files.add(normalize_path(raw))

    cwd = os.path.realpath(os.curdir)
    for path in files:
        location = os.path.normpath(canonical_location(path))
        if cwd == location or cwd.startswith(location.rstrip(os.sep) + os.sep):
            raise InvalidArgumentError(
                f"Cannot create file {quote_path(path)} because it contains the working directory"
            )

    return sorted(directories), sorted(files)


def compute_ancestor_closure(
    directory_paths: Iterable[str], file_paths: Iterable[str]
) -> List[str]:
    """Every path that has to end up being a directory.

    That is each requested directory with all of its ancestors, and the
    parent of each requested file with all of its ancestors.
    """
    closure = set()
    for path in directory_paths:
        closure.add(path)
        closure.update(iter_ancestors(path))
    for path in file_paths:
        closure.update(iter_ancestors(path))
    return sorted(closure)


def check_argument_conflicts(closure: Sequence[str], file_paths: Sequence[str]) -> None:
    """Reject paths that would have to be a file and a directory at once."""
    conflicts = sorted(set(closure) & set(file_paths))
    if conflicts:
        raise ConflictError(conflicts)


def check_conflicts(
    closure: Sequence[str], file_paths: Sequence[str]
) -> Tuple[List[PathEntry], List[PathEntry]]:
    """Stat every path once and collect the entries already present.

    Returns:
        ``(clashing_with_directories, clashing_with_files)``: anything that
        exists at a closure path, and anything other than an empty regular
        file that exists at a requested file path.
    """
    clashing_with_directories = []
    for path in closure:
        entry = lookup_entry(path)
        if entry is not None:
            clashing_with_directories.append(entry)

    clashing_with_files = []
    for path in file_paths:
        entry = lookup_entry(path)
        if entry is not None and not entry.is_empty_file:
            clashing_with_files.append(entry)

    return clashing_with_directories, clashing_with_files


def delete_clashing(
    clashing_with_directories: Sequence[PathEntry],
    clashing_with_files: Sequence[PathEntry],
    dry_run: bool = False,
    on_deleted: Optional[Callable[[PathEntry], None]] = None,
) -> List[PathEntry]:
    """Delete the entries whose kind does not match the request.

    Non-directories sitting where a directory is needed are removed, as are
    directories and symlinks sitting where a file is needed. Regular files
    at file paths are left for the caller to overwrite.
    """
    deleted = []
    for entry in clashing_with_directories:
        if not entry.usable_as_directory:
            deleted.append(entry)
    for entry in clashing_with_files:
        if entry.is_dir or entry.is_symlink:
            deleted.append(entry)

    for entry in deleted:
        delete_entry(entry, dry_run=dry_run)
        if on_deleted is not None:
            on_deleted(entry)
    return deleted


def plan_creation(
    directory_paths: Sequence[str],
    file_paths: Sequence[str],
    has_content: bool = False,
) -> CreationPlan:
    """Validate the request and decide what ``new`` has to do.

    No filesystem access happens before the argument conflict check.
    """
    if not directory_paths and not file_paths:
        raise InvalidArgumentError("At least one path is required")

    closure = compute_ancestor_closure(directory_paths, file_paths)
    check_argument_conflicts(closure, file_paths)
    clashing_with_directories, clashing_with_files = check_conflicts(closure, file_paths)
    logger.debug(
        "closure=%s clashing_with_directories=%s clashing_with_files=%s",
        closure,
        clashing_with_directories,
        clashing_with_files,
    )

    plan = CreationPlan(
        clashing_with_directories=clashing_with_directories,
        clashing_with_files=clashing_with_files,
    )

    existing_directories = set()
    for entry in clashing_with_directories:
        if entry.usable_as_directory:
            existing_directories.add(entry.path)
        else:
            plan.to_confirm.append(entry)

    for path in directory_paths:
        if path in existing_directories:
            plan.infos.append(f"Directory {quote_path(display_path(path, True))} already exists")
        else:
            plan.directories.append(path)
            plan.existing_ancestors[path] = find_existing_ancestor_directory(path)

    clashing = {entry.path: entry for entry in clashing_with_files}
    for path in file_paths:
        entry = clashing.get(path)
        if entry is not None:
            plan.to_confirm.append(entry)
            plan.files.append((MODIFIED_TAG, path))
        elif lookup_entry(path) is not None:
            # an empty regular file
            if has_content:
                plan.files.append((MODIFIED_TAG, path))
            else:
                plan.infos.append(f"Empty file {quote_path(path)} already exists")
                continue
        else:
            plan.files.append((NEW_TAG, path))
        plan.existing_ancestors[path] = find_existing_ancestor_directory(path)

    plan.to_confirm.sort(key=lambda e: e.path)
    return plan
