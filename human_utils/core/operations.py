# Copyright (c) 2026 human-utils contributors
# SPDX-License-Identifier: Apache-2.0
"""Filesystem mutations. With ``dry_run`` set every function only logs."""

import errno
import os
import shutil
from typing import Optional

from human_utils.core.entries import PathEntry, lookup_entry
from human_utils.utils.logger import get_logger

logger = get_logger(__name__)

# rename failures caused by the destination itself being in the way
_RETRY_AFTER_DELETE = frozenset({errno.EEXIST, errno.ENOTEMPTY, errno.EISDIR, errno.ENOTDIR})


def delete_entry(entry: PathEntry, dry_run: bool = False) -> None:
    """Remove a file, a symlink or a whole directory tree."""
    logger.info("delete %s %s%s", entry.kind.value, entry.path, " (dry run)" if dry_run else "")
    if dry_run:
        return
    if entry.is_dir:
        shutil.rmtree(entry.path)
    else:
        os.unlink(entry.path)


def create_directory(path: str, dry_run: bool = False) -> None:
    """Create ``path`` and any missing ancestors."""
    logger.info("create directory %s%s", path, " (dry run)" if dry_run else "")
    if dry_run:
        return
    os.makedirs(path, exist_ok=True)


def create_file(path: str, content: str = "", dry_run: bool = False) -> None:
    """Write ``content`` to ``path``, creating missing ancestors first."""
    logger.info("write file %s (%d chars)%s", path, len(content), " (dry run)" if dry_run else "")
    if dry_run:
        return
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)


def move_entry(
    source: PathEntry,
    destination: str,
    replaced: Optional[PathEntry] = None,
    dry_run: bool = False,
) -> None:
    """Move ``source`` to ``destination``.

    A plain rename is tried first. If it fails because something is in the
    way, ``replaced`` is deleted and the rename is retried. Moves across
    filesystems fall back to copy and delete.
    """
    logger.info("move %s -> %s%s", source.path, destination, " (dry run)" if dry_run else "")
    if dry_run:
        return

    parent = os.path.dirname(destination)
    if parent:
        os.makedirs(parent, exist_ok=True)

    try:
        os.replace(source.path, destination)
        return
    except OSError as e:
        cross_device = e.errno == errno.EXDEV
        if not cross_device and (replaced is None or e.errno not in _RETRY_AFTER_DELETE):
            raise
        logger.debug("rename %s -> %s failed: %s", source.path, destination, e)

    if replaced is not None and lookup_entry(destination) is not None:
        delete_entry(replaced)
    if cross_device:
        shutil.move(source.path, destination)
    else:
        os.replace(source.path, destination)


def copy_entry(
    source: PathEntry,
    destination: str,
    replaced: Optional[PathEntry] = None,
    dry_run: bool = False,
) -> None:
    """Copy ``source`` to ``destination``, replacing whatever is there.

    Directories are copied recursively and symlinks are copied as links.
    """
    logger.info("copy %s -> %s%s", source.path, destination, " (dry run)" if dry_run else "")
    if dry_run:
        return

    if replaced is not None:
        delete_entry(replaced)
    parent = os.path.dirname(destination)
    if parent:
        os.makedirs(parent, exist_ok=True)

    if source.is_symlink:
        os.symlink(os.readlink(source.path), destination)
    elif source.is_dir:
        shutil.copytree(source.path, destination, symlinks=True)
    else:
        shutil.copy2(source.path, destination)
