# Copyright (c) 2026 human-utils contributors
# SPDX-License-Identifier: Apache-2.0
"""Source/destination resolution shared by mov, cop and nam."""

import os
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from human_utils.core.entries import (
    PathEntry,
    canonical_location,
    find_existing_ancestor_directory,
    is_directory_request,
    lookup_entry,
    normalize_path,
    quote_path,
    require_entry,
)
from human_utils.exceptions import InvalidArgumentError
from human_utils.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class Transfer:
    """One source going to one destination."""

    source: PathEntry
    destination: str
    replaced: Optional[PathEntry] = None
    existing_ancestor: str = ""


@dataclass
class TransferPlan:
    transfers: List[Transfer] = field(default_factory=list)
    infos: List[str] = field(default_factory=list)
    into: bool = False
    destination_directory: Optional[str] = None

    @property
    def replaced(self) -> List[PathEntry]:
        return [t.replaced for t in self.transfers if t.replaced is not None]


def plan_transfer(
    raw_sources: Sequence[str],
    raw_destination: str,
    into: bool = False,
    to: bool = False,
    verb: str = "move",
) -> TransferPlan:
    """Resolve where every source ends up.

    ``into`` places each source inside the destination directory, ``to``
    makes the destination the new path of a single source. Without either
    flag a trailing separator on the destination selects ``into``.

    Raises:
        InvalidArgumentError: For bad flag combinations, a wrong number of
            sources, or a directory moved into itself.
        NotFoundError: If a source does not exist.
    """
    if into and to:
        raise InvalidArgumentError("The --into and --to options cannot be used together")
    if not raw_sources:
        raise InvalidArgumentError("Expected at least one SOURCE_PATH and a DESTINATION_PATH")

    into_mode = into or (not to and is_directory_request(raw_destination))
    if not into_mode and len(raw_sources) != 1:
        reason = (
            "the --to option was given"
            if to
            else f"DESTINATION_PATH does not end with a {os.sep}"
        )
        raise InvalidArgumentError(
            f"Expected 1 SOURCE_PATH argument because {reason}, but got {len(raw_sources)}"
        )

    destination = normalize_path(raw_destination)
    plan = TransferPlan(into=into_mode)
    if into_mode:
        directory = lookup_entry(destination)
        if directory is not None and not directory.usable_as_directory:
            raise InvalidArgumentError(
                f"Destination {quote_path(destination)} is not a directory"
            )
        plan.destination_directory = destination

    seen = {}
    for raw in raw_sources:
        source = require_entry(normalize_path(raw))
        if into_mode:
            name = os.path.basename(source.path)
            if name in ("", os.curdir, os.pardir):
                raise InvalidArgumentError(
                    f"Cannot {verb} {quote_path(source.path)} into a directory"
                )
            target = os.path.join(destination, name)
        else:
            target = destination

        source_location = canonical_location(source.path)
        target_location = canonical_location(target)
        if source_location == target_location:
            plan.infos.append(
                f"{quote_path(source.path)} is already located at {quote_path(target)}"
            )
            continue
        if source.is_dir and target_location.startswith(source_location + os.sep):
            raise InvalidArgumentError(
                f"Cannot {verb} directory {quote_path(source.path)} into itself"
            )
        if source_location.startswith(target_location + os.sep):
            raise InvalidArgumentError(
                f"Cannot {verb} {quote_path(source.path)} onto its own ancestor "
                f"{quote_path(target)}"
            )
        if target_location in seen:
            raise InvalidArgumentError(
                f"Both {quote_path(seen[target_location])} and {quote_path(source.path)} "
                f"would be placed at {quote_path(target)}"
            )
        seen[target_location] = source.path

        plan.transfers.append(
            Transfer(
                source=source,
                destination=target,
                replaced=lookup_entry(target),
                existing_ancestor=find_existing_ancestor_directory(target),
            )
        )

    logger.debug("transfer plan: %s", plan)
    return plan
