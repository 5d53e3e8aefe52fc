# Copyright (c) 2026 human-utils contributors
# SPDX-License-Identifier: Apache-2.0
"""Filesystem model: path classification, conflict detection and mutations."""

from human_utils.core.entries import EntryKind, PathEntry, lookup_entry, require_entry
from human_utils.core.resolver import CreationPlan, plan_creation
from human_utils.core.transfer import TransferPlan, plan_transfer

__all__ = [
    "EntryKind",
    "PathEntry",
    "lookup_entry",
    "require_entry",
    "CreationPlan",
    "plan_creation",
    "TransferPlan",
    "plan_transfer",
]
