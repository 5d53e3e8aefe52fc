# Copyright (c) 2026 human-utils contributors
# SPDX-License-Identifier: Apache-2.0
"""Utility functions and helpers."""

from human_utils.utils.logger import get_logger

__all__ = [
    "get_logger",
]
