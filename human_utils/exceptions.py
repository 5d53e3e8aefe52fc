# Copyright (c) 2026 human-utils contributors
# SPDX-License-Identifier: Apache-2.0
"""
Unified exception classes for human-utils.

Every error carries a short machine-readable code next to its message.
"""

from typing import List, Optional


class HumanUtilsError(Exception):
    """Base exception for all human-utils errors."""

    def __init__(self, message: str, code: str = "UNKNOWN", details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}


# ============= Argument Errors =============


class InvalidArgumentError(HumanUtilsError):
    """Invalid argument provided."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message, code="INVALID_ARGUMENT", details=details)


class ConflictError(InvalidArgumentError):
    """The same path was requested both as a file and as a directory."""

    def __init__(self, paths: List[str]):
        message = "Cannot create both file and a directory at:\n" + "\n".join(paths)
        super().__init__(message, details={"paths": paths})
        self.code = "CONFLICT"
        self.paths = paths


# ============= Resource Errors =============


class NotFoundError(HumanUtilsError):
    """Path does not exist."""

    def __init__(self, path: str, reason: str = "No such file or directory"):
        super().__init__(reason, code="NOT_FOUND", details={"path": path})
        self.path = path


# ============= Interaction Errors =============


class DeclinedError(HumanUtilsError):
    """The user did not confirm a destructive operation."""

    def __init__(self, message: str = "Operation declined"):
        super().__init__(message, code="DECLINED")
