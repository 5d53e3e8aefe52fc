# Copyright (c) 2026 human-utils contributors
# SPDX-License-Identifier: Apache-2.0
"""Configuration file loading utilities.

Config files are located with a two-level resolution chain:
  1. Environment variable
  2. Default path (~/.human_utils/)
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

DEFAULT_CONFIG_DIR = Path.home() / ".human_utils"

HUMAN_UTILS_CONFIG_ENV = "HUMAN_UTILS_CONFIG_FILE"

DEFAULT_CONFIG_FILE = "config.json"


def resolve_config_path(env_var: str, default_filename: str) -> Optional[Path]:
    """Resolve a config file path.

    Resolution order:
      1. Path from environment variable ``env_var``
      2. ``~/.human_utils/<default_filename>``

    A set but missing environment path is not replaced by the default.

    Returns:
        Path to the config file, or None if not found at any level.
    """
    # Level 1: environment variable
    env_val = os.environ.get(env_var)
    if env_val:
        p = Path(env_val).expanduser()
        if p.exists():
            return p
        return None

    # Level 2: default directory
    p = DEFAULT_CONFIG_DIR / default_filename
    if p.exists():
        return p

    return None


def load_json_config(path: Path) -> Dict[str, Any]:
    """Load and parse a JSON config file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file contains invalid JSON or is not an object.
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a JSON object")
    return data
