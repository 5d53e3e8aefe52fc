# Copyright (c) 2026 human-utils contributors
# SPDX-License-Identifier: Apache-2.0
from .config_loader import (
    DEFAULT_CONFIG_DIR,
    DEFAULT_CONFIG_FILE,
    HUMAN_UTILS_CONFIG_ENV,
    load_json_config,
    resolve_config_path,
)
from .human_utils_config import (
    HumanUtilsConfig,
    HumanUtilsConfigSingleton,
    get_human_utils_config,
)

__all__ = [
    "DEFAULT_CONFIG_DIR",
    "DEFAULT_CONFIG_FILE",
    "HUMAN_UTILS_CONFIG_ENV",
    "HumanUtilsConfig",
    "HumanUtilsConfigSingleton",
    "get_human_utils_config",
    "load_json_config",
    "resolve_config_path",
]
