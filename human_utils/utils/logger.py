# Copyright (c) 2026 human-utils contributors
# SPDX-License-Identifier: Apache-2.0
"""
Logging utilities for human-utils.
"""

import logging
import sys
from typing import Optional

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_LOG_OUTPUT = "stderr"


def get_logger(
    name: str = "human_utils",
    format_string: Optional[str] = None,
) -> logging.Logger:
    """
    Get a configured logger.

    Args:
        name: Logger name
        format_string: Custom format string (overrides config)

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        try:
            from human_utils.utils.config import get_human_utils_config

            config = get_human_utils_config()
            log_level_str = config.log_level.upper()
            log_format = config.log_format
            log_output = config.log_output
        except Exception:
            # A broken config file is reported by the command itself.
            log_level_str = DEFAULT_LOG_LEVEL
            log_format = DEFAULT_LOG_FORMAT
            log_output = DEFAULT_LOG_OUTPUT

        level = getattr(logging, log_level_str, logging.WARNING)

        if log_output == "stdout":
            handler = logging.StreamHandler(sys.stdout)
        elif log_output == "stderr":
            handler = logging.StreamHandler(sys.stderr)
        else:
            handler = logging.FileHandler(log_output)

        if format_string is None:
            format_string = log_format

        formatter = logging.Formatter(format_string)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = False

        logger.setLevel(level)

    return logger

