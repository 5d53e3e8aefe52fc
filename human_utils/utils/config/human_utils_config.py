# Copyright (c) 2026 human-utils contributors
# SPDX-License-Identifier: Apache-2.0
from pathlib import Path
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, Field, ValidationError

from .config_loader import (
    DEFAULT_CONFIG_FILE,
    HUMAN_UTILS_CONFIG_ENV,
    load_json_config,
    resolve_config_path,
)


class HumanUtilsConfig(BaseModel):
    """User preferences shared by all commands."""

    color: Literal["auto", "always", "never"] = Field(
        default="auto",
        description="Colorize status lines: 'auto' (only on a terminal) | 'always' | 'never'",
    )

    log_level: str = Field(default="WARNING", description="Log level")

    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format",
    )

    log_output: str = Field(
        default="stderr", description="Log output: 'stdout' | 'stderr' | path to a log file"
    )

    model_config = {"extra": "forbid"}

    def color_override(self) -> Optional[bool]:
        """Map the configured color mode to an explicit echo ``color`` value."""
        return {"always": True, "never": False}.get(self.color)

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "HumanUtilsConfig":
        return cls(**config)


class HumanUtilsConfigSingleton:
    """Global singleton for HumanUtilsConfig.

    Resolution chain for config.json:
      1. HUMAN_UTILS_CONFIG_FILE environment variable
      2. ~/.human_utils/config.json
      3. Built-in defaults
    """

    _instance: Optional[HumanUtilsConfig] = None

    @classmethod
    def get_instance(cls) -> HumanUtilsConfig:
        """Get the global singleton instance.

        Raises ValueError if the config file cannot be parsed.
        """
        if cls._instance is None:
            config_path = resolve_config_path(HUMAN_UTILS_CONFIG_ENV, DEFAULT_CONFIG_FILE)
            if config_path is not None:
                cls._instance = cls._load_from_file(str(config_path))
            else:
                cls._instance = HumanUtilsConfig()
        return cls._instance

    @classmethod
    def _load_from_file(cls, config_file: str) -> HumanUtilsConfig:
        data = load_json_config(Path(config_file))
        try:
            return HumanUtilsConfig.from_dict(data)
        except ValidationError as e:
            raise ValueError(f"Invalid config file {config_file}: {e}") from e

    @classmethod
    def reset_instance(cls) -> None:
        """Reset the singleton instance (mainly for testing)."""
        cls._instance = None


# Global convenience function
def get_human_utils_config() -> HumanUtilsConfig:
    """Get the global HumanUtilsConfig instance."""
    return HumanUtilsConfigSingleton.get_instance()
