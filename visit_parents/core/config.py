"""
Configuration for command-line tree walks.

Provides configuration schema, validation, and loading from JSON files.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

import json
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from .exceptions import ConfigError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
OUTPUT_FORMATS = ("text", "json")


class WalkConfig(BaseModel):
    """Options for a single walk started from the CLI."""

    model_config = {"extra": "forbid"}  # Reject unknown fields

    reverse: bool = Field(
        default=False, description="Visit siblings from last to first"
    )
    max_depth: Optional[int] = Field(
        default=None,
        description="Do not descend below this depth (root is depth 0)",
    )
    annotate_errors: bool = Field(
        default=False,
        description="Attach the active node path to exceptions raised by visitors",
    )
    output_format: str = Field(default="text", description="Output format: text or json")
    log_level: str = Field(default="WARNING", description="Logging level name")

    @field_validator("max_depth")
    @classmethod
    def validate_max_depth(cls, v: Optional[int]) -> Optional[int]:
        """Validate depth limit is not negative."""
        if v is not None and v < 0:
            raise ValueError(f"max_depth must be >= 0, got: {v}")
        return v

    @field_validator("output_format")
    @classmethod
    def validate_output_format(cls, v: str) -> str:
        """Validate output format value."""
        v_lower = v.lower()
        if v_lower not in OUTPUT_FORMATS:
            raise ValueError(f"output_format must be 'text' or 'json', got: {v}")
        return v_lower

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize log level name."""
        v_upper = v.strip().upper()
        if v_upper not in LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(LOG_LEVELS)}, got: {v}"
            )
        return v_upper

    def merged(self, **overrides: Any) -> "WalkConfig":
        """
        Return a copy with command-line overrides applied.

        Overrides set to None are ignored so that unset CLI options keep the
        values from the configuration file.
        """
        data = self.model_dump()
        data.update({k: v for k, v in overrides.items() if v is not None})
        return WalkConfig(**data)


def validate_config(
    config_path: Path,
) -> tuple[bool, Optional[str], Optional[WalkConfig]]:
    """
    Validate configuration file.

    Args:
        config_path: Path to configuration file

    Returns:
        Tuple of (is_valid, error_message, config_object)
    """
    if not config_path.exists():
        return False, f"Configuration file not found: {config_path}", None

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config_data = json.load(f)
    except json.JSONDecodeError as e:
        return False, f"Invalid JSON: {str(e)}", None

    if not isinstance(config_data, dict):
        return False, "Configuration root must be a JSON object", None

    try:
        config = WalkConfig(**config_data)
    except ValidationError as e:
        return False, f"Validation error: {str(e)}", None

    return True, None, config


def load_config(config_path: Path) -> WalkConfig:
    """
    Load and validate configuration.

    Args:
        config_path: Path to configuration file

    Returns:
        WalkConfig object

    Raises:
        ConfigError: If configuration is missing or invalid
    """
    is_valid, error, config = validate_config(config_path)
    if not is_valid or config is None:
        raise ConfigError(
            error or "Invalid configuration", config_path=str(config_path)
        )
    return config
