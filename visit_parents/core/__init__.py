"""
Core package: exceptions and configuration shared by the engine and the CLI.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from .config import WalkConfig, load_config, validate_config
from .exceptions import (
    ConfigError,
    InvalidArgumentError,
    SelectorParseError,
    VisitParentsError,
)

__all__ = [
    "ConfigError",
    "InvalidArgumentError",
    "SelectorParseError",
    "VisitParentsError",
    "WalkConfig",
    "load_config",
    "validate_config",
]
