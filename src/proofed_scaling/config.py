"""
Engine Configuration
Logging settings loaded from the environment and, optionally, a YAML or
JSON file. Rounding and display rules are fixed constants and are not
configurable.
"""

import json
import logging
import os
from dataclasses import dataclass, fields, asdict
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from proofed_scaling.errors import ConfigurationError

# Plain stdlib logger: logging_config depends on this module.
logger = logging.getLogger(__name__)

ENV_PREFIX = "PROOFED_"

# Decimal places for scaled ingredient quantities.
QUANTITY_PRECISION = 2
# Decimal places for container scale factors.
FACTOR_PRECISION = 2
# A factor within this distance of a common fraction gets its glyph label.
DISPLAY_TOLERANCE = 0.05

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("text", "json")


@dataclass(frozen=True)
class EngineConfig:
    """Logging configuration for applications embedding the engine."""
    log_level: str = "INFO"
    log_format: str = "text"

    def __post_init__(self):
        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigurationError(
                f"Unknown log level {self.log_level!r}, expected one of {', '.join(LOG_LEVELS)}"
            )
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(
                f"Unknown log format {self.log_format!r}, expected one of {', '.join(LOG_FORMATS)}"
            )

    @classmethod
    def from_env(cls) -> "EngineConfig":
        """
        Build configuration from PROOFED_* environment variables.

        Raises:
            ConfigurationError: a variable holds an unsupported value
        """
        return cls(
            log_level=os.getenv(f"{ENV_PREFIX}LOG_LEVEL", "INFO"),
            log_format=os.getenv(f"{ENV_PREFIX}LOG_FORMAT", "text").lower(),
        )

    def merged(self, overrides: Dict[str, Any]) -> "EngineConfig":
        """Return a copy with known keys replaced by overrides."""
        known = {f.name for f in fields(self)}
        values = asdict(self)

        for key, value in overrides.items():
            if key not in known:
                logger.warning(f"Ignoring unknown configuration key: {key}")
                continue
            values[key] = value

        return EngineConfig(
            log_level=str(values["log_level"]),
            log_format=str(values["log_format"]).lower(),
        )


def load_config(config_path: Optional[Union[str, Path]] = None) -> EngineConfig:
    """
    Load engine configuration.

    Args:
        config_path: Optional YAML or JSON file overlaid on environment values

    Returns:
        Engine configuration
    """
    config = EngineConfig.from_env()

    if config_path is None:
        return config

    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}", path=str(path))

    try:
        with open(path, 'r', encoding='utf-8') as f:
            if path.suffix.lower() == '.json':
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Failed to load config from {path}: {e}", path=str(path)) from e

    if data is None:
        return config
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration in {path} must be a mapping", path=str(path))

    try:
        return config.merged(data)
    except ConfigurationError as e:
        raise ConfigurationError(f"Invalid configuration value in {path}: {e.message}",
                                 path=str(path)) from e
