"""
Configuration management for devicematch.

Handles loading, validation, and access to matcher and logging settings.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml


CONFIG_ENV_VAR = "DEVICEMATCH_CONFIG"
DEFAULT_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


@dataclass
class MatchingConfig:
    """Description matching settings."""

    # Raise PatternError on invalid regex; otherwise the field does not match
    strict_patterns: bool = True


@dataclass
class LoggingConfig:
    """Logging settings."""

    level: str = "info"
    format: str = DEFAULT_LOG_FORMAT
    datefmt: str = "%Y-%m-%d %H:%M:%S"


@dataclass
class DeviceMatchConfig:
    """Main configuration container."""

    matching: MatchingConfig = field(default_factory=MatchingConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DeviceMatchConfig:
        """Create configuration from dictionary."""
        return cls(
            matching=MatchingConfig(**(data.get("matching") or {})),
            logging=LoggingConfig(**(data.get("logging") or {})),
        )

    def matcher_options(self) -> dict[str, Any]:
        """Keyword arguments for DeviceDescription.matches()."""
        return {"strict": self.matching.strict_patterns}


def load_config(path: str | Path | None = None) -> DeviceMatchConfig:
    """
    Load configuration from YAML file.

    Args:
        path: Path to configuration file. If None, uses $DEVICEMATCH_CONFIG
            or the default locations.

    Returns:
        DeviceMatchConfig instance with loaded settings.

    Raises:
        FileNotFoundError: If an explicit config file is not found.
        yaml.YAMLError: If config file is invalid YAML.
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR) or None

    if path is None:
        candidates = [
            Path("devicematch.yaml"),
            Path("config/devicematch.yaml"),
        ]
        for candidate in candidates:
            if candidate.exists():
                path = candidate
                break

    if path is None:
        return DeviceMatchConfig()

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return DeviceMatchConfig.from_dict(data)


def validate_config(config: DeviceMatchConfig) -> list[str]:
    """
    Validate configuration and return list of errors.

    Args:
        config: Configuration to validate.

    Returns:
        List of error messages. Empty list if valid.
    """
    errors: list[str] = []

    valid_log_levels = {"debug", "info", "warning", "error"}
    if config.logging.level not in valid_log_levels:
        errors.append(f"Invalid log level: {config.logging.level}")

    if not isinstance(config.matching.strict_patterns, bool):
        errors.append(
            f"Invalid strict_patterns: {config.matching.strict_patterns!r}"
        )

    return errors


def setup_logging(config: DeviceMatchConfig) -> None:
    """Configure root logging based on config."""
    level = getattr(logging, config.logging.level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format=config.logging.format,
        datefmt=config.logging.datefmt,
    )
