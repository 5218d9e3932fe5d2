"""Configuration management for ctail.

This module handles loading and accessing configuration from:
1. ctail.toml file (``$CTAIL_CONFIG`` or the per-user data directory)
2. Environment variables (CTAIL_* prefix)
3. Default values

Environment variables override config file values, which override defaults.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import toml

from ctail.core.constants import DEFAULT_LINES, LINE_LENGTH_LIMIT, READ_CHUNK_SIZE


@dataclass
class TailConfig:
    """Line buffering configuration."""

    default_lines: int = DEFAULT_LINES
    line_length_limit: int = LINE_LENGTH_LIMIT
    chunk_size: int = READ_CHUNK_SIZE


@dataclass
class LoggingConfig:
    """Logging configuration."""

    log_level: str = "WARNING"


@dataclass
class Config:
    """Main configuration container."""

    tail: TailConfig = field(default_factory=TailConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    config_path: Path | None = None


def _get_env_int(key: str, default: int) -> int:
    """Get integer from environment variable."""
    value = os.environ.get(key)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            pass
    return default


def _get_file_int(section: dict[str, Any], key: str, default: int) -> int:
    """Get integer from a config file section, ignoring unusable values."""
    value = section.get(key)
    if value is None or isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _get_file_str(section: dict[str, Any], key: str, default: str) -> str:
    """Get string from a config file section, ignoring non-strings."""
    value = section.get(key)
    if isinstance(value, str) and value:
        return value
    return default


def _get_env_str(key: str, default: str | None) -> str | None:
    """Get string from environment variable."""
    return os.environ.get(key, default)


def default_config_path() -> Path:
    """Resolve where ctail.toml is looked up."""
    override = os.environ.get("CTAIL_CONFIG")
    if override:
        return Path(override)
    if sys.platform == "win32":
        data_dir = Path(os.environ.get("APPDATA", "")) / "ctail"
    else:
        data_dir = Path.home() / ".ctail"
    return data_dir / "ctail.toml"


def _load_config_file(config_path: Path) -> dict[str, Any]:
    """Load configuration from a ctail.toml file."""
    if not config_path.exists():
        return {}

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            return toml.load(f)
    except (OSError, toml.TomlDecodeError):
        return {}


def _apply_file_config(config: Config, file_config: dict[str, Any]) -> Config:
    """Apply configuration from file to config object."""
    tail = file_config.get("tail")
    if isinstance(tail, dict):
        config.tail.default_lines = _get_file_int(
            tail, "default_lines", config.tail.default_lines
        )
        config.tail.line_length_limit = _get_file_int(
            tail, "line_length_limit", config.tail.line_length_limit
        )
        config.tail.chunk_size = _get_file_int(
            tail, "chunk_size", config.tail.chunk_size
        )

    logging = file_config.get("logging")
    if isinstance(logging, dict):
        config.logging.log_level = _get_file_str(
            logging, "log_level", config.logging.log_level
        )

    return config


def _apply_env_overrides(config: Config) -> Config:
    """Apply environment variable overrides to config."""
    config.tail.default_lines = _get_env_int(
        "CTAIL_DEFAULT_LINES", config.tail.default_lines
    )
    config.tail.line_length_limit = _get_env_int(
        "CTAIL_LINE_LENGTH_LIMIT", config.tail.line_length_limit
    )
    config.tail.chunk_size = _get_env_int("CTAIL_CHUNK_SIZE", config.tail.chunk_size)

    config.logging.log_level = (
        _get_env_str("CTAIL_LOG_LEVEL", config.logging.log_level)
        or config.logging.log_level
    )

    return config


def load_config() -> Config:
    """Load configuration from defaults, file, and environment.

    Priority (highest to lowest):
    1. Environment variables (CTAIL_*)
    2. ctail.toml file
    3. Default values

    Returns:
        Config: The loaded configuration object
    """
    config_path = default_config_path()
    config = Config(config_path=config_path)

    file_config = _load_config_file(config_path)
    if file_config:
        config = _apply_file_config(config, file_config)

    # Apply environment overrides (highest priority)
    config = _apply_env_overrides(config)

    return config


# Global config instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config() -> Config:
    """Reload configuration from file and environment."""
    global _config
    _config = load_config()
    return _config


__all__ = [
    "Config",
    "TailConfig",
    "LoggingConfig",
    "default_config_path",
    "load_config",
    "get_config",
    "reload_config",
]
