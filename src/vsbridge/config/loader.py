"""Configuration loading from TOML files and environment variables."""

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from vsbridge.config.models import BridgeConfig, ConfigError
from vsbridge.config.paths import get_config_path

logger = logging.getLogger(__name__)

HOST_ENV = "VSBRIDGE_HOST"
PORT_ENV = "VSBRIDGE_PORT"
SNAPSHOT_ENV = "VSBRIDGE_SNAPSHOT"


def _get_default_config_paths() -> list[Path]:
    """Get ordered list of default config file locations."""
    return [
        Path("vsbridge.toml"),  # Current directory
        get_config_path(),  # ~/.vsbridge/config.toml (or VSBRIDGE_HOME)
    ]


def _apply_env_overrides(config: dict[str, Any]) -> dict[str, Any]:
    """Apply environment variable overrides on top of file values."""
    server = config.setdefault("server", {})
    if host := os.environ.get(HOST_ENV):
        server["host"] = host
    if port := os.environ.get(PORT_ENV):
        try:
            server["port"] = int(port)
        except ValueError as e:
            raise ConfigError(f"Invalid {PORT_ENV}: {port!r}") from e

    if snapshot := os.environ.get(SNAPSHOT_ENV):
        config.setdefault("workspace", {})["snapshot"] = snapshot

    return config


def find_config_file() -> Path | None:
    """Return the first existing default config file, if any."""
    for default_path in _get_default_config_paths():
        expanded = default_path.expanduser()
        if expanded.exists():
            return expanded
    return None


def load_config(path: Path | None = None) -> BridgeConfig:
    """Load configuration from a TOML file.

    Unlike an explicit path, a missing default location is not an error:
    defaults (plus environment overrides) are used instead.

    Args:
        path: Explicit path to config file. If None, searches default locations.

    Returns:
        Validated BridgeConfig instance.

    Raises:
        FileNotFoundError: If an explicit config file does not exist.
        ConfigError: If the config file is invalid.
    """
    config_path: Path | None = None

    if path is not None:
        config_path = Path(path).expanduser()
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
    else:
        config_path = find_config_file()

    raw_config: dict[str, Any] = {}
    if config_path is not None:
        logger.debug(f"Loading config from {config_path}")
        try:
            with config_path.open("rb") as f:
                raw_config = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in {config_path}: {e}") from e

    raw_config = _apply_env_overrides(raw_config)

    try:
        return BridgeConfig.model_validate(raw_config)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e


def get_default_config() -> BridgeConfig:
    """Get a default configuration for development/testing."""
    return BridgeConfig()
