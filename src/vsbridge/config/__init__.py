"""Configuration module."""

from vsbridge.config.loader import find_config_file, get_default_config, load_config
from vsbridge.config.models import (
    BridgeConfig,
    ConfigError,
    PathsConfig,
    ServerConfig,
    WorkspaceConfig,
)
from vsbridge.config.paths import get_config_path, get_logs_path, get_vsbridge_home

__all__ = [
    "BridgeConfig",
    "ConfigError",
    "PathsConfig",
    "ServerConfig",
    "WorkspaceConfig",
    "find_config_file",
    "get_config_path",
    "get_default_config",
    "get_logs_path",
    "get_vsbridge_home",
    "load_config",
]
