"""Centralized path management for vsbridge.

All local state (config, logs) is stored under a single base directory.
The base directory can be overridden with the VSBRIDGE_HOME environment
variable.

Default locations:
- Linux/macOS: ~/.vsbridge
- Windows: %USERPROFILE%\\.vsbridge
"""

import os
from functools import lru_cache
from pathlib import Path

ENV_VAR = "VSBRIDGE_HOME"


@lru_cache(maxsize=1)
def get_vsbridge_home() -> Path:
    """Get the base directory for all vsbridge data.

    Resolution order:
    1. VSBRIDGE_HOME environment variable (if set)
    2. ~/.vsbridge
    """
    if env_home := os.environ.get(ENV_VAR):
        return Path(env_home).expanduser()
    return Path.home() / ".vsbridge"


def get_config_path() -> Path:
    """Get the default config file location."""
    return get_vsbridge_home() / "config.toml"


def get_logs_path() -> Path:
    """Get the directory for JSONL log files."""
    return get_vsbridge_home() / "logs"
