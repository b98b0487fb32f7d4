"""CLI command modules."""

from vsbridge.cli.commands import config, path, serve, status

__all__ = [
    "config",
    "path",
    "serve",
    "status",
]
