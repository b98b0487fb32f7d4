"""Command-line interface."""

from vsbridge.cli.app import app

__all__ = ["app"]
