"""HTTP server for vsbridge."""

from vsbridge.server.app import create_app
from vsbridge.server.runner import ServerRunner, TransportError

__all__ = [
    "ServerRunner",
    "TransportError",
    "create_app",
]
