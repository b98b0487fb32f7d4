"""vsbridge - JSON-RPC bridge exposing IDE code-model tools to external clients."""

__version__ = "0.1.0"
