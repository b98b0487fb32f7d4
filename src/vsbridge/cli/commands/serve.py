"""Server command for running the bridge."""

import asyncio
import logging
from pathlib import Path
from typing import Annotated

import typer

from vsbridge.cli.console import dim, error, success

logger = logging.getLogger(__name__)


def register(app: typer.Typer) -> None:
    """Register the serve command."""

    @app.command()
    def serve(
        config: Annotated[
            Path | None,
            typer.Option(
                "--config",
                "-c",
                help="Path to configuration file",
            ),
        ] = None,
        host: Annotated[
            str | None,
            typer.Option(
                "--host",
                "-h",
                help="Host to bind to (overrides config)",
            ),
        ] = None,
        port: Annotated[
            int | None,
            typer.Option(
                "--port",
                "-p",
                help="Port to bind to (overrides config)",
            ),
        ] = None,
        snapshot: Annotated[
            Path | None,
            typer.Option(
                "--snapshot",
                "-s",
                help="Workspace snapshot JSON to serve (overrides config)",
            ),
        ] = None,
    ) -> None:
        """Start the JSON-RPC server."""
        try:
            asyncio.run(_run_server(config, host, port, snapshot))
        except KeyboardInterrupt:
            # Use print here since logging may not be configured yet
            print("\nServer stopped")


async def _run_server(
    config_path: Path | None = None,
    host: str | None = None,
    port: int | None = None,
    snapshot: Path | None = None,
) -> None:
    """Run the server asynchronously."""
    from vsbridge.codemodel import CodeModelError
    from vsbridge.config import ConfigError, load_config
    from vsbridge.logging import configure_logging
    from vsbridge.server import TransportError
    from vsbridge.service import create_bridge

    # Rich console output for the server plus JSONL file logs
    configure_logging(use_rich=True, log_to_file=True)

    logger.info("Loading configuration")
    try:
        bridge_config = load_config(config_path)
    except (ConfigError, FileNotFoundError) as e:
        error(str(e))
        raise typer.Exit(1) from None

    server_updates: dict[str, object] = {}
    if host is not None:
        server_updates["host"] = host
    if port is not None:
        server_updates["port"] = port
    if server_updates:
        bridge_config.server = bridge_config.server.model_copy(update=server_updates)
    if snapshot is not None:
        bridge_config.workspace = bridge_config.workspace.model_copy(
            update={"snapshot": snapshot}
        )

    if not bridge_config.server.enabled:
        error("HTTP server is disabled in configuration ([server] enabled = false)")
        raise typer.Exit(1)

    try:
        bridge = create_bridge(bridge_config)
    except (CodeModelError, FileNotFoundError) as e:
        error(f"Failed to load workspace: {e}")
        raise typer.Exit(1) from None

    if bridge.code_model is None:
        dim("No workspace snapshot configured; code-model tools are unavailable")

    try:
        await bridge.runner.start()
    except TransportError as e:
        error(str(e))
        raise typer.Exit(1) from None

    success(f"Listening on {bridge.runner.base_url}jsonrpc")
    await bridge.runner.run_until_stopped()
