"""Commands for checking a running bridge."""

import asyncio
import json
from typing import Annotated, Any

import typer

from vsbridge.cli.console import console, create_table, dim, error, success

PROBE_TOOL = "get_solution_projects"


def _resolve_url(url: str | None) -> str:
    if url:
        return url

    from vsbridge.config import ConfigError, load_config

    try:
        return load_config().server.endpoint_url
    except ConfigError as e:
        error(str(e))
        raise typer.Exit(1) from None


def register(app: typer.Typer) -> None:
    """Register the status and probe commands."""

    @app.command()
    def status(
        url: Annotated[
            str | None,
            typer.Option(
                "--url",
                "-u",
                help="JSON-RPC endpoint (default: from configuration)",
            ),
        ] = None,
    ) -> None:
        """Check whether the bridge answers initialize."""
        from vsbridge.client import BridgeClient
        from vsbridge.rpc import RPCCallError

        endpoint = _resolve_url(url)

        async def do_status() -> dict[str, Any]:
            async with BridgeClient(endpoint) as client:
                return await client.call(
                    "initialize", {"clientInfo": {"name": "vsbridge-cli"}}
                )

        try:
            result = asyncio.run(do_status())
        except ConnectionError as e:
            error(f"Not running: {e}")
            raise typer.Exit(1) from None
        except RPCCallError as e:
            error(f"initialize failed ({e.code}): {e}")
            raise typer.Exit(1) from None

        server_info = result.get("serverInfo", {})
        table = create_table("Bridge Status", [("Setting", "cyan"), ("Value", "")])
        table.add_row("Endpoint", endpoint)
        table.add_row("Server", str(server_info.get("name", "?")))
        table.add_row("Version", str(server_info.get("version", "?")))
        table.add_row("Protocol", str(result.get("protocolVersion", "?")))

        success("Bridge is running")
        console.print(table)

    @app.command()
    def probe(
        url: Annotated[
            str | None,
            typer.Option(
                "--url",
                "-u",
                help="JSON-RPC endpoint (default: from configuration)",
            ),
        ] = None,
    ) -> None:
        """Run initialize, tools/list and a tool call, printing each response."""
        from vsbridge.client import BridgeClient

        endpoint = _resolve_url(url)
        requests = [
            {
                "jsonrpc": "2.0",
                "method": "initialize",
                "params": {"clientInfo": {"name": "vsbridge-probe"}},
                "id": 1,
            },
            {"jsonrpc": "2.0", "method": "tools/list", "params": {}, "id": 2},
            {
                "jsonrpc": "2.0",
                "method": "tools/call",
                "params": {"name": PROBE_TOOL, "arguments": {}},
                "id": 3,
            },
        ]

        async def do_probe() -> list[dict[str, Any]]:
            async with BridgeClient(endpoint) as client:
                return [await client.request(request) for request in requests]

        try:
            responses = asyncio.run(do_probe())
        except ConnectionError as e:
            error(str(e))
            raise typer.Exit(1) from None

        failed = False
        for request, response in zip(requests, responses, strict=True):
            dim(f"--> {request['method']}")
            console.print_json(json.dumps(response))
            failed = failed or "error" in response

        if failed:
            error("Probe finished with errors")
            raise typer.Exit(1)
        success("Probe succeeded")
