"""Configuration management commands."""

from pathlib import Path
from typing import Annotated

import click
import typer

from vsbridge.cli.console import console, create_table, dim, error, success


def register(app: typer.Typer) -> None:
    """Register the config command."""

    @app.command()
    def config(
        action: Annotated[
            str | None,
            typer.Argument(help="Action: show, validate"),
        ] = None,
        path: Annotated[
            Path | None,
            typer.Option(
                "--path",
                "-p",
                help="Path to config file (default: ./vsbridge.toml or $VSBRIDGE_HOME/config.toml)",
            ),
        ] = None,
    ) -> None:
        """Manage configuration."""
        if action is None:
            ctx = click.get_current_context()
            click.echo(ctx.get_help())
            raise typer.Exit(0)

        from rich.syntax import Syntax

        from vsbridge.config import (
            ConfigError,
            find_config_file,
            get_config_path,
            load_config,
        )

        if path is not None:
            expanded_path = path.expanduser()
        else:
            expanded_path = find_config_file() or get_config_path()

        if action == "show":
            if not expanded_path.exists():
                error(f"Config file not found: {expanded_path}")
                dim("Built-in defaults are used when no config file exists")
                raise typer.Exit(1)

            content = expanded_path.read_text()
            syntax = Syntax(content, "toml", theme="monokai", line_numbers=True)
            console.print(f"[bold]Config file: {expanded_path}[/bold]\n")
            console.print(syntax)

        elif action == "validate":
            if not expanded_path.exists():
                error(f"Config file not found: {expanded_path}")
                raise typer.Exit(1)

            try:
                config_obj = load_config(expanded_path)
            except (ConfigError, FileNotFoundError) as e:
                error(f"Configuration validation failed: {e}")
                raise typer.Exit(1) from None

            table = create_table(
                "Configuration Summary", [("Setting", "cyan"), ("Value", "green")]
            )
            table.add_row("Server name", config_obj.server_name)
            table.add_row(
                "Server",
                f"{config_obj.server.host}:{config_obj.server.port}"
                if config_obj.server.enabled
                else "[dim]disabled[/dim]",
            )
            table.add_row(
                "Max concurrent requests",
                str(config_obj.server.max_concurrent_requests or "unbounded"),
            )
            table.add_row("Output path format", config_obj.paths.output_format)
            table.add_row(
                "Workspace snapshot",
                str(config_obj.workspace.snapshot)
                if config_obj.workspace.snapshot
                else "[dim]not configured[/dim]",
            )

            success("Configuration is valid!")
            console.print()
            console.print(table)

        else:
            error(f"Unknown action: {action}")
            console.print("Valid actions: show, validate")
            raise typer.Exit(1)
