"""Main CLI application."""

import typer

from vsbridge.cli.commands import config, path, serve, status

app = typer.Typer(
    name="vsbridge",
    help="vsbridge - JSON-RPC bridge to the IDE code model",
    no_args_is_help=True,
)

serve.register(app)
status.register(app)
path.register(app)
config.register(app)


if __name__ == "__main__":
    app()
