"""Path translation commands."""

from typing import Annotated

import typer

from vsbridge.cli.console import error


def register(app: typer.Typer) -> None:
    """Register the path command group."""

    path_app = typer.Typer(
        name="path",
        help="Translate paths between native, mounted and URI formats",
        no_args_is_help=True,
    )

    @path_app.command()
    def translate(
        path: Annotated[str, typer.Argument(help="Path to translate")],
        source: Annotated[
            str,
            typer.Option("--from", "-f", help="Source format (auto detects)"),
        ] = "auto",
        target: Annotated[
            str,
            typer.Option("--to", "-t", help="Target format"),
        ] = "mounted",
    ) -> None:
        """Translate a path.

        Examples:
            vsbridge path translate 'C:\\src\\app.cs'
            vsbridge path translate /mnt/c/src --to uri
        """
        from vsbridge.path_translation import (
            PathTranslationError,
            PathTranslator,
            parse_path_format,
        )

        try:
            result = PathTranslator().translate(
                path, parse_path_format(source), parse_path_format(target)
            )
        except PathTranslationError as e:
            error(str(e))
            raise typer.Exit(1) from None

        typer.echo(result)

    @path_app.command()
    def relative(
        base: Annotated[str, typer.Argument(help="Base file path (e.g. a solution)")],
        full: Annotated[str, typer.Argument(help="Path to make relative")],
        target: Annotated[
            str,
            typer.Option("--to", "-t", help="Format of the result"),
        ] = "native",
    ) -> None:
        """Show a path relative to the directory of a base file."""
        from vsbridge.path_translation import (
            PathTranslationError,
            PathTranslator,
            parse_path_format,
        )

        try:
            result = PathTranslator().get_relative_path(
                base, full, parse_path_format(target)
            )
        except (PathTranslationError, ValueError) as e:
            error(str(e))
            raise typer.Exit(1) from None

        typer.echo(result)

    @path_app.command("id")
    def composite_id(
        name: Annotated[str, typer.Argument(help="Project or document name")],
        path: Annotated[str, typer.Argument(help="Project or document path")],
        base: Annotated[str, typer.Argument(help="Base file path (e.g. a solution)")],
    ) -> None:
        """Show the composite id derived for a project or document."""
        from vsbridge.path_translation import PathTranslationError, PathTranslator

        try:
            result = PathTranslator().create_composite_id(name, path, base)
        except (PathTranslationError, ValueError) as e:
            error(str(e))
            raise typer.Exit(1) from None

        typer.echo(result)

    app.add_typer(path_app)
