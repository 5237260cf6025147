"""Command-line interface for filewalk."""

from typing import Annotated

import typer

from filewalk import __version__
from filewalk.files import list_files
from filewalk.output import print_files
from filewalk.output import print_walk_error

app = typer.Typer(help="List all files beneath a directory")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"filewalk {__version__}")
        raise typer.Exit()


@app.command()
def walk(
    root: Annotated[str, typer.Argument(help="Directory to walk")],
    version: Annotated[
        bool | None,
        typer.Option(
            "--version", callback=version_callback, is_eager=True, help="Show version"
        ),
    ] = None,
) -> None:
    """List every file beneath ROOT, depth-first in name order."""
    try:
        paths = list_files(root)
    except OSError as e:
        print_walk_error(e)
        raise typer.Exit(1) from None

    print_files(paths)


def main() -> None:
    """Main entry point for the filewalk CLI."""
    app()


if __name__ == "__main__":
    main()
