"""Output formatting for filewalk."""

from collections.abc import Sequence

import typer


def print_files(paths: Sequence[str]) -> None:
    """Print file paths to stdout, one per line."""
    for path in paths:
        typer.echo(path)


def print_walk_error(error: OSError) -> None:
    """Print a traversal error to stderr.

    Args:
        error: Error raised while walking the directory tree
    """
    if isinstance(error, PermissionError):
        message = f"Permission denied: {error}"
    elif isinstance(error, FileNotFoundError):
        message = f"No such file or directory: {_error_path(error)}"
    else:
        message = f"Filesystem error: {error}"

    typer.secho(f"✗ {message}", fg=typer.colors.RED, bold=True, err=True)


def _error_path(error: OSError) -> str:
    """Get the path an error refers to, falling back to the error text."""
    if error.filename is None:
        return str(error)
    # Empty root path would otherwise print as nothing
    if error.filename == "":
        return "''"
    return str(error.filename)
