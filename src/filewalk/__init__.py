"""Recursively list the files beneath a directory."""

from filewalk.files import list_files

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "list_files",
]
