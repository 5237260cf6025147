"""Filesystem operations for filewalk."""

from filewalk.files.discover import list_files

__all__ = [
    "list_files",
]
