"""File discovery operations."""

import os
import stat


def list_files(root: str | os.PathLike[str]) -> list[str]:
    """List every non-directory entry beneath root.

    Walks depth-first, visiting the entries of each directory in lexical
    order. Entry types are taken as the directory listing reports them, so
    a symlink to a directory is listed as a file and not traversed.

    Args:
        root: Directory to walk. A non-directory root is returned as-is.

    Returns:
        Paths of all non-directory entries under root, in traversal order.
        Each is root joined with the entry's name and normalized, so a
        root of "./t" or "t//" yields "t/a.txt".

    Raises:
        OSError: The first error hit while inspecting root or reading any
            directory (FileNotFoundError, PermissionError, ...). The walk
            stops there and no partial result is returned.
    """
    root = os.fspath(root)

    if not stat.S_ISDIR(os.lstat(root).st_mode):
        return [root]

    files = []
    # (path, is_dir) pairs; children pushed in reverse so the smallest name pops first
    stack = [(root, True)]
    while stack:
        path, is_dir = stack.pop()
        if not is_dir:
            files.append(path)
            continue

        with os.scandir(path) as it:
            entries = sorted(it, key=lambda entry: entry.name)

        for entry in reversed(entries):
            child = os.path.normpath(os.path.join(path, entry.name))
            stack.append((child, entry.is_dir(follow_symlinks=False)))

    return files
