"""Filesystem helpers used while materializing archive members."""

import os
from pathlib import Path
from typing import BinaryIO

from ..exceptions import FileError


def exists(path: str) -> bool:
    """Check if path exists."""
    return Path(path).exists()


def mkdir_all(path: str) -> None:
    """Create a directory and any missing parents.

    Raises:
        FileError: If the directory cannot be created
    """
    try:
        Path(path).mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FileError(f"Failed to create directory {path}: {e}") from e


def ensure_parent(path: str) -> None:
    """Create the parent directory of ``path`` if it is missing."""
    parent = os.path.dirname(path)
    if not exists(parent):
        mkdir_all(parent)


def open_for_write(path: str) -> BinaryIO:
    """Open (and truncate) a file for binary writing.

    Raises:
        FileError: If the file cannot be opened
    """
    try:
        return open(path, "wb")
    except OSError as e:
        raise FileError(f"Failed to open {path} for writing: {e}") from e


def close(handle: BinaryIO) -> None:
    """Close a file handle.

    Raises:
        FileError: If flushing or closing fails
    """
    try:
        handle.close()
    except OSError as e:
        raise FileError(f"Failed to close {handle.name}: {e}") from e
