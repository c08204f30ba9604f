"""Blocking OS primitives requested by the traversal engine.

The engine never calls these itself. It hands them to a driver, which
either calls them inline (sync) or runs them in a worker thread (aio).
Keep every function here a plain blocking call with no hidden state.
"""

import os
import stat as stat_module
from enum import Enum
from pathlib import Path
from typing import List, NamedTuple, Optional


class PathKind(Enum):
    """What a path refers to once symlinks are followed."""
    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"


class DirectoryEntry(NamedTuple):
    """One entry of a directory listing."""
    path: str
    is_dir: bool


def read_directory(directory: str) -> List[DirectoryEntry]:
    """List a directory's entries sorted by name.

    Uses os.scandir so the directory flag comes from the same call as the
    listing. Symlinks are followed when deciding whether an entry is a
    directory; a dangling symlink is reported as a non-directory.

    Raises:
        FileNotFoundError, NotADirectoryError, PermissionError: As raised by os.scandir
    """
    with os.scandir(directory) as iterator:
        entries = [
            DirectoryEntry(os.path.join(directory, entry.name), entry.is_dir())
            for entry in iterator
        ]
    entries.sort(key=lambda entry: entry.path)
    return entries


def canonical_path(path: str) -> str:
    """Resolve a path to its absolute, symlink-free form.

    Raises:
        FileNotFoundError: If the path, or a symlink along it, does not resolve
    """
    return str(Path(path).resolve(strict=True))


def path_kind(path: str) -> Optional[PathKind]:
    """Return the kind of a path, or None when nothing exists there.

    Only a missing path maps to None; other stat failures propagate.
    """
    try:
        mode = os.stat(path).st_mode
    except (FileNotFoundError, NotADirectoryError):
        return None
    if stat_module.S_ISDIR(mode):
        return PathKind.DIRECTORY
    if stat_module.S_ISREG(mode):
        return PathKind.FILE
    return PathKind.OTHER


def start_directory(path: str) -> str:
    """Return the directory a downward walk should start from.

    A file is replaced by its parent directory.

    Raises:
        FileNotFoundError: If nothing exists at the path
    """
    mode = os.stat(path).st_mode
    if stat_module.S_ISDIR(mode):
        return path
    return os.path.dirname(path)
