"""Async filesystem queries.

Each blocking OS call runs in a worker thread via asyncio.to_thread so
the event loop is never blocked on a slow filesystem.
"""

import asyncio
import os
from typing import AsyncIterator

from .._common import oscalls
from .._common.oscalls import PathKind
from .._common.paths import PathLike
from .combinators import AnyIterable, first_element, filter_elements, multi_map
from .matchers import AsyncMatcher


async def readdir(directory: PathLike) -> AsyncIterator[str]:
    """Yield the absolute paths of a directory's entries, sorted by name.

    Raises:
        FileNotFoundError, NotADirectoryError, PermissionError: When the directory cannot be read
    """
    path = os.path.abspath(os.fspath(directory))
    entries = await asyncio.to_thread(oscalls.read_directory, path)
    for entry in entries:
        yield entry.path


def readdirs(directories: AnyIterable) -> AsyncIterator[str]:
    """Yield the entries of each directory in turn.

    Directories may come from a sync or an async iterable.
    """
    return multi_map(directories, readdir)


async def _kind(path: PathLike):
    return await asyncio.to_thread(oscalls.path_kind, os.fspath(path))


async def is_file(path: PathLike) -> bool:
    """Whether a path is a regular file. A missing path is not a file."""
    return await _kind(path) is PathKind.FILE


async def is_directory(path: PathLike) -> bool:
    """Whether a path is a directory. A missing path is not a directory."""
    return await _kind(path) is PathKind.DIRECTORY


def has_file(*tests) -> AsyncMatcher:
    """Build an async matcher for directories containing an entry that passes all tests."""
    async def matches(path: PathLike) -> bool:
        if not await is_directory(path):
            return False
        return await first_element(filter_elements(readdir(path), *tests)) is not None

    return matches
