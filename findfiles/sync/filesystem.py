"""Blocking filesystem queries: listing and file-type predicates."""

import os
from typing import Iterable, Iterator

from .._common import oscalls
from .._common.matchers import Matcher
from .._common.oscalls import PathKind
from .._common.paths import PathLike
from .combinators import first_element, filter_elements, multi_map


def readdir(directory: PathLike) -> Iterator[str]:
    """Yield the absolute paths of a directory's entries, sorted by name.

    Raises:
        FileNotFoundError, NotADirectoryError, PermissionError: When the directory cannot be read
    """
    for entry in oscalls.read_directory(os.path.abspath(os.fspath(directory))):
        yield entry.path


def readdirs(directories: Iterable[PathLike]) -> Iterator[str]:
    """Yield the entries of each directory in turn."""
    return multi_map(directories, readdir)


def is_file(path: PathLike) -> bool:
    """Whether a path is a regular file. A missing path is not a file."""
    return oscalls.path_kind(os.fspath(path)) is PathKind.FILE


def is_directory(path: PathLike) -> bool:
    """Whether a path is a directory. A missing path is not a directory."""
    return oscalls.path_kind(os.fspath(path)) is PathKind.DIRECTORY


def has_file(*tests: Matcher) -> Matcher:
    """Build a matcher for directories containing an entry that passes all tests.

    The matcher is False for anything that is not a directory.
    """
    def matches(path: PathLike) -> bool:
        if not is_directory(path):
            return False
        return first_element(filter_elements(readdir(path), *tests)) is not None

    return matches
