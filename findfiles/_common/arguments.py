"""Argument normalisation for the public entry points.

The first positional argument of a finder or traversal may be a path, a
collection of paths, a predicate, or omitted. These helpers turn it into
a (directories, tests) pair so the rest of the code only sees one shape.
"""

import os
from typing import Any, Iterable, Tuple

from .matchers import Matcher

CURRENT_DIRECTORY = "."


def split_start(start: Any, tests: Tuple[Matcher, ...]) -> Tuple[Any, Tuple[Matcher, ...]]:
    """Normalise the start argument of a traversal.

    Returns:
        (start path, tests). A predicate in the start position is moved to
        the front of the tests and the current directory is used instead.
    """
    if start is None:
        return CURRENT_DIRECTORY, tests
    if callable(start) and not isinstance(start, (str, os.PathLike)):
        return CURRENT_DIRECTORY, (start,) + tuple(tests)
    return start, tests


def split_directories(directories: Any, tests: Tuple[Matcher, ...]) -> Tuple[Iterable, Tuple[Matcher, ...]]:
    """Normalise the directories argument of a finder.

    A single path becomes a one-element list; a predicate becomes the first
    test with the current directory as the only directory; any other value
    is assumed to be an (async) iterable of paths and is passed through.
    """
    if directories is None:
        return [CURRENT_DIRECTORY], tests
    if isinstance(directories, (str, bytes, os.PathLike)):
        return [directories], tests
    if callable(directories):
        return [CURRENT_DIRECTORY], (directories,) + tuple(tests)
    return directories, tests
