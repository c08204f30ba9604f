"""High-level blocking API for findfiles.

Each finder lists the given directories, filters the entries through the
tests, and reduces the result. Directories may be a path, an iterable of
paths (including a traversal such as ``upward_directories()``), or left
out to search the current directory. With no tests nothing is read and
nothing is found.
"""

from typing import Any, List, Optional

from .._common.arguments import split_directories
from .._common.matchers import Matcher
from .combinators import all_elements, filter_elements, first_element, only_element
from .filesystem import readdirs


def find_file(directories: Any = None, *tests: Matcher) -> Optional[str]:
    """Find the first file or directory that passes all tests.

    Args:
        directories: Directory, iterable of directories, or a first test
        *tests: Matchers the path must pass

    Returns:
        The first matching path, or None

    Example:
        >>> find_file(upward_directories(), of_basename("setup.cfg"))
    """
    directories, tests = split_directories(directories, tests)
    if not tests:
        return None
    return first_element(filter_elements(readdirs(directories), *tests))


def find_all_files(directories: Any = None, *tests: Matcher) -> List[str]:
    """Find every file or directory that passes all tests, in listing order."""
    directories, tests = split_directories(directories, tests)
    if not tests:
        return []
    return all_elements(filter_elements(readdirs(directories), *tests))


def find_only_file(directories: Any = None, *tests: Matcher) -> Optional[str]:
    """Find the single file or directory that passes all tests.

    Returns:
        The matching path, or None if nothing matches

    Raises:
        ConflictError: If a second match is found; it names both paths
    """
    directories, tests = split_directories(directories, tests)
    if not tests:
        return None
    return only_element(filter_elements(readdirs(directories), *tests))
