"""High-level async API for findfiles.

Coroutine counterparts of findfiles.sync.api. Directories may be a path,
a sync or async iterable of paths, or left out; tests may be plain
predicates or coroutine functions.
"""

from typing import Any, List, Optional

from .._common.arguments import split_directories
from .combinators import all_elements, filter_elements, first_element, only_element
from .filesystem import readdirs


async def find_file(directories: Any = None, *tests) -> Optional[str]:
    """Find the first file or directory that passes all tests.

    Example:
        >>> await find_file(upward_directories(), of_basename("setup.cfg"))
    """
    directories, tests = split_directories(directories, tests)
    if not tests:
        return None
    return await first_element(filter_elements(readdirs(directories), *tests))


async def find_all_files(directories: Any = None, *tests) -> List[str]:
    """Find every file or directory that passes all tests, in listing order."""
    directories, tests = split_directories(directories, tests)
    if not tests:
        return []
    return await all_elements(filter_elements(readdirs(directories), *tests))


async def find_only_file(directories: Any = None, *tests) -> Optional[str]:
    """Find the single file or directory that passes all tests.

    Raises:
        ConflictError: If a second match is found
    """
    directories, tests = split_directories(directories, tests)
    if not tests:
        return None
    return await only_element(filter_elements(readdirs(directories), *tests))
