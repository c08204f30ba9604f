"""Blocking downward and upward traversals.

The algorithms live in findfiles._common.engine; this module drives them
by performing each requested call inline on the calling thread.
"""

import logging
from typing import Iterator, Optional

from .._common.arguments import split_start
from .._common.config import DownwardConfig, UpwardBound, UpwardConfig, ensure_valid
from .._common.engine import Found, Steps, downward_steps, upward_steps
from .._common.matchers import Matcher
from .._common.paths import PathLike
from .combinators import filter_elements, multi_map
from .filesystem import readdir

logger = logging.getLogger(__name__)


def run_steps(steps: Steps) -> Iterator[str]:
    """Drive a traversal engine, performing every I/O request inline.

    Yields:
        The paths the engine found, in engine order
    """
    value = None
    try:
        while True:
            try:
                step = steps.send(value)
            except StopIteration:
                return
            if isinstance(step, Found):
                value = None
                yield step.path
            else:
                value = step.function(*step.args)
    except Exception as error:
        logger.debug("Traversal aborted: %r", error)
        raise
    finally:
        steps.close()


def traverse_downward(config: DownwardConfig) -> Iterator[str]:
    """Run a downward traversal described by a config object.

    Raises:
        InvalidArgumentError: Immediately, if the config does not validate
    """
    ensure_valid(config)
    return run_steps(downward_steps(config))


def traverse_upward(config: UpwardConfig) -> Iterator[str]:
    """Run an upward traversal described by a config object.

    Raises:
        InvalidArgumentError: Immediately, if the config does not validate
    """
    ensure_valid(config)
    return run_steps(upward_steps(config))


def _filtered(paths: Iterator[str], tests) -> Iterator[str]:
    # Tests only gate what is yielded; without tests the walk is returned as is.
    return filter_elements(paths, *tests) if tests else paths


def downward_files(
    start: Optional[PathLike] = None,
    *tests: Matcher,
    max_depth: Optional[int] = None,
) -> Iterator[str]:
    """Iterate over the files and directories below a directory, breadth-first.

    Symbolic links are followed, but each real directory is read only once.
    The start directory itself is never yielded.

    Args:
        start: Directory to start from (default: current directory). A file
            is replaced by its parent directory; a predicate is used as a test.
        *tests: Matchers a path must pass to be yielded. They never prune
            the walk.
        max_depth: Depth of the deepest directory read; 0 reads only the
            start directory.

    Raises:
        InvalidArgumentError: Immediately, if max_depth is negative

    Example:
        >>> for path in downward_files("src", of_extname(".py"), max_depth=2):
        ...     print(path)
    """
    start, tests = split_start(start, tests)
    config = DownwardConfig(start=start, max_depth=max_depth)
    return _filtered(traverse_downward(config), tests)


def downward_directories(
    start: Optional[PathLike] = None,
    *tests: Matcher,
    max_depth: Optional[int] = None,
    include_start: bool = False,
) -> Iterator[str]:
    """Iterate over the directories below a directory, breadth-first.

    Same as downward_files, restricted to directories. With include_start
    the start directory is yielded first, if it passes the tests.
    """
    start, tests = split_start(start, tests)
    config = DownwardConfig(
        start=start,
        max_depth=max_depth,
        directories_only=True,
        include_start=include_start,
    )
    return _filtered(traverse_downward(config), tests)


def upward_directories(
    start: Optional[PathLike] = None,
    *tests: Matcher,
    bound: UpwardBound = None,
) -> Iterator[str]:
    """Iterate over the ancestors of a path, nearest first.

    Args:
        start: Path to start from (default: current directory). A file is
            replaced by its parent; missing trailing segments are skipped.
        *tests: Matchers a directory must pass to be yielded
        bound: None to walk up to the filesystem root, an int to climb that
            many levels, or an ancestor path to stop at (inclusive)

    Raises:
        InvalidArgumentError: Immediately for a negative height or a bound
            on another root; on first iteration if the bound is not an
            ancestor of the start

    Example:
        >>> first_element(upward_directories(".", has_file(of_basename(".git"))))
    """
    start, tests = split_start(start, tests)
    config = UpwardConfig(start=start, bound=bound)
    return _filtered(traverse_upward(config), tests)


def upward_files(
    start: Optional[PathLike] = None,
    *tests: Matcher,
    bound: UpwardBound = None,
) -> Iterator[str]:
    """Iterate over the entries of every upward directory, nearest directory first."""
    start, tests = split_start(start, tests)
    directories = traverse_upward(UpwardConfig(start=start, bound=bound))
    return _filtered(multi_map(directories, readdir), tests)
