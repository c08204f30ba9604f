"""Async downward and upward traversals.

The same engines as the blocking traversals drive these; every call the
engine requests is awaited in a worker thread with asyncio.to_thread.
Calls are performed one at a time, so the output order is identical to
the blocking form.
"""

import asyncio
import logging
from typing import AsyncIterator, Optional

from .._common.arguments import split_start
from .._common.config import DownwardConfig, UpwardBound, UpwardConfig, ensure_valid
from .._common.engine import Found, Steps, downward_steps, upward_steps
from .._common.paths import PathLike
from .combinators import filter_elements, multi_map
from .filesystem import readdir

logger = logging.getLogger(__name__)


async def run_steps(steps: Steps) -> AsyncIterator[str]:
    """Drive a traversal engine, awaiting every I/O request in a worker thread.

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
                value = await asyncio.to_thread(step.function, *step.args)
    except Exception as error:
        logger.debug("Async traversal aborted: %r", error)
        raise
    finally:
        steps.close()


def traverse_downward(config: DownwardConfig) -> AsyncIterator[str]:
    """Run a downward traversal described by a config object.

    This is a plain function: the config is validated when it is called,
    and the returned async iterator does the work.

    Raises:
        InvalidArgumentError: Immediately, if the config does not validate
    """
    ensure_valid(config)
    return run_steps(downward_steps(config))


def traverse_upward(config: UpwardConfig) -> AsyncIterator[str]:
    """Run an upward traversal described by a config object.

    Raises:
        InvalidArgumentError: Immediately, if the config does not validate
    """
    ensure_valid(config)
    return run_steps(upward_steps(config))


def _filtered(paths: AsyncIterator[str], tests) -> AsyncIterator[str]:
    return filter_elements(paths, *tests) if tests else paths


def downward_files(
    start: Optional[PathLike] = None,
    *tests,
    max_depth: Optional[int] = None,
) -> AsyncIterator[str]:
    """Async form of findfiles.sync.downward_files.

    Tests may be plain predicates or coroutine functions.

    Example:
        >>> async for path in downward_files("src", of_extname(".py")):
        ...     print(path)
    """
    start, tests = split_start(start, tests)
    config = DownwardConfig(start=start, max_depth=max_depth)
    return _filtered(traverse_downward(config), tests)


def downward_directories(
    start: Optional[PathLike] = None,
    *tests,
    max_depth: Optional[int] = None,
    include_start: bool = False,
) -> AsyncIterator[str]:
    """Async form of findfiles.sync.downward_directories."""
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
    *tests,
    bound: UpwardBound = None,
) -> AsyncIterator[str]:
    """Async form of findfiles.sync.upward_directories.

    Raises:
        InvalidArgumentError: Immediately for a negative height or a bound
            on another root; on first iteration if the bound is not an
            ancestor of the start
    """
    start, tests = split_start(start, tests)
    config = UpwardConfig(start=start, bound=bound)
    return _filtered(traverse_upward(config), tests)


def upward_files(
    start: Optional[PathLike] = None,
    *tests,
    bound: UpwardBound = None,
) -> AsyncIterator[str]:
    """Async form of findfiles.sync.upward_files."""
    start, tests = split_start(start, tests)
    directories = traverse_upward(UpwardConfig(start=start, bound=bound))
    return _filtered(multi_map(directories, readdir), tests)
