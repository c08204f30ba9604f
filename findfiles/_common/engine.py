"""Traversal algorithms shared by the sync and aio implementations.

Each traversal is written once, as a generator of *steps*. A step is
either a ``Call`` (an I/O request: the driver performs it and sends the
result back in) or a ``Found`` (a path to hand to the consumer). The
engine never performs I/O itself, so the blocking driver and the asyncio
driver run the exact same algorithm; ordering and error surfacing cannot
drift between them.

A driver loop looks like::

    value = None
    while True:
        step = steps.send(value)          # StopIteration ends the walk
        if isinstance(step, Found):
            emit(step.path)
            value = None
        else:
            value = perform(step.function, *step.args)

An exception raised while performing a Call is not sent back into the
engine: the driver lets it propagate, which terminates the sequence.
"""

import errno
import logging
import os
from typing import Any, Callable, Generator, NamedTuple, Tuple, Union

from . import oscalls
from .config import DownwardConfig, UpwardConfig
from .errors import InvalidArgumentError
from .frontier import Frontier, QueueUnit
from .identity import CanonicalIdentityTracker
from .oscalls import PathKind
from .paths import absolute, is_ancestor, is_ancestor_or_self, lexical_parent, root_of

logger = logging.getLogger(__name__)


class Call(NamedTuple):
    """A blocking call the driver must perform on the engine's behalf."""
    function: Callable[..., Any]
    args: Tuple[Any, ...]


class Found(NamedTuple):
    """A path produced by the traversal."""
    path: str


Step = Union[Call, Found]
Steps = Generator[Step, Any, None]


def downward_steps(config: DownwardConfig) -> Steps:
    """Breadth-first walk below ``config.start``.

    The start directory is depth 0. Its entries are yielded in sorted
    order; each subdirectory whose parent depth is below max_depth and
    whose canonical path has not been seen is enqueued as part of its
    parent's batch. Symlinks are followed, but every real directory is
    read at most once.
    """
    start = yield Call(oscalls.start_directory, (absolute(config.start),))
    tracker = CanonicalIdentityTracker()
    tracker.mark_visited((yield Call(tracker.resolve, (start,))))
    logger.debug("Downward traversal from %s (max_depth=%s)", start, config.max_depth)

    if config.include_start:
        yield Found(start)

    frontier = Frontier([QueueUnit(start, 0)])
    while frontier:
        unit = frontier.dequeue()
        entries = yield Call(oscalls.read_directory, (unit.path,))
        explore = config.should_explore(unit.depth)
        batch = []
        for entry in entries:
            if entry.is_dir or not config.directories_only:
                yield Found(entry.path)
            if not (entry.is_dir and explore):
                continue
            canonical = yield Call(tracker.resolve, (entry.path,))
            if tracker.has_visited(canonical):
                logger.debug("Skipping %s: %s was already expanded", entry.path, canonical)
                continue
            tracker.mark_visited(canonical)
            batch.append(QueueUnit(entry.path, unit.depth + 1))
        frontier.enqueue_batch(batch)


def upward_steps(config: UpwardConfig) -> Steps:
    """Walk through the ancestors of ``config.start``, nearest first.

    The effective start (the start, or its parent when it names a file)
    is only yielded when it is also the target. Missing trailing segments
    of the start are skipped until an existing ancestor is reached.
    """
    target = config.target
    if target is not None:
        target = absolute(target)
        target_kind = yield Call(oscalls.path_kind, (target,))
        if target_kind is None:
            raise FileNotFoundError(errno.ENOENT, "The bound path does not exist", target)
        if target_kind is PathKind.FILE:
            target = os.path.dirname(target)
        start = absolute(config.start, base=target)
    else:
        start = absolute(config.start)

    kind = yield Call(oscalls.path_kind, (start,))
    if kind is PathKind.FILE:
        start = os.path.dirname(start)
        kind = PathKind.DIRECTORY

    if config.height is not None:
        target = lexical_parent(start, config.height)
    elif target is None:
        target = root_of(start)

    if not is_ancestor_or_self(target, start):
        raise InvalidArgumentError(
            f"The bound path is not an ancestor of the start path: {start} -> {target}"
        )
    logger.debug("Upward traversal from %s to %s", start, target)

    current = start
    while kind is None:
        parent = os.path.dirname(current)
        if parent == current:
            return
        current = parent
        kind = yield Call(oscalls.path_kind, (current,))
    if kind is PathKind.FILE:
        current = os.path.dirname(current)

    if current == target:
        yield Found(current)
        return
    if not is_ancestor(target, current):
        return
    if current != start:
        yield Found(current)
    while current != target:
        current = os.path.dirname(current)
        yield Found(current)
