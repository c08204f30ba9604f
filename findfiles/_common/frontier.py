"""Breadth-first scheduling for downward traversal."""

from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterable


@dataclass(frozen=True)
class QueueUnit:
    """A directory waiting to be read, with its depth below the start directory."""

    path: str
    depth: int


class Frontier:
    """FIFO queue of pending directories.

    Units enqueued in an earlier batch are always dequeued before units of
    a later batch, and a batch keeps the order it was given in. That single
    guarantee is what makes the walk level-ordered.
    """

    def __init__(self, units: Iterable[QueueUnit] = ()):
        self._queue: Deque[QueueUnit] = deque(units)

    def enqueue_batch(self, units: Iterable[QueueUnit]) -> None:
        """Append a batch of units, preserving their order."""
        self._queue.extend(units)

    def dequeue(self) -> QueueUnit:
        """Remove and return the earliest pending unit.

        Raises:
            IndexError: If the frontier is empty
        """
        return self._queue.popleft()

    def __len__(self) -> int:
        return len(self._queue)

    def __bool__(self) -> bool:
        return bool(self._queue)

    def __repr__(self) -> str:
        return f"Frontier(pending={len(self._queue)})"
