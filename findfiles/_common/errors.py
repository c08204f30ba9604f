"""Error taxonomy shared by the sync and aio implementations.

Filesystem failures (FileNotFoundError, NotADirectoryError,
PermissionError) are never wrapped: they surface exactly as the OS
primitives raised them. Exceptions raised by caller-supplied predicates
are likewise propagated unchanged.
"""

from typing import Any


class FindFilesError(Exception):
    """Base class for errors raised by findfiles itself."""


class InvalidArgumentError(FindFilesError, ValueError):
    """Raised when a traversal is requested with arguments that can never be satisfied.

    Examples are a negative maximum depth, a bound path that does not
    share a root with the start path, or a bound that is not an ancestor
    of the start path.
    """


class ConflictError(FindFilesError):
    """Raised when more than one element is produced where exactly one was required.

    Attributes:
        first: The first element produced by the sequence
        second: The element that conflicted with it
    """

    def __init__(self, first: Any, second: Any):
        self.first = first
        self.second = second
        super().__init__(f"{first} is conflicting with {second}")

    def __reduce__(self):
        return (self.__class__, (self.first, self.second))
