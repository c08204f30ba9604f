"""Public exception types raised by findfiles."""

from ._common.errors import ConflictError, FindFilesError, InvalidArgumentError

__all__ = ["FindFilesError", "InvalidArgumentError", "ConflictError"]
