"""findfiles - locate files and directories above or below a path.

findfiles walks a filesystem tree breadth-first downward or through the
ancestors of a path upward, and filters the results with plain predicates
over the path.

Choose your implementation:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Synchronous:
    from findfiles.sync import find_file, upward_directories

Asynchronous:
    from findfiles.aio import find_file, upward_directories
━━━━━━━━━━━━━━━━━━━━━━━━━━

Both implementations run the same traversal engine and produce results in
the same order. Pick the one that fits your application.
"""

import logging

__version__ = "0.1.0"

from . import sync
from . import aio
from . import errors
from ._common.config import DownwardConfig, UpwardConfig
from ._common.errors import ConflictError, FindFilesError, InvalidArgumentError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "sync",
    "aio",
    "errors",
    "DownwardConfig",
    "UpwardConfig",
    "FindFilesError",
    "InvalidArgumentError",
    "ConflictError",
]
