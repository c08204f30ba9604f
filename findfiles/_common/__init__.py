"""Common components shared between sync and aio implementations.

This internal package contains the code that is identical between both
implementations. It should NOT be imported directly by users.

Components here include:
- Configuration classes (DownwardConfig, UpwardConfig) and errors
- The traversal engine, written once as step generators
- The blocking OS primitives the engine asks its driver to perform
- Pure path algebra and path-segment matchers

Important: This package must NEVER import from sync or aio to avoid
circular dependencies.
"""

from .config import DownwardConfig, UpwardConfig, ensure_valid
from .errors import ConflictError, FindFilesError, InvalidArgumentError
from .frontier import Frontier, QueueUnit
from .identity import CanonicalIdentityTracker
from .matchers import Matcher, conjunction, disjunction
from .patterns import (
    SegmentTester,
    has_path_segments,
    of_basename,
    of_dirname,
    of_extname,
    of_name,
)
from .paths import segments

__all__ = [
    'DownwardConfig',
    'UpwardConfig',
    'ensure_valid',
    'ConflictError',
    'FindFilesError',
    'InvalidArgumentError',
    'Frontier',
    'QueueUnit',
    'CanonicalIdentityTracker',
    'Matcher',
    'conjunction',
    'disjunction',
    'SegmentTester',
    'has_path_segments',
    'of_basename',
    'of_dirname',
    'of_extname',
    'of_name',
    'segments',
]
