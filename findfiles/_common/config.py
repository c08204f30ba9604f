"""Configuration system for findfiles traversals.

A traversal is described by a small dataclass. The public functions build
these for you; callers that need the raw walk can construct one and hand
it to ``traverse_downward`` / ``traverse_upward`` directly.
"""

import os
from dataclasses import dataclass
from typing import List, Optional, Union

from .errors import InvalidArgumentError
from .paths import absolute, same_root

PathOrStr = Union[str, os.PathLike]
UpwardBound = Union[None, int, str, os.PathLike]


@dataclass
class DownwardConfig:
    """Configuration for a breadth-first walk below a start directory."""

    start: PathOrStr = "."
    max_depth: Optional[int] = None    # Depth of the deepest directory read (start = 0)
    directories_only: bool = False     # Yield directories only
    include_start: bool = False        # Yield the start itself (directories only)

    def should_explore(self, depth: int) -> bool:
        """Check if the children of a directory at this depth may be read.

        Args:
            depth: Depth of the parent directory

        Returns:
            True if its subdirectories should be enqueued
        """
        if self.max_depth is None:
            return True
        return depth < self.max_depth

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.max_depth is not None:
            if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
                errors.append(f"max_depth must be an integer, got {self.max_depth!r}")
            elif self.max_depth < 0:
                errors.append(f"max_depth cannot be negative, got {self.max_depth}")

        if self.include_start and not self.directories_only:
            errors.append("include_start requires directories_only")

        return errors


@dataclass
class UpwardConfig:
    """Configuration for a walk through the ancestors of a start path.

    The bound is either None (walk to the filesystem root), a height in
    parent steps, or a target ancestor path.
    """

    start: PathOrStr = "."
    bound: UpwardBound = None

    @property
    def height(self) -> Optional[int]:
        if isinstance(self.bound, int) and not isinstance(self.bound, bool):
            return self.bound
        return None

    @property
    def target(self) -> Optional[str]:
        if isinstance(self.bound, (str, os.PathLike)):
            return os.fspath(self.bound)
        return None

    def validate(self) -> List[str]:
        errors = []

        if isinstance(self.bound, bool) or not (
            self.bound is None or isinstance(self.bound, (int, str, os.PathLike))
        ):
            errors.append(
                f"bound must be None, a height or a path, got {self.bound!r}"
            )
        elif self.height is not None and self.height < 0:
            errors.append(f"height cannot be negative, got {self.height}")
        elif self.target is not None:
            target = absolute(self.target)
            start = absolute(self.start, base=target)
            if not same_root(start, target):
                errors.append(
                    f"start and bound paths do not share the same root: {start} -> {target}"
                )

        return errors


def ensure_valid(config: Union[DownwardConfig, UpwardConfig]) -> None:
    """Raise InvalidArgumentError if a configuration does not validate."""
    errors = config.validate()
    if errors:
        raise InvalidArgumentError("; ".join(errors))
