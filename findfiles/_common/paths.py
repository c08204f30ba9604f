"""Pure path algebra. Nothing here touches the filesystem."""

import os
from pathlib import PurePath
from typing import List, Optional, Union

PathLike = Union[str, os.PathLike]


def root_of(path: str) -> str:
    """Root component (drive and root) of an absolute path."""
    return PurePath(path).anchor


def same_root(first: str, second: str) -> bool:
    return os.path.normcase(root_of(first)) == os.path.normcase(root_of(second))


def lexical_parent(path: str, steps: int = 1) -> str:
    """Climb a number of parent steps without checking existence.

    Climbing stops at the root component.
    """
    for _ in range(steps):
        parent = os.path.dirname(path)
        if parent == path:
            break
        path = parent
    return path


def is_ancestor(ancestor: str, path: str) -> bool:
    """Whether ancestor is a strict lexical ancestor of path."""
    return PurePath(ancestor) in PurePath(path).parents


def is_ancestor_or_self(ancestor: str, path: str) -> bool:
    return PurePath(ancestor) == PurePath(path) or is_ancestor(ancestor, path)


def absolute(path: PathLike, base: Optional[str] = None) -> str:
    """Normalise a path to absolute form, resolving a relative one against base or the cwd."""
    path = os.fspath(path)
    if base is not None:
        return os.path.normpath(os.path.join(base, path))
    return os.path.abspath(path)


def segments(path: PathLike) -> List[str]:
    """Split a path into its segments.

    The path is normalised first; the root component, leading "." segments
    and trailing empty segments are dropped.

    >>> segments("/home/user/file.md")
    ['home', 'user', 'file.md']
    """
    normalized = os.path.normpath(os.fspath(path))
    parts = list(PurePath(normalized).parts)
    anchor = PurePath(normalized).anchor
    if anchor and parts and parts[0] == anchor:
        parts = parts[1:]
    while parts and parts[0] == ".":
        parts.pop(0)
    while parts and not parts[-1].strip():
        parts.pop()
    return parts
