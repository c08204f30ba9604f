"""Build on-disk directory trees for tests.

A layout is a nested dict. Keys are entry names; values decide what is
created:

    dict       a directory with that layout inside it
    str/bytes  a file with that content
    None       an empty file
    Symlink    a symbolic link

Example:
    >>> make_tree(tmp, {
    ...     "src": {"main.py": "print('hi')", "loop": Symlink("..")},
    ...     "README.md": None,
    ... })
"""

import os
from pathlib import Path
from typing import Any, Dict, NamedTuple, Union


class Symlink(NamedTuple):
    """A symbolic link in a layout.

    Attributes:
        target: Link target, written as is; a relative target is relative
            to the directory holding the link
    """
    target: str


Layout = Dict[str, Any]


def make_tree(root: Union[str, os.PathLike], layout: Layout) -> Path:
    """Create a layout below root, creating root if needed.

    Entries are created in two passes so a symlink may point at a sibling
    declared after it.

    Returns:
        The root as a Path

    Raises:
        OSError: If an entry cannot be created, e.g. symlinks are not supported
        TypeError: For a value that is not a valid layout entry
    """
    root = Path(root)
    root.mkdir(parents=True, exist_ok=True)
    links = []
    _create(root, layout, links)
    for path, link in links:
        target_is_directory = (path.parent / link.target).is_dir()
        path.symlink_to(link.target, target_is_directory=target_is_directory)
    return root


def _create(directory: Path, layout: Layout, links: list) -> None:
    for name, value in layout.items():
        path = directory / name
        if isinstance(value, dict):
            path.mkdir(exist_ok=True)
            _create(path, value, links)
        elif isinstance(value, Symlink):
            links.append((path, value))
        elif value is None:
            path.touch()
        elif isinstance(value, bytes):
            path.write_bytes(value)
        elif isinstance(value, str):
            path.write_text(value)
        else:
            raise TypeError(f"Unsupported layout entry for {path}: {value!r}")
