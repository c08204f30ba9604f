"""Helpers for testing code that uses findfiles."""

from .fixtures import Layout, Symlink, make_tree

__all__ = ["Layout", "Symlink", "make_tree"]
