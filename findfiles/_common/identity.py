"""Canonical identity tracking for cycle-safe downward traversal."""

from typing import Set

from .oscalls import canonical_path


class CanonicalIdentityTracker:
    """Records which real directories a traversal has already expanded.

    Two path strings that alias the same directory through different
    symlinks resolve to the same canonical path, so marking the canonical
    form before the directory is read guarantees each real directory is
    expanded at most once. One tracker belongs to exactly one traversal.
    """

    def __init__(self):
        self._visited: Set[str] = set()

    @staticmethod
    def resolve(path: str) -> str:
        """Return the canonical (symlink-free, absolute) form of a path.

        This is a blocking call; the traversal engine hands it to its
        driver rather than calling it directly.

        Raises:
            FileNotFoundError: If the path cannot be resolved (e.g. dangling symlink)
        """
        return canonical_path(path)

    def has_visited(self, canonical: str) -> bool:
        return canonical in self._visited

    def mark_visited(self, canonical: str) -> None:
        self._visited.add(canonical)

    def __len__(self) -> int:
        return len(self._visited)
