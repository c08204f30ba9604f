"""Matchers over parts of a path: base name, name, directory name, extension.

Each builder accepts any number of segment testers and combines them
with disjunction. A tester is one of:

- a string, compared for equality with the segment;
- a compiled regular expression, searched in the segment;
- a callable taking the segment and returning a bool.

None of these builders touch the filesystem.
"""

import os
import re
from typing import Callable, Union

from .matchers import Matcher, conjunction, disjunction
from .paths import PathLike, segments

SegmentTester = Union[str, re.Pattern, Callable[[str], bool]]


def _segment_matcher(tester: SegmentTester) -> Callable[[str], bool]:
    if isinstance(tester, str):
        return lambda segment: segment == tester
    if isinstance(tester, re.Pattern):
        return lambda segment: tester.search(segment) is not None
    if callable(tester):
        return tester
    raise TypeError(
        f"A segment tester must be a string, a regular expression or a callable, got {tester!r}"
    )


def _of_segment(testers, segmenter: Callable[[str], str]) -> Matcher:
    tester = disjunction(*(_segment_matcher(t) for t in testers))

    def matches(path: PathLike) -> bool:
        return tester(segmenter(os.fspath(path)))

    return matches


def _name(path: str) -> str:
    return os.path.splitext(os.path.basename(path))[0]


def _extname(path: str) -> str:
    return os.path.splitext(path)[1]


def of_basename(*testers: SegmentTester) -> Matcher:
    """Match paths whose base name passes any of the testers.

    Example:
        >>> matcher = of_basename("setup.cfg", re.compile(r"^pyproject"))
        >>> matcher("/repo/pyproject.toml")
        True
    """
    return _of_segment(testers, os.path.basename)


def of_name(*testers: SegmentTester) -> Matcher:
    """Match paths whose base name without its extension passes any of the testers."""
    return _of_segment(testers, _name)


def of_dirname(*testers: SegmentTester) -> Matcher:
    """Match paths whose directory name passes any of the testers."""
    return _of_segment(testers, os.path.dirname)


def of_extname(*testers: SegmentTester) -> Matcher:
    """Match paths whose extension (dot included, e.g. ".md") passes any of the testers."""
    return _of_segment(testers, _extname)


def has_path_segments(*tests: Callable[[str], bool]) -> Matcher:
    """Match paths in which every segment passes every test.

    With no tests the matcher is always False.
    """
    test = conjunction(*tests)

    def matches(path: PathLike) -> bool:
        if not tests:
            return False
        return all(test(segment) for segment in segments(path))

    return matches
