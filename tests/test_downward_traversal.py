"""Tests for breadth-first downward traversal.

Tree used by most tests:

    root/
    ├── a/
    │   ├── b/
    │   │   └── deep.txt
    │   └── x.txt
    ├── c.txt
    └── d/
        └── y.md
"""

import os
import shutil
import sys
import tempfile
import unittest
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from findfiles import DownwardConfig, InvalidArgumentError
from findfiles.sync import (
    downward_directories,
    downward_files,
    is_directory,
    of_basename,
    of_extname,
    traverse_downward,
)
from findfiles.testing import Symlink, make_tree

LAYOUT = {
    "a": {"b": {"deep.txt": "deep"}, "x.txt": "x"},
    "c.txt": "c",
    "d": {"y.md": "y"},
}


class DownwardTestCase(unittest.TestCase):

    def setUp(self):
        self.test_dir = os.path.realpath(tempfile.mkdtemp())
        make_tree(self.test_dir, LAYOUT)

    def tearDown(self):
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def path(self, *parts):
        return os.path.join(self.test_dir, *parts)


class TestBreadthFirstOrder(DownwardTestCase):

    def test_files_level_by_level(self):
        """Every entry at depth n comes before any entry at depth n+1."""
        self.assertEqual(list(downward_files(self.test_dir)), [
            self.path("a"),
            self.path("c.txt"),
            self.path("d"),
            self.path("a", "b"),
            self.path("a", "x.txt"),
            self.path("d", "y.md"),
            self.path("a", "b", "deep.txt"),
        ])

    def test_directories_only(self):
        self.assertEqual(list(downward_directories(self.test_dir)), [
            self.path("a"),
            self.path("d"),
            self.path("a", "b"),
        ])

    def test_include_start(self):
        result = list(downward_directories(self.test_dir, include_start=True))
        self.assertEqual(result[0], self.test_dir)
        self.assertEqual(result[1:], [self.path("a"), self.path("d"), self.path("a", "b")])

    def test_include_start_is_subject_to_tests(self):
        result = list(downward_directories(self.test_dir, of_basename("b"), include_start=True))
        self.assertEqual(result, [self.path("a", "b")])

    def test_start_is_never_yielded_by_files(self):
        self.assertNotIn(self.test_dir, list(downward_files(self.test_dir)))

    def test_empty_directory(self):
        empty = self.path("a", "b", "empty")
        os.mkdir(empty)
        self.assertEqual(list(downward_files(empty)), [])

    def test_pathlike_start(self):
        self.assertEqual(
            list(downward_files(Path(self.test_dir), max_depth=0)),
            [self.path("a"), self.path("c.txt"), self.path("d")],
        )

    def test_relative_start_yields_absolute_paths(self):
        cwd = os.getcwd()
        os.chdir(self.test_dir)
        try:
            result = list(downward_files("d"))
        finally:
            os.chdir(cwd)
        self.assertEqual(result, [self.path("d", "y.md")])


class TestMaxDepth(DownwardTestCase):
    """max_depth bounds the depth of the directories that are read."""

    def test_depth_zero_reads_only_start(self):
        self.assertEqual(
            list(downward_files(self.test_dir, max_depth=0)),
            [self.path("a"), self.path("c.txt"), self.path("d")],
        )

    def test_depth_one(self):
        self.assertEqual(list(downward_files(self.test_dir, max_depth=1)), [
            self.path("a"),
            self.path("c.txt"),
            self.path("d"),
            self.path("a", "b"),
            self.path("a", "x.txt"),
            self.path("d", "y.md"),
        ])

    def test_large_depth_equals_unbounded(self):
        self.assertEqual(
            list(downward_files(self.test_dir, max_depth=50)),
            list(downward_files(self.test_dir)),
        )

    def test_negative_depth_raises_at_call_time(self):
        with self.assertRaises(InvalidArgumentError):
            downward_files(self.test_dir, max_depth=-1)
        with self.assertRaises(InvalidArgumentError):
            downward_directories(self.test_dir, max_depth=-5)

    def test_non_integer_depth(self):
        with self.assertRaises(InvalidArgumentError):
            downward_files(self.test_dir, max_depth=1.5)
        with self.assertRaises(InvalidArgumentError):
            downward_files(self.test_dir, max_depth=True)


class TestTests(DownwardTestCase):
    """Tests gate what is yielded but never prune the walk."""

    def test_filter_keeps_order(self):
        self.assertEqual(list(downward_files(self.test_dir, of_extname(".txt"))), [
            self.path("c.txt"),
            self.path("a", "x.txt"),
            self.path("a", "b", "deep.txt"),
        ])

    def test_tests_do_not_prune(self):
        """Directory a is rejected, but its contents are still visited."""
        result = list(downward_files(self.test_dir, lambda path: not is_directory(path)))
        self.assertIn(self.path("a", "b", "deep.txt"), result)

    def test_multiple_tests_combine_with_and(self):
        result = list(downward_files(self.test_dir, of_extname(".txt"), of_basename("x.txt")))
        self.assertEqual(result, [self.path("a", "x.txt")])


class TestStartPath(DownwardTestCase):

    def test_file_start_uses_parent(self):
        self.assertEqual(
            list(downward_files(self.path("c.txt"))),
            list(downward_files(self.test_dir)),
        )

    def test_missing_start_raises_on_first_pull(self):
        walk = downward_files(self.path("missing"))
        with self.assertRaises(FileNotFoundError):
            next(walk)

    def test_config_object(self):
        config = DownwardConfig(start=self.test_dir, max_depth=0, directories_only=True)
        self.assertEqual(list(traverse_downward(config)), [self.path("a"), self.path("d")])

    def test_include_start_requires_directories_only(self):
        config = DownwardConfig(start=self.test_dir, include_start=True)
        self.assertEqual(len(config.validate()), 1)
        with self.assertRaises(InvalidArgumentError):
            traverse_downward(config)


class TestSymlinks(unittest.TestCase):
    """Symlinks are followed, but each real directory is read once."""

    def setUp(self):
        self.test_dir = os.path.realpath(tempfile.mkdtemp())

    def tearDown(self):
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def build(self, layout):
        try:
            make_tree(self.test_dir, layout)
        except OSError:
            self.skipTest("Cannot create symlinks on this system")

    def path(self, *parts):
        return os.path.join(self.test_dir, *parts)

    def test_symlink_loop_terminates(self):
        self.build({"a": {"loop": Symlink("..")}, "f.txt": "f"})

        self.assertEqual(list(downward_files(self.test_dir)), [
            self.path("a"),
            self.path("f.txt"),
            self.path("a", "loop"),
        ])

    def test_alias_is_read_once(self):
        """The first alias in walk order is the one that gets expanded."""
        self.build({"real": {"f.txt": "f"}, "link": Symlink("real")})

        self.assertEqual(list(downward_files(self.test_dir)), [
            self.path("link"),
            self.path("real"),
            self.path("link", "f.txt"),
        ])

    def test_dangling_symlink_is_a_file(self):
        self.build({"broken": Symlink("nowhere"), "sub": {}})

        self.assertEqual(list(downward_files(self.test_dir)), [self.path("broken"), self.path("sub")])
        self.assertEqual(list(downward_directories(self.test_dir)), [self.path("sub")])


if __name__ == "__main__":
    unittest.main()
