"""Unit tests for the breadth-first frontier and canonical identity tracking."""

import os
import shutil
import sys
import tempfile
import unittest
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from findfiles._common import CanonicalIdentityTracker, Frontier, QueueUnit
from findfiles.testing import Symlink, make_tree


class TestFrontier(unittest.TestCase):
    """Test FIFO ordering across batches."""

    def test_starts_with_seed_units(self):
        frontier = Frontier([QueueUnit("/a", 0)])
        self.assertEqual(len(frontier), 1)
        self.assertTrue(frontier)
        self.assertEqual(frontier.dequeue(), QueueUnit("/a", 0))
        self.assertFalse(frontier)

    def test_batches_are_fifo(self):
        """Units of an earlier batch come out before units of a later one."""
        frontier = Frontier()
        frontier.enqueue_batch([QueueUnit("/a/x", 1), QueueUnit("/a/y", 1)])
        frontier.enqueue_batch([QueueUnit("/a/x/1", 2)])
        frontier.enqueue_batch([])

        order = []
        while frontier:
            order.append(frontier.dequeue().path)

        self.assertEqual(order, ["/a/x", "/a/y", "/a/x/1"])

    def test_dequeue_empty_raises(self):
        with self.assertRaises(IndexError):
            Frontier().dequeue()

    def test_queue_unit_is_immutable(self):
        unit = QueueUnit("/a", 0)
        with self.assertRaises(AttributeError):
            unit.depth = 3


class TestCanonicalIdentityTracker(unittest.TestCase):
    """Test resolution and visited bookkeeping."""

    def setUp(self):
        self.test_dir = os.path.realpath(tempfile.mkdtemp())
        try:
            make_tree(self.test_dir, {
                "real": {"file.txt": "x"},
                "alias": Symlink("real"),
                "dangling": Symlink("nowhere"),
            })
        except OSError:
            shutil.rmtree(self.test_dir, ignore_errors=True)
            self.skipTest("Cannot create symlinks on this system")

    def tearDown(self):
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def test_aliases_resolve_to_same_path(self):
        real = CanonicalIdentityTracker.resolve(os.path.join(self.test_dir, "real"))
        alias = CanonicalIdentityTracker.resolve(os.path.join(self.test_dir, "alias"))
        self.assertEqual(real, alias)
        self.assertEqual(real, os.path.join(self.test_dir, "real"))

    def test_dangling_symlink_raises(self):
        with self.assertRaises(FileNotFoundError):
            CanonicalIdentityTracker.resolve(os.path.join(self.test_dir, "dangling"))

    def test_mark_visited(self):
        tracker = CanonicalIdentityTracker()
        canonical = tracker.resolve(os.path.join(self.test_dir, "alias"))

        self.assertFalse(tracker.has_visited(canonical))
        tracker.mark_visited(canonical)
        tracker.mark_visited(canonical)

        self.assertTrue(tracker.has_visited(canonical))
        self.assertEqual(len(tracker), 1)


if __name__ == "__main__":
    unittest.main()
