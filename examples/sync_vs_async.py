#!/usr/bin/env python3
"""
Side-by-side comparison of the sync and async forms.

This example demonstrates:
- Both forms yield the same paths in the same order
- Timing of a blocking walk vs. a walk that yields to the event loop
- Several async searches sharing one event loop
"""

import asyncio
import sys
import time
from pathlib import Path
from typing import List, Tuple

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from findfiles import sync, aio


def sync_walk(root_path: Path) -> Tuple[List[str], float]:
    """Walk a tree with the blocking form."""
    start_time = time.perf_counter()
    paths = list(sync.downward_files(root_path, max_depth=3))
    return paths, time.perf_counter() - start_time


async def async_walk(root_path: Path) -> Tuple[List[str], float]:
    """Walk a tree with the async form."""
    start_time = time.perf_counter()
    paths = await aio.all_elements(aio.downward_files(root_path, max_depth=3))
    return paths, time.perf_counter() - start_time


async def concurrent_searches(paths: List[Path]) -> Tuple[int, float]:
    """Run one search per directory concurrently on the same loop."""
    start_time = time.perf_counter()

    results = await asyncio.gather(*[
        aio.find_all_files(aio.downward_directories(path, include_start=True, max_depth=2), aio.of_extname(".py"))
        for path in paths
    ])

    elapsed = time.perf_counter() - start_time
    return sum(len(found) for found in results), elapsed


def main():
    """Run the comparison."""
    root_path = Path(sys.argv[1]) if len(sys.argv) > 1 else Path.cwd()

    print("findfiles - Sync vs Async Comparison")
    print("=" * 60)
    print(f"Test Directory: {root_path}")
    print("-" * 60)

    print("\n1. Synchronous walk:")
    sync_paths, sync_time = sync_walk(root_path)
    print(f"   Entries: {len(sync_paths):,}")
    print(f"   Time: {sync_time:.3f} seconds")

    print("\n2. Asynchronous walk:")
    async_paths, async_time = asyncio.run(async_walk(root_path))
    print(f"   Entries: {len(async_paths):,}")
    print(f"   Time: {async_time:.3f} seconds")
    print(f"   Same order as sync: {sync_paths == async_paths}")

    subdirs = [p for p in root_path.iterdir() if p.is_dir()][:5]
    if len(subdirs) > 1:
        print("\n3. Concurrent async searches:")
        print(f"   Searching {len(subdirs)} directories for .py files...")
        total, elapsed = asyncio.run(concurrent_searches(subdirs))
        print(f"   Found: {total:,}")
        print(f"   Time: {elapsed:.3f} seconds")

    print("\n" + "=" * 60)
    print("Key Observations:")
    print("- Both forms run the same traversal engine")
    print("- Each async directory read runs in a worker thread")
    print("- Early exits close the walk without reading further")


if __name__ == "__main__":
    main()
