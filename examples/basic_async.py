#!/usr/bin/env python3
"""
Basic async example: locate the project root, then list its Python sources.

This example demonstrates:
- Finding the nearest enclosing directory that holds a marker file
- Breadth-first search below it with a depth bound
- Mixing plain and coroutine predicates
"""

import asyncio
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from findfiles.aio import (
    downward_files,
    find_file,
    has_path_segments,
    is_file,
    of_basename,
    of_extname,
    upward_directories,
)

MARKERS = of_basename("setup.py", "setup.cfg", "pyproject.toml", ".git")


def not_hidden(segment: str) -> bool:
    return not segment.startswith(".")


async def main():
    """Find the project root for a path and summarise its sources."""
    start = Path(sys.argv[1]) if len(sys.argv) > 1 else Path.cwd()

    print(f"Starting from: {start}")
    print("-" * 50)

    marker = await find_file(upward_directories(start, bound=0), MARKERS)
    if marker is None:
        marker = await find_file(upward_directories(start), MARKERS)
    if marker is None:
        print("No project marker found above this path.")
        return

    project_root = Path(marker).parent
    print(f"Project root: {project_root} (marker: {Path(marker).name})")

    sources = []
    async for path in downward_files(
        project_root,
        of_extname(".py"),
        has_path_segments(not_hidden),
        is_file,
        max_depth=3,
    ):
        sources.append(path)

    print(f"\nPython files within 3 levels: {len(sources):,}")
    for path in sources[:10]:
        print(f"  {Path(path).relative_to(project_root)}")
    if len(sources) > 10:
        print(f"  ... and {len(sources) - 10:,} more")


if __name__ == "__main__":
    print("findfiles - Basic Async Example")
    print("=" * 50)
    asyncio.run(main())
