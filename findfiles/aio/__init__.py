"""Asynchronous implementation of findfiles.

Provides the same operations as findfiles.sync with async iterators and
coroutines. Blocking filesystem calls are run in worker threads, and
results are produced in exactly the same order as the blocking form.
"""

# Combinators
from .combinators import (
    simple_map,
    multi_map,
    filter_elements,
    concatenate,
    first_element,
    only_element,
    all_elements,
)

# Matchers (path patterns are pure and shared with sync)
from .matchers import conjunction, disjunction
from .._common.patterns import (
    of_basename,
    of_name,
    of_dirname,
    of_extname,
    has_path_segments,
)
from .._common.paths import segments

# Filesystem queries
from .filesystem import (
    readdir,
    readdirs,
    is_file,
    is_directory,
    has_file,
)

# Traversals
from .traversal import (
    run_steps,
    traverse_downward,
    traverse_upward,
    downward_files,
    downward_directories,
    upward_directories,
    upward_files,
)

# High-level API
from .api import (
    find_file,
    find_all_files,
    find_only_file,
)

__all__ = [
    # Combinators
    'simple_map',
    'multi_map',
    'filter_elements',
    'concatenate',
    'first_element',
    'only_element',
    'all_elements',
    # Matchers
    'conjunction',
    'disjunction',
    'of_basename',
    'of_name',
    'of_dirname',
    'of_extname',
    'has_path_segments',
    'segments',
    # Filesystem
    'readdir',
    'readdirs',
    'is_file',
    'is_directory',
    'has_file',
    # Traversals
    'run_steps',
    'traverse_downward',
    'traverse_upward',
    'downward_files',
    'downward_directories',
    'upward_directories',
    'upward_files',
    # API
    'find_file',
    'find_all_files',
    'find_only_file',
]
