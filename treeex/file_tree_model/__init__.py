"""Domain model for listing one directory level.

This package contains non-rendering primitives:
- the captured directory entry datatype
- filesystem listing with scan-error reporting
- natural-order sorting and file/directory partitioning
"""

from __future__ import annotations

from .types import DirectoryEntry
from .fs import list_directory_entries, partition_entries
from .natural_sort import natural_sort_key

__all__ = [
    "DirectoryEntry",
    "list_directory_entries",
    "partition_entries",
    "natural_sort_key",
]
