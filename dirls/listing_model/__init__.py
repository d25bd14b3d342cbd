"""Domain model for listed directory entries.

This package contains non-rendering listing primitives:
- the directory-entry datatype
- flat and recursive filesystem collection
- size ordering and reversal
"""

from __future__ import annotations

from .types import DirectoryEntry, EntryList
from .fs import collect_entries, entry_from_stat, is_hidden, scan_directory, walk_entries, working_directory
from .ordering import order_entries, reverse_in_place

__all__ = [
    "DirectoryEntry",
    "EntryList",
    "collect_entries",
    "entry_from_stat",
    "is_hidden",
    "scan_directory",
    "walk_entries",
    "working_directory",
    "order_entries",
    "reverse_in_place",
]
