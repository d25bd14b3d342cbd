"""Domain datatypes for collected directory entries."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path


@dataclass(frozen=True)
class DirectoryEntry:
    """One listed filesystem entry with the lstat metadata renderers need."""

    name: str
    path: Path
    is_dir: bool
    size: int
    mtime: datetime
    mode: str


EntryList = list[DirectoryEntry]


__all__ = [
    "DirectoryEntry",
    "EntryList",
]
