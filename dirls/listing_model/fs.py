"""Filesystem collection of directory entries, flat or recursive."""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Iterator
from datetime import datetime
from pathlib import Path

from ..options import Options
from .types import DirectoryEntry, EntryList

logger = logging.getLogger(__name__)


def is_hidden(name: str) -> bool:
    """Return whether ``name`` is a dot-entry other than ``.`` itself."""
    if not name:
        logger.warning("empty file name")
        return False
    return name.startswith(".") and len(name) > 1


def entry_from_stat(name: str, path: Path, st: os.stat_result) -> DirectoryEntry:
    """Convert lstat output to a ``DirectoryEntry``.

    ``mtime`` is local wall-clock time without timezone information.
    """
    return DirectoryEntry(
        name=name,
        path=path,
        is_dir=stat.S_ISDIR(st.st_mode),
        size=int(st.st_size),
        mtime=datetime.fromtimestamp(st.st_mtime),
        mode=stat.filemode(st.st_mode),
    )


def working_directory() -> tuple[Path | None, OSError | None]:
    """Return ``(cwd, error)``; the cwd lookup fails when it was removed."""
    try:
        return Path.cwd(), None
    except OSError as exc:
        return None, exc


def scan_directory(directory: Path) -> EntryList:
    """Return every child of ``directory`` sorted by name.

    Symlinks are described by their own lstat, never followed. ``OSError``
    from opening the directory or stat-ing a child propagates.
    """
    entries: EntryList = []
    with os.scandir(directory) as children:
        for child in children:
            st = child.stat(follow_symlinks=False)
            entries.append(entry_from_stat(child.name, Path(child.path), st))
    entries.sort(key=lambda entry: entry.name)
    return entries


def walk_entries(directory: Path, show_hidden: bool) -> EntryList:
    """Return the walk rooted at ``directory``, which is reported as ``.``.

    Depth-first in name order, pruning hidden directories. The root is
    stat-ed through symlinks so a linked working directory is descended;
    every other entry uses lstat. Pending siblings live on an explicit stack,
    so nesting depth is not bounded by the interpreter's recursion limit.
    """
    root = entry_from_stat(".", directory, os.stat(directory))
    entries: EntryList = []
    pending: list[Iterator[DirectoryEntry]] = [iter([root])]
    while pending:
        entry = next(pending[-1], None)
        if entry is None:
            pending.pop()
            continue
        hidden = is_hidden(entry.name)
        if hidden and entry.is_dir and not show_hidden:
            continue
        if not hidden or show_hidden:
            entries.append(entry)
        if entry.is_dir:
            pending.append(iter(scan_directory(entry.path)))
    return entries


def collect_entries(directory: Path, options: Options) -> tuple[EntryList, OSError | None]:
    """Collect entries under ``directory`` according to ``options``.

    Returns ``(entries, error)``. On any filesystem failure ``entries`` is
    empty and ``error`` holds the ``OSError``; callers decide how to exit.
    Hidden entries are omitted in both flat and recursive mode unless
    ``options.show_hidden`` is set.
    """
    try:
        if options.recursive:
            return walk_entries(directory, options.show_hidden), None
        entries = scan_directory(directory)
    except OSError as exc:
        return [], exc

    if not options.show_hidden:
        entries = [entry for entry in entries if not is_hidden(entry.name)]
    return entries, None


__all__ = [
    "is_hidden",
    "entry_from_stat",
    "working_directory",
    "scan_directory",
    "walk_entries",
    "collect_entries",
]
