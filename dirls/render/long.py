"""Detailed one-row-per-entry listing with mode, time, and size columns."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from ..config import ListingLayout
from ..listing_model import DirectoryEntry
from ..ui_theme import ListingTheme
from .format import format_timestamp, painted_name, right_justify

COLUMN_HEADER = "Mode \t\t LastWriteTime \t\t Length Name"
COLUMN_RULE = "---- \t\t ------------- \t\t ------ ----"
DIRECTORY_SIZE_PAD = "\t\t"


def render_long_header(directory: Path, theme: ListingTheme) -> str:
    return (
        f"\n\t{theme.paint(theme.header, f'Directory: {directory}')}\n\n\n"
        f"{theme.paint(theme.header, COLUMN_HEADER)}\n"
        f"{COLUMN_RULE}\n"
    )


def render_long_row(entry: DirectoryEntry, layout: ListingLayout, theme: ListingTheme) -> str:
    """Render one entry row; directories get tab padding instead of a size."""
    if entry.is_dir:
        size_column = DIRECTORY_SIZE_PAD
    else:
        size_column = theme.paint(theme.size, right_justify(str(entry.size), layout.size_width)) + " "
    return f"{entry.mode} \t{format_timestamp(entry.mtime)} {size_column}{painted_name(entry, layout, theme)}\n"


def render_long(
    entries: Sequence[DirectoryEntry],
    directory: Path,
    layout: ListingLayout,
    theme: ListingTheme,
) -> str:
    """Render the directory header block followed by one row per entry."""
    out = [render_long_header(directory, theme)]
    out.extend(render_long_row(entry, layout, theme) for entry in entries)
    return "".join(out)


__all__ = [
    "COLUMN_HEADER",
    "COLUMN_RULE",
    "render_long_header",
    "render_long_row",
    "render_long",
]
