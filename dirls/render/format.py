"""Per-entry text formatting shared by grid and long renderers."""

from __future__ import annotations

from datetime import datetime

from ..config import ListingLayout
from ..listing_model import DirectoryEntry
from ..ui_theme import ListingTheme


def format_name(entry: DirectoryEntry, layout: ListingLayout) -> str:
    """Quote names containing a space and mark directories."""
    name = entry.name
    if " " in name:
        name = f"{layout.quote}{name}{layout.quote}"
    if entry.is_dir:
        name += layout.directory_marker
    return name


def format_timestamp(moment: datetime) -> str:
    """Render ``MM/DD/YYYY  HH:MM`` with an unpadded year."""
    return f"{moment.month:02d}/{moment.day:02d}/{moment.year}  {moment.hour:02d}:{moment.minute:02d}"


def right_justify(text: str, width: int) -> str:
    return " " * max(0, width - len(text)) + text


def painted_name(entry: DirectoryEntry, layout: ListingLayout, theme: ListingTheme, width: int = 0) -> str:
    """Formatted name, right-justified on visible width, then colored."""
    name = format_name(entry, layout)
    padding = " " * max(0, width - len(name))
    color = theme.directory if entry.is_dir else theme.file
    return padding + theme.paint(color, name)


__all__ = [
    "format_name",
    "format_timestamp",
    "right_justify",
    "painted_name",
]
