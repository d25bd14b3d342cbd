"""Compact multi-column name grid."""

from __future__ import annotations

from collections.abc import Sequence

from ..config import ListingLayout
from ..listing_model import DirectoryEntry
from ..ui_theme import ListingTheme
from .format import painted_name


def render_grid(entries: Sequence[DirectoryEntry], layout: ListingLayout, theme: ListingTheme) -> str:
    """Render names ``layout.names_per_line`` to a row.

    A newline precedes each row rather than ending it, so the text starts
    with a newline whenever there is at least one entry.
    """
    out: list[str] = []
    for idx, entry in enumerate(entries):
        if idx % layout.names_per_line == 0:
            out.append("\n")
        out.append(painted_name(entry, layout, theme, layout.name_width))
    return "".join(out)


__all__ = ["render_grid"]
