"""Listing renderers.

``render_listing`` picks grid or long mode from ``Options`` and appends the
two trailing newlines every listing ends with.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from ..config import ListingLayout
from ..listing_model import DirectoryEntry
from ..options import Options
from ..ui_theme import PLAIN_THEME, ListingTheme
from .format import format_name, format_timestamp
from .grid import render_grid
from .long import render_long

LISTING_TRAILER = "\n\n"


def render_listing(
    entries: Sequence[DirectoryEntry],
    directory: Path,
    options: Options,
    layout: ListingLayout | None = None,
    theme: ListingTheme = PLAIN_THEME,
) -> str:
    """Return the full listing text for ``entries``."""
    if layout is None:
        layout = ListingLayout()
    if options.long_format:
        body = render_long(entries, directory, layout, theme)
    else:
        body = render_grid(entries, layout, theme)
    return body + LISTING_TRAILER


def write_listing(
    entries: Sequence[DirectoryEntry],
    directory: Path,
    options: Options,
    layout: ListingLayout | None = None,
    theme: ListingTheme = PLAIN_THEME,
    stream: TextIO | None = None,
) -> None:
    """Write the listing to ``stream`` (stdout by default) and flush."""
    if stream is None:
        stream = sys.stdout
    stream.write(render_listing(entries, directory, options, layout, theme))
    stream.flush()


__all__ = [
    "LISTING_TRAILER",
    "format_name",
    "format_timestamp",
    "render_grid",
    "render_long",
    "render_listing",
    "write_listing",
]
