"""Persistent JSON config helpers.

Stores hidden-entry preference, theme name, and listing layout constants.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "dirls"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH


@dataclass(frozen=True)
class ListingLayout:
    """Column widths and name decorations shared by both render modes."""

    names_per_line: int = 4
    name_width: int = 40
    size_width: int = 13
    directory_marker: str = "\\"
    quote: str = "'"


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def load_show_hidden() -> bool:
    """Return persisted hidden-entry default.

    Only explicit boolean values are accepted; any other type falls back to
    ``False``.
    """
    value = load_config().get("show_hidden")
    return bool(value) if isinstance(value, bool) else False


def load_theme_name() -> str | None:
    """Load persisted theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def _positive_int(value: object) -> int | None:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value > 0 else None


def _plain_string(value: object) -> str | None:
    if not isinstance(value, str) or "\n" in value or "\033" in value:
        return None
    return value


def load_layout() -> ListingLayout:
    """Return layout constants with any valid config overrides applied.

    Invalid values are ignored per key so one bad entry does not reset the
    others.
    """
    data = load_config()
    defaults = ListingLayout()
    names_per_line = _positive_int(data.get("names_per_line"))
    name_width = _positive_int(data.get("name_width"))
    size_width = _positive_int(data.get("size_width"))
    directory_marker = _plain_string(data.get("directory_marker"))
    quote = _plain_string(data.get("quote"))
    return ListingLayout(
        names_per_line=names_per_line or defaults.names_per_line,
        name_width=name_width or defaults.name_width,
        size_width=size_width or defaults.size_width,
        directory_marker=defaults.directory_marker if directory_marker is None else directory_marker,
        quote=defaults.quote if quote is None else quote,
    )


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "ListingLayout",
    "load_config",
    "load_show_hidden",
    "load_theme_name",
    "load_layout",
]
