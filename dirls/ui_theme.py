"""Listing color themes and selection helpers.

Themes are ANSI prefixes applied around already-padded text, so color never
changes column alignment.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ListingTheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    directory: str
    file: str
    size: str
    header: str
    reset: str

    def paint(self, color: str, text: str) -> str:
        """Wrap ``text`` in ``color`` when the theme has colors."""
        if not color or not text:
            return text
        return f"{color}{text}{self.reset}"


DEFAULT_THEME = ListingTheme(
    name="default",
    directory="\033[1;34m",
    file="\033[38;5;252m",
    size="\033[38;5;109m",
    header="\033[1;38;5;81m",
    reset="\033[0m",
)

OCEAN_THEME = ListingTheme(
    name="ocean",
    directory="\033[1;38;5;45m",
    file="\033[38;5;252m",
    size="\033[38;5;73m",
    header="\033[1;38;5;45m",
    reset="\033[0m",
)

PLAIN_THEME = ListingTheme(
    name="plain",
    directory="",
    file="",
    size="",
    header="",
    reset="",
)

_THEMES: dict[str, ListingTheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> ListingTheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "ListingTheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
