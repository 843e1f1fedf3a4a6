"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the tree, header, and footer. Preview syntax
colors come from the separate Pygments style setting.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    title: str
    search_term: str
    reverse: str
    reset: str
    status: str
    divider: str
    tree_marker: str
    tree_dir: str
    tree_file: str
    tree_title: str


DEFAULT_THEME = UITheme(
    name="default",
    title="\033[1m",
    search_term="\033[1;38;5;81m",
    reverse="\033[7m",
    reset="\033[0m",
    status="\033[38;5;8m",
    divider="\033[2m",
    tree_marker="\033[38;5;44m",
    tree_dir="\033[1;34m",
    tree_file="\033[38;5;252m",
    tree_title="\033[38;5;229m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    title="\033[1;38;5;45m",
    search_term="\033[1;38;5;45m",
    reverse="\033[7m",
    reset="\033[0m",
    status="\033[2;38;5;110m",
    divider="\033[2;38;5;31m",
    tree_marker="\033[38;5;39m",
    tree_dir="\033[1;38;5;45m",
    tree_file="\033[38;5;252m",
    tree_title="\033[38;5;153m",
)

PLAIN_THEME = UITheme(
    name="plain",
    title="",
    search_term="",
    reverse="\033[7m",
    reset="\033[0m",
    status="",
    divider="",
    tree_marker="",
    tree_dir="",
    tree_file="",
    tree_title="",
)

_THEMES = {theme.name: theme for theme in (DEFAULT_THEME, OCEAN_THEME)}


def available_theme_names() -> list[str]:
    return sorted(_THEMES)


def resolve_theme(name: str | None, no_color: bool = False) -> UITheme:
    """Return the named theme, the plain theme without color, else the default."""
    if no_color:
        return PLAIN_THEME
    if name is None:
        return DEFAULT_THEME
    return _THEMES.get(name.strip().lower(), DEFAULT_THEME)


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "resolve_theme",
]
