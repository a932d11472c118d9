"""ANSI palettes for the guilds tree.

Folder colors come from the folder settings themselves (``[#rrggbb]`` markup
in folder labels); themes only cover the fixed node kinds.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the tree renderer."""

    name: str
    reset: str
    reverse: str
    graphics: str
    guild: str
    channel: str
    private_channel: str
    private_root: str
    folder_default: str
    active_channel: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    reverse="\033[7m",
    graphics="\033[2m",
    guild="\033[1;38;5;252m",
    channel="\033[38;5;250m",
    private_channel="\033[38;5;117m",
    private_root="\033[1;38;5;81m",
    folder_default="\033[1;34m",
    active_channel="\033[1;38;5;229m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    reverse="\033[7m",
    graphics="\033[2;38;5;31m",
    guild="\033[1;38;5;45m",
    channel="\033[38;5;153m",
    private_channel="\033[38;5;117m",
    private_root="\033[1;38;5;39m",
    folder_default="\033[1;38;5;45m",
    active_channel="\033[1;38;5;229m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    reverse="",
    graphics="",
    guild="",
    channel="",
    private_channel="",
    private_root="",
    folder_default="",
    active_channel="",
)

_THEMES: dict[str, UITheme] = {
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


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
