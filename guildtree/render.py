"""Row formatting for the guilds tree (ANSI or plain)."""

from __future__ import annotations

import re

from .node_model import ChannelRef, Node, NodeKind, TreeRow, visible_rows
from .ui_theme import DEFAULT_THEME, UITheme

_COLOR_MARKUP_RE = re.compile(r"\[(#[0-9a-fA-F]{6})\](.*?)\[-\]")

_EXPANDABLE_KINDS = frozenset({NodeKind.FOLDER, NodeKind.GUILD, NodeKind.PRIVATE_ROOT})


def _truecolor(hex_color: str) -> str:
    value = int(hex_color[1:], 16)
    return f"\033[38;2;{(value >> 16) & 0xFF};{(value >> 8) & 0xFF};{value & 0xFF}m"


def render_label_markup(label: str, theme: UITheme) -> str:
    """Turn ``[#rrggbb]text[-]`` spans into ANSI color, or strip them for plain output."""
    if theme.reset:
        return _COLOR_MARKUP_RE.sub(
            lambda match: f"{_truecolor(match.group(1))}{match.group(2)}{theme.reset}",
            label,
        )
    return _COLOR_MARKUP_RE.sub(lambda match: match.group(2), label)


def _node_color(node: Node, theme: UITheme, active_channel_id: int | None) -> str:
    if node.kind == NodeKind.GUILD:
        return theme.guild
    if node.kind == NodeKind.FOLDER:
        return theme.folder_default
    if node.kind == NodeKind.PRIVATE_ROOT:
        return theme.private_root
    if isinstance(node.reference, ChannelRef) and node.reference.channel_id == active_channel_id:
        return theme.active_channel
    if node.kind == NodeKind.PRIVATE_CHANNEL:
        return theme.private_channel
    return theme.channel


def _prefix(row: TreeRow, graphics: bool) -> str:
    if not graphics:
        return "  " * row.depth
    parts = ["   " if last else "│  " for last in row.last_flags[:-1]]
    parts.append("└─ " if row.last_flags and row.last_flags[-1] else "├─ ")
    return "".join(parts)


def format_tree_row(
    row: TreeRow,
    *,
    theme: UITheme | None = None,
    graphics: bool = True,
    selected: bool = False,
    active_channel_id: int | None = None,
) -> str:
    """Render one visible row."""
    active_theme = theme or DEFAULT_THEME
    node = row.node
    reset = active_theme.reset
    if node.children or node.kind in _EXPANDABLE_KINDS:
        marker = "▾ " if node.expanded and node.children else "▸ "
    else:
        marker = ""
    label = render_label_markup(node.label, active_theme)
    color = _node_color(node, active_theme, active_channel_id)
    prefix = _prefix(row, graphics)
    if graphics and prefix:
        prefix = f"{active_theme.graphics}{prefix}{reset}"
    text = f"{color}{marker}{label}{reset}"
    if selected:
        if active_theme.reverse:
            text = f"{active_theme.reverse}{text}{reset}"
        else:
            text = f"> {text}"
    return f"{prefix}{text}"


def render_tree(
    root: Node,
    *,
    theme: UITheme | None = None,
    graphics: bool = True,
    selected_idx: int | None = None,
    active_channel_id: int | None = None,
) -> str:
    """Render all visible rows joined by newlines."""
    lines = [
        format_tree_row(
            row,
            theme=theme,
            graphics=graphics,
            selected=idx == selected_idx,
            active_channel_id=active_channel_id,
        )
        for idx, row in enumerate(visible_rows(root))
    ]
    return "\n".join(lines)


__all__ = ["format_tree_row", "render_label_markup", "render_tree"]
