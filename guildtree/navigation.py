"""Cursor over the visible rows of the guilds tree.

Rows are recomputed from the live tree on every move, so lazy population
and collapse are picked up without explicit invalidation.
"""

from __future__ import annotations

from collections.abc import Callable

from .input import KeyBindings, KeyComboBinding, KeyComboRegistry, translate_key
from .node_model import Node, TreeRow, visible_rows


class TreeCursor:
    """Selected-row index plus the five navigation primitives."""

    def __init__(
        self,
        root: Node,
        activate: Callable[[Node], None],
        bindings: KeyBindings | None = None,
    ) -> None:
        self.root = root
        self._activate = activate
        self.bindings = bindings or KeyBindings()
        self.selected_idx = 0
        self._registry = KeyComboRegistry().register(
            KeyComboBinding(("UP",), lambda: self.move(-1)),
            KeyComboBinding(("DOWN",), lambda: self.move(1)),
            KeyComboBinding(("HOME",), self.select_first),
            KeyComboBinding(("END",), self.select_last),
            KeyComboBinding(("ENTER",), self.select_current),
        )

    def rows(self) -> list[TreeRow]:
        return visible_rows(self.root)

    def _clamp(self, rows: list[TreeRow]) -> None:
        self.selected_idx = max(0, min(self.selected_idx, len(rows) - 1))

    @property
    def selected_node(self) -> Node | None:
        rows = self.rows()
        if not rows:
            return None
        self._clamp(rows)
        return rows[self.selected_idx].node

    def move(self, delta: int) -> bool:
        """Move selection by ``delta`` rows; return whether it changed."""
        rows = self.rows()
        if not rows:
            return False
        previous = self.selected_idx
        self.selected_idx += delta
        self._clamp(rows)
        return self.selected_idx != previous

    def select_first(self) -> bool:
        previous = self.selected_idx
        self.selected_idx = 0
        return self.selected_idx != previous

    def select_last(self) -> bool:
        rows = self.rows()
        previous = self.selected_idx
        self.selected_idx = max(0, len(rows) - 1)
        return self.selected_idx != previous

    def select_current(self) -> bool:
        node = self.selected_node
        if node is None:
            return False
        self._activate(node)
        # Collapsing can shrink the row list under the cursor.
        self._clamp(self.rows())
        return True

    def handle_key(self, key: str) -> str | None:
        """Handle one key; return ``None`` when consumed, else the key to pass on."""
        translated = translate_key(key, self.bindings)
        if translated not in self._registry:
            return translated
        self._registry.dispatch(translated)
        return None


__all__ = ["TreeCursor"]
