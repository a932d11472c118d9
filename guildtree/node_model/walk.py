"""Traversal helpers: depth-first walk, reference lookup, visible-row flattening."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .types import Node, NodeReference


def walk(node: Node, parent: Node | None = None) -> Iterator[tuple[Node, Node | None]]:
    """Yield ``(node, parent)`` pairs in pre-order, starting at ``node``."""
    stack: list[tuple[Node, Node | None]] = [(node, parent)]
    while stack:
        current, current_parent = stack.pop()
        yield current, current_parent
        for child in reversed(current.children):
            stack.append((child, current))


def find_node(root: Node, reference: NodeReference) -> Node | None:
    """Return first node in pre-order whose reference equals ``reference``."""
    if reference is None:
        return None
    for node, _parent in walk(root):
        if node.reference == reference:
            return node
    return None


def tree_shape(node: Node) -> tuple[str, tuple]:
    """Return ``(label, child_shapes)`` for structural comparisons."""
    return node.label, tuple(tree_shape(child) for child in node.children)


@dataclass(frozen=True)
class TreeRow:
    """One visible row of the tree view."""

    node: Node
    depth: int
    # One flag per ancestor level: whether that ancestor was the last sibling.
    last_flags: tuple[bool, ...]


def visible_rows(root: Node, *, include_root: bool = False) -> list[TreeRow]:
    """Flatten expanded subtrees into display rows; the root is hidden by default."""
    rows: list[TreeRow] = []

    def visit(node: Node, depth: int, last_flags: tuple[bool, ...]) -> None:
        rows.append(TreeRow(node, depth, last_flags))
        if not node.expanded:
            return
        count = len(node.children)
        for idx, child in enumerate(node.children):
            visit(child, depth + 1, last_flags + (idx == count - 1,))

    if include_root:
        visit(root, 0, ())
        return rows
    if root.expanded:
        count = len(root.children)
        for idx, child in enumerate(root.children):
            visit(child, 0, (idx == count - 1,))
    return rows


__all__ = [
    "walk",
    "find_node",
    "tree_shape",
    "TreeRow",
    "visible_rows",
]
