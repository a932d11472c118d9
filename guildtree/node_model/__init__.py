"""Generic node model for the navigation tree.

Holds node datatypes with tagged guild/channel references plus traversal
helpers shared by the builders, renderer, and cursor.
"""

from __future__ import annotations

from .types import ChannelRef, GuildRef, Node, NodeKind, NodeReference, new_root
from .walk import TreeRow, find_node, tree_shape, visible_rows, walk

__all__ = [
    "GuildRef",
    "ChannelRef",
    "NodeReference",
    "NodeKind",
    "Node",
    "new_root",
    "walk",
    "find_node",
    "tree_shape",
    "TreeRow",
    "visible_rows",
]
