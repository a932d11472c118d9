"""Node datatypes for the guild/channel navigation tree."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GuildRef:
    """Reference carried by a guild node."""

    guild_id: int


@dataclass(frozen=True)
class ChannelRef:
    """Reference carried by a channel or category node."""

    channel_id: int


NodeReference = GuildRef | ChannelRef | None


class NodeKind:
    """Display role of a node; folders and the DM root both carry no reference."""

    ROOT = "root"
    FOLDER = "folder"
    GUILD = "guild"
    CHANNEL = "channel"
    PRIVATE_ROOT = "private_root"
    PRIVATE_CHANNEL = "private_channel"


class Node:
    """One tree node: immutable reference, label, ordered children, expand flag."""

    __slots__ = ("_reference", "label", "kind", "children", "expanded")

    def __init__(
        self,
        label: str = "",
        reference: NodeReference = None,
        *,
        kind: str = NodeKind.CHANNEL,
        expanded: bool = False,
    ) -> None:
        self._reference = reference
        self.label = label
        self.kind = kind
        self.children: list[Node] = []
        self.expanded = expanded

    @property
    def reference(self) -> NodeReference:
        return self._reference

    def add_child(self, child: Node) -> Node:
        """Append ``child`` and return it."""
        self.children.append(child)
        return child

    def replace_children(self, children: list[Node]) -> None:
        """Swap the whole child list in one step."""
        self.children = list(children)

    def clear_children(self) -> None:
        self.children = []

    def __repr__(self) -> str:
        return f"Node(label={self.label!r}, reference={self._reference!r}, kind={self.kind!r})"


def new_root() -> Node:
    """Return an unlabeled, expanded root node."""
    return Node("", None, kind=NodeKind.ROOT, expanded=True)


__all__ = [
    "GuildRef",
    "ChannelRef",
    "NodeReference",
    "NodeKind",
    "Node",
    "new_root",
]
