"""Channel hierarchy resolution: orphans, category shells, then category children.

Pass order decides on-screen order:

1. non-category channels without a parent, in list order (permission-gated)
2. categories that at least one other channel names as parent (not gated)
3. channels with a parent, attached under their category node (gated);
   channels whose category produced no node are dropped

Input lists are expected pre-sorted by ``position``; nothing is re-sorted here.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from ..directory.types import Channel
from ..node_model import ChannelRef, Node, NodeKind
from .labels import channel_label
from .permissions import PermissionLookup, can_view_channel

logger = logging.getLogger(__name__)

ChannelVisibility = Callable[[Channel], bool]


def sort_channels_by_position(channels: Sequence[Channel]) -> list[Channel]:
    """Return channels ordered by ascending ``position`` (stable on ties)."""
    return sorted(channels, key=lambda channel: channel.position)


def channel_node(channel: Channel, kind: str = NodeKind.CHANNEL) -> Node:
    return Node(channel_label(channel), ChannelRef(channel.id), kind=kind)


def resolve_channel_nodes(channels: Sequence[Channel], is_visible: ChannelVisibility) -> list[Node]:
    """Return the top-level nodes of one guild's channel subtree."""
    nodes: list[Node] = []

    for channel in channels:
        if not channel.is_category and not channel.has_parent and is_visible(channel):
            nodes.append(channel_node(channel))

    # Membership runs on the unfiltered list: a category whose children are
    # all hidden still gets a node.
    parent_ids = {
        channel.parent_id
        for channel in channels
        if channel.has_parent and channel.parent_id != channel.id
    }
    categories: dict[int, Node] = {}
    for channel in channels:
        if not channel.is_category or channel.id in categories or channel.id not in parent_ids:
            continue
        category = channel_node(channel)
        categories[channel.id] = category
        nodes.append(category)

    dropped = 0
    for channel in channels:
        if not channel.has_parent:
            continue
        category = categories.get(channel.parent_id)
        if category is None:
            dropped += 1
            continue
        if is_visible(channel):
            category.add_child(channel_node(channel))
    if dropped:
        logger.debug("dropped %d channel(s) whose parent category has no node", dropped)
    return nodes


def resolve_guild_channels(
    channels: Sequence[Channel],
    user_id: int,
    permissions_of: PermissionLookup,
) -> list[Node]:
    """Resolve a guild's channel list with the viewer's permission gate."""
    return resolve_channel_nodes(
        channels,
        lambda channel: can_view_channel(channel, user_id, permissions_of),
    )


def resolve_private_channels(channels: Sequence[Channel]) -> list[Node]:
    """Flat DM/group-DM nodes in list order; no permission filtering."""
    return [channel_node(channel, NodeKind.PRIVATE_CHANNEL) for channel in channels]


__all__ = [
    "ChannelVisibility",
    "channel_node",
    "resolve_channel_nodes",
    "resolve_guild_channels",
    "resolve_private_channels",
    "sort_channels_by_position",
]
