"""Tree builders: folder grouping, channel hierarchy, permission gate, labels."""

from __future__ import annotations

from .channels import (
    channel_node,
    resolve_channel_nodes,
    resolve_guild_channels,
    resolve_private_channels,
    sort_channels_by_position,
)
from .folders import DIRECT_MESSAGES_LABEL, build_guilds_tree, guild_node
from .labels import DEFAULT_FOLDER_LABEL, channel_label, folder_color_hex, folder_label
from .permissions import can_view_channel

__all__ = [
    "DIRECT_MESSAGES_LABEL",
    "DEFAULT_FOLDER_LABEL",
    "build_guilds_tree",
    "guild_node",
    "channel_node",
    "channel_label",
    "folder_label",
    "folder_color_hex",
    "can_view_channel",
    "resolve_channel_nodes",
    "resolve_guild_channels",
    "resolve_private_channels",
    "sort_channels_by_position",
]
