"""Display labels for channels and guild folders."""

from __future__ import annotations

from ..directory.types import Channel, ChannelType, Folder

DEFAULT_FOLDER_LABEL = "Folder"

_CHANNEL_PREFIXES = {
    ChannelType.TEXT: "#",
    ChannelType.VOICE: "v-",
    ChannelType.ANNOUNCEMENT: "a-",
    ChannelType.STORE: "s-",
    ChannelType.FORUM: "f-",
}


def channel_label(channel: Channel) -> str:
    """Return the tree/title label for ``channel``."""
    prefix = _CHANNEL_PREFIXES.get(channel.type)
    if prefix is not None:
        return prefix + channel.name
    if channel.type is ChannelType.DIRECT_MESSAGE:
        if not channel.recipients:
            return channel.name
        return channel.recipients[0].tag
    if channel.type is ChannelType.GROUP_DM:
        if channel.name:
            return channel.name
        return ", ".join(recipient.display_or_username for recipient in channel.recipients)
    return channel.name


def folder_color_hex(color: int) -> str:
    return f"#{color & 0xFFFFFF:06x}"


def folder_label(folder: Folder) -> str:
    """Return ``"Folder"`` for unnamed folders, else ``[#rrggbb]name[-]`` markup."""
    if not folder.name:
        return DEFAULT_FOLDER_LABEL
    if folder.color is None:
        return folder.name
    return f"[{folder_color_hex(folder.color)}]{folder.name}[-]"


__all__ = [
    "DEFAULT_FOLDER_LABEL",
    "channel_label",
    "folder_color_hex",
    "folder_label",
]
