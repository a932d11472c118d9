"""In-memory directory backed by a JSON snapshot of guilds, folders, and channels.

Snapshots are the offline stand-in for a live session: the CLI renders them
and tests use them as a realistic directory collaborator. Malformed entries
are skipped; only an unreadable file or a non-object document is fatal.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from .service import DirectoryError, DirectoryService, NotFoundError
from .types import Channel, ChannelType, Folder, Guild, Permission, Recipient

logger = logging.getLogger(__name__)


class SnapshotError(DirectoryError):
    """Snapshot file cannot be read or does not hold a JSON object."""


def _coerce_id(value: object) -> int | None:
    """Accept ints and numeric strings (snowflakes are often quoted)."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return None


def _coerce_int(value: object, default: int = 0) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    return value


def _optional_str(value: object) -> str | None:
    return value if isinstance(value, str) and value else None


def parse_permissions(value: object) -> Permission:
    """Parse a permission list (``["view_channel", ...]``) or raw bitfield."""
    if isinstance(value, bool):
        return Permission.NONE
    if isinstance(value, int):
        return Permission(value & sum(int(flag) for flag in Permission))
    if not isinstance(value, list):
        return Permission.NONE
    result = Permission.NONE
    for raw_name in value:
        if not isinstance(raw_name, str):
            continue
        flag = Permission.__members__.get(raw_name.strip().upper())
        if flag is not None:
            result |= flag
    return result


def _parse_recipient(raw: object) -> Recipient | None:
    if isinstance(raw, str) and raw:
        return Recipient(username=raw)
    if not isinstance(raw, dict):
        return None
    username = _optional_str(raw.get("username"))
    if username is None:
        return None
    return Recipient(
        username=username,
        discriminator=_optional_str(raw.get("discriminator")),
        display_name=_optional_str(raw.get("display_name")),
    )


def _parse_channel(raw: object, guild_id: int | None = None) -> Channel | None:
    if not isinstance(raw, dict):
        return None
    channel_id = _coerce_id(raw.get("id"))
    if channel_id is None:
        return None
    raw_recipients = raw.get("recipients")
    recipients: list[Recipient] = []
    if isinstance(raw_recipients, list):
        for raw_recipient in raw_recipients:
            recipient = _parse_recipient(raw_recipient)
            if recipient is not None:
                recipients.append(recipient)
    name = raw.get("name")
    return Channel(
        id=channel_id,
        type=ChannelType.parse(raw.get("type", "other")),
        name=name if isinstance(name, str) else "",
        parent_id=_coerce_id(raw.get("parent_id")),
        position=_coerce_int(raw.get("position")),
        recipients=tuple(recipients),
        guild_id=_coerce_id(raw.get("guild_id")) if guild_id is None else guild_id,
    )


def _parse_folder(raw: object) -> Folder | None:
    if not isinstance(raw, dict):
        return None
    raw_guild_ids = raw.get("guild_ids")
    if not isinstance(raw_guild_ids, list):
        return None
    guild_ids = tuple(gid for gid in (_coerce_id(value) for value in raw_guild_ids) if gid is not None)
    color = raw.get("color")
    if isinstance(color, str) and color.startswith("#"):
        try:
            color = int(color[1:], 16)
        except ValueError:
            color = None
    return Folder(
        guild_ids=guild_ids,
        id=_coerce_id(raw.get("id")),
        name=_optional_str(raw.get("name")),
        color=color if isinstance(color, int) and not isinstance(color, bool) else None,
    )


@dataclass
class SnapshotDirectory:
    """Directory contents held in memory; lookups raise ``NotFoundError`` on misses."""

    user_id: int
    guilds: list[Guild] = field(default_factory=list)
    folders: list[Folder] = field(default_factory=list)
    channels: dict[int, list[Channel]] = field(default_factory=dict)
    private: list[Channel] = field(default_factory=list)
    permissions: dict[int, Permission] = field(default_factory=dict)
    default_permissions: Permission = Permission.NONE

    def guild_by_id(self, guild_id: int) -> Guild:
        for guild in self.guilds:
            if guild.id == guild_id:
                return guild
        raise NotFoundError(f"guild {guild_id} not found")

    def channels_of_guild(self, guild_id: int) -> Sequence[Channel]:
        if not any(guild.id == guild_id for guild in self.guilds):
            raise NotFoundError(f"guild {guild_id} not found")
        return list(self.channels.get(guild_id, []))

    def channel_by_id(self, channel_id: int) -> Channel:
        for channel in self.private:
            if channel.id == channel_id:
                return channel
        for guild_channels in self.channels.values():
            for channel in guild_channels:
                if channel.id == channel_id:
                    return channel
        raise NotFoundError(f"channel {channel_id} not found")

    def private_channels(self) -> Sequence[Channel]:
        return list(self.private)

    def permissions_of(self, channel_id: int, user_id: int) -> Permission:
        if user_id != self.user_id:
            raise NotFoundError(f"no permission data for user {user_id}")
        self.channel_by_id(channel_id)
        return self.permissions.get(channel_id, self.default_permissions)

    def current_user_id(self) -> int:
        return self.user_id

    def service(self) -> DirectoryService:
        """Expose lookups through the ``DirectoryService`` contract."""
        return DirectoryService(
            guild_by_id=self.guild_by_id,
            channels_of_guild=self.channels_of_guild,
            channel_by_id=self.channel_by_id,
            private_channels=self.private_channels,
            permissions_of=self.permissions_of,
            current_user_id=self.current_user_id,
        )


def snapshot_from_dict(data: dict[str, object]) -> SnapshotDirectory:
    """Build a directory from a decoded snapshot document, skipping bad entries."""
    user_id = _coerce_id(data.get("user_id"))
    if user_id is None:
        raise SnapshotError("snapshot is missing a numeric 'user_id'")

    guilds: list[Guild] = []
    channels: dict[int, list[Channel]] = {}
    raw_guilds = data.get("guilds")
    for raw_guild in raw_guilds if isinstance(raw_guilds, list) else []:
        if not isinstance(raw_guild, dict):
            continue
        guild_id = _coerce_id(raw_guild.get("id"))
        if guild_id is None:
            logger.warning("skipping snapshot guild without id: %r", raw_guild)
            continue
        name = raw_guild.get("name")
        guilds.append(Guild(id=guild_id, name=name if isinstance(name, str) else ""))
        guild_channels: list[Channel] = []
        raw_channels = raw_guild.get("channels")
        for raw_channel in raw_channels if isinstance(raw_channels, list) else []:
            channel = _parse_channel(raw_channel, guild_id=guild_id)
            if channel is None:
                logger.warning("skipping malformed channel in guild %s: %r", guild_id, raw_channel)
                continue
            guild_channels.append(channel)
        channels[guild_id] = guild_channels

    folders: list[Folder] = []
    raw_folders = data.get("folders")
    for raw_folder in raw_folders if isinstance(raw_folders, list) else []:
        folder = _parse_folder(raw_folder)
        if folder is None:
            logger.warning("skipping malformed folder: %r", raw_folder)
            continue
        folders.append(folder)

    private: list[Channel] = []
    raw_private = data.get("private_channels")
    for raw_channel in raw_private if isinstance(raw_private, list) else []:
        channel = _parse_channel(raw_channel)
        if channel is None:
            logger.warning("skipping malformed private channel: %r", raw_channel)
            continue
        private.append(channel)

    permissions: dict[int, Permission] = {}
    raw_permissions = data.get("permissions")
    if isinstance(raw_permissions, dict):
        for raw_channel_id, raw_value in raw_permissions.items():
            channel_id = _coerce_id(raw_channel_id)
            if channel_id is None:
                continue
            permissions[channel_id] = parse_permissions(raw_value)

    return SnapshotDirectory(
        user_id=user_id,
        guilds=guilds,
        folders=folders,
        channels=channels,
        private=private,
        permissions=permissions,
        default_permissions=parse_permissions(data.get("default_permissions", ["view_channel"])),
    )


def load_snapshot(path: Path) -> SnapshotDirectory:
    """Read and parse a JSON snapshot file."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise SnapshotError(f"cannot read snapshot {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise SnapshotError(f"snapshot {path} must contain a JSON object")
    return snapshot_from_dict(data)


__all__ = [
    "SnapshotError",
    "SnapshotDirectory",
    "parse_permissions",
    "snapshot_from_dict",
    "load_snapshot",
]
