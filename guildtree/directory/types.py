"""Directory datatypes: guilds, folders, channels, recipients, permission bits."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntFlag


class ChannelType(str, Enum):
    TEXT = "text"
    VOICE = "voice"
    ANNOUNCEMENT = "announcement"
    STORE = "store"
    FORUM = "forum"
    CATEGORY = "category"
    DIRECT_MESSAGE = "direct_message"
    GROUP_DM = "group_dm"
    OTHER = "other"

    @classmethod
    def parse(cls, value: object) -> ChannelType:
        """Map a snapshot string to a channel type; unknown values become ``OTHER``."""
        if isinstance(value, ChannelType):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.OTHER


PRIVATE_CHANNEL_TYPES = frozenset({ChannelType.DIRECT_MESSAGE, ChannelType.GROUP_DM})


class Permission(IntFlag):
    """Subset of Discord permission bits the tree cares about."""

    NONE = 0
    ADMINISTRATOR = 1 << 3
    VIEW_CHANNEL = 1 << 10
    SEND_MESSAGES = 1 << 11
    READ_MESSAGE_HISTORY = 1 << 16


@dataclass(frozen=True)
class Guild:
    id: int
    name: str


@dataclass(frozen=True)
class Folder:
    """User-defined guild grouping; ``id is None`` marks a standalone-guild wrapper."""

    guild_ids: tuple[int, ...]
    id: int | None = None
    name: str | None = None
    color: int | None = None


@dataclass(frozen=True)
class Recipient:
    """Peer of a private channel."""

    username: str
    discriminator: str | None = None
    display_name: str | None = None

    @property
    def tag(self) -> str:
        if self.discriminator and self.discriminator != "0":
            return f"{self.username}#{self.discriminator}"
        return self.username

    @property
    def display_or_username(self) -> str:
        return self.display_name or self.username


@dataclass(frozen=True)
class Channel:
    id: int
    type: ChannelType
    name: str = ""
    parent_id: int | None = None
    position: int = 0
    recipients: tuple[Recipient, ...] = ()
    guild_id: int | None = None

    @property
    def has_parent(self) -> bool:
        """Return whether ``parent_id`` is a valid (non-zero) reference."""
        return bool(self.parent_id)

    @property
    def is_category(self) -> bool:
        return self.type is ChannelType.CATEGORY

    @property
    def is_private(self) -> bool:
        return self.type in PRIVATE_CHANNEL_TYPES


__all__ = [
    "ChannelType",
    "PRIVATE_CHANNEL_TYPES",
    "Permission",
    "Guild",
    "Folder",
    "Recipient",
    "Channel",
]
