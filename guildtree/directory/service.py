"""Directory collaborator contract and its error kinds.

The tree never talks to a transport directly. Callers hand in a
``DirectoryService`` whose callables may raise ``DirectoryError`` subclasses.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .types import Channel, Guild, Permission


class DirectoryError(Exception):
    """Base error raised by directory lookups."""


class NotFoundError(DirectoryError):
    """Requested guild or channel is absent from the directory."""


class LookupFailure(DirectoryError):
    """Transient collaborator failure (network, cache miss, decode error)."""


@dataclass(frozen=True)
class DirectoryService:
    """Lookup callables consumed by the tree builders and selection controller."""

    guild_by_id: Callable[[int], Guild]
    channels_of_guild: Callable[[int], Sequence[Channel]]
    channel_by_id: Callable[[int], Channel]
    private_channels: Callable[[], Sequence[Channel]]
    permissions_of: Callable[[int, int], Permission]
    current_user_id: Callable[[], int]


__all__ = [
    "DirectoryError",
    "NotFoundError",
    "LookupFailure",
    "DirectoryService",
]
