"""Directory domain: guild/channel datatypes, lookup contract, JSON snapshots."""

from __future__ import annotations

from .service import DirectoryError, DirectoryService, LookupFailure, NotFoundError
from .snapshot import SnapshotDirectory, SnapshotError, load_snapshot, parse_permissions, snapshot_from_dict
from .types import PRIVATE_CHANNEL_TYPES, Channel, ChannelType, Folder, Guild, Permission, Recipient

__all__ = [
    "Channel",
    "ChannelType",
    "PRIVATE_CHANNEL_TYPES",
    "Folder",
    "Guild",
    "Permission",
    "Recipient",
    "DirectoryError",
    "NotFoundError",
    "LookupFailure",
    "DirectoryService",
    "SnapshotError",
    "SnapshotDirectory",
    "load_snapshot",
    "parse_permissions",
    "snapshot_from_dict",
]
