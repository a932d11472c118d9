"""Per-channel visibility check for the viewing user."""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..directory.types import Channel, Permission

logger = logging.getLogger(__name__)

PermissionLookup = Callable[[int, int], Permission]


def can_view_channel(channel: Channel, user_id: int, permissions_of: PermissionLookup) -> bool:
    """Return whether ``user_id`` may see ``channel``.

    Private channels are always visible. Lookup errors fail closed.
    """
    if channel.is_private:
        return True
    try:
        permissions = Permission(permissions_of(channel.id, user_id))
    except Exception as exc:
        logger.error("failed to get permissions for channel %s: %s", channel.id, exc)
        return False
    if permissions & Permission.ADMINISTRATOR:
        return True
    return bool(permissions & Permission.VIEW_CHANNEL)


__all__ = ["PermissionLookup", "can_view_channel"]
