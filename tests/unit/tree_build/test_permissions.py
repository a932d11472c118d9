"""Tests for the channel visibility gate."""

from __future__ import annotations

import unittest

from guildtree.directory import Channel, ChannelType, LookupFailure, Permission
from guildtree.tree_build import can_view_channel


def _lookup_returning(value: Permission):
    calls: list[tuple[int, int]] = []

    def permissions_of(channel_id: int, user_id: int) -> Permission:
        calls.append((channel_id, user_id))
        return value

    return permissions_of, calls


class CanViewChannelTests(unittest.TestCase):
    def test_private_channels_skip_permission_lookup(self) -> None:
        permissions_of, calls = _lookup_returning(Permission.NONE)
        for channel_type in (ChannelType.DIRECT_MESSAGE, ChannelType.GROUP_DM):
            self.assertTrue(can_view_channel(Channel(1, channel_type), 7, permissions_of))
        self.assertEqual(calls, [])

    def test_view_channel_bit_is_required(self) -> None:
        channel = Channel(3, ChannelType.TEXT, "chat")
        allowed, calls = _lookup_returning(Permission.VIEW_CHANNEL | Permission.SEND_MESSAGES)
        denied, _ = _lookup_returning(Permission.SEND_MESSAGES)
        self.assertTrue(can_view_channel(channel, 7, allowed))
        self.assertFalse(can_view_channel(channel, 7, denied))
        self.assertEqual(calls, [(3, 7)])

    def test_administrator_sees_everything(self) -> None:
        admin, _ = _lookup_returning(Permission.ADMINISTRATOR)
        self.assertTrue(can_view_channel(Channel(3, ChannelType.VOICE, "talk"), 7, admin))

    def test_lookup_errors_fail_closed_and_are_logged(self) -> None:
        def failing(_channel_id: int, _user_id: int) -> Permission:
            raise LookupFailure("cache miss")

        with self.assertLogs("guildtree.tree_build.permissions", level="ERROR") as logs:
            self.assertFalse(can_view_channel(Channel(3, ChannelType.TEXT, "chat"), 7, failing))
        self.assertIn("channel 3", logs.output[0])


if __name__ == "__main__":
    unittest.main()
