"""Tests for JSON snapshot loading and the snapshot directory lookups."""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path

from guildtree.directory import (
    ChannelType,
    NotFoundError,
    Permission,
    SnapshotError,
    load_snapshot,
    parse_permissions,
    snapshot_from_dict,
)

SNAPSHOT = {
    "user_id": "42",
    "guilds": [
        {
            "id": 1,
            "name": "alpha",
            "channels": [
                {"id": 10, "type": "category", "name": "General", "position": 0},
                {"id": 11, "type": "text", "name": "chat", "parent_id": "10", "position": 1},
                {"id": 12, "type": "mystery", "name": "odd", "position": 2},
                {"name": "no id"},
            ],
        },
        {"name": "no id guild"},
    ],
    "folders": [
        {"id": 5, "name": "Games", "color": "#00ff00", "guild_ids": [1, "2"]},
        {"guild_ids": "bad"},
    ],
    "private_channels": [
        {"id": 90, "type": "group_dm", "recipients": ["alice", {"username": "bob", "display_name": "Bobby"}]},
    ],
    "permissions": {"11": ["view_channel", "send_messages"], "12": []},
    "default_permissions": ["view_channel"],
}


class SnapshotParsingTests(unittest.TestCase):
    def test_snapshot_from_dict_parses_and_skips_malformed_entries(self) -> None:
        directory = snapshot_from_dict(SNAPSHOT)

        self.assertEqual(directory.user_id, 42)
        self.assertEqual([guild.name for guild in directory.guilds], ["alpha"])
        self.assertEqual([channel.id for channel in directory.channels[1]], [10, 11, 12])
        self.assertEqual(directory.channels[1][1].parent_id, 10)
        self.assertEqual(directory.channels[1][1].guild_id, 1)
        self.assertIs(directory.channels[1][2].type, ChannelType.OTHER)
        self.assertEqual(len(directory.folders), 1)
        self.assertEqual(directory.folders[0].guild_ids, (1, 2))
        self.assertEqual(directory.folders[0].color, 0x00FF00)
        recipients = directory.private[0].recipients
        self.assertEqual([r.display_or_username for r in recipients], ["alice", "Bobby"])

    def test_permissions_fall_back_to_default(self) -> None:
        directory = snapshot_from_dict(SNAPSHOT)
        self.assertEqual(directory.permissions_of(11, 42), Permission.VIEW_CHANNEL | Permission.SEND_MESSAGES)
        self.assertEqual(directory.permissions_of(12, 42), Permission.NONE)
        self.assertEqual(directory.permissions_of(10, 42), Permission.VIEW_CHANNEL)

    def test_parse_permissions_accepts_bitfield(self) -> None:
        self.assertEqual(parse_permissions(1 << 10), Permission.VIEW_CHANNEL)
        self.assertEqual(parse_permissions(True), Permission.NONE)
        self.assertEqual(parse_permissions(["nonsense", 3]), Permission.NONE)

    def test_missing_user_id_is_an_error(self) -> None:
        with self.assertRaises(SnapshotError):
            snapshot_from_dict({"guilds": []})


class SnapshotLookupTests(unittest.TestCase):
    def setUp(self) -> None:
        self.directory = snapshot_from_dict(SNAPSHOT)

    def test_lookups_raise_not_found(self) -> None:
        with self.assertRaises(NotFoundError):
            self.directory.guild_by_id(2)
        with self.assertRaises(NotFoundError):
            self.directory.channels_of_guild(2)
        with self.assertRaises(NotFoundError):
            self.directory.channel_by_id(999)
        with self.assertRaises(NotFoundError):
            self.directory.permissions_of(11, 7)

    def test_service_exposes_bound_lookups(self) -> None:
        service = self.directory.service()
        self.assertEqual(service.current_user_id(), 42)
        self.assertEqual(service.guild_by_id(1).name, "alpha")
        self.assertEqual(service.channel_by_id(90).type, ChannelType.GROUP_DM)
        self.assertEqual([channel.id for channel in service.private_channels()], [90])

    def test_channels_of_guild_returns_a_copy(self) -> None:
        channels = self.directory.channels_of_guild(1)
        channels.clear()
        self.assertEqual(len(self.directory.channels_of_guild(1)), 3)


class LoadSnapshotTests(unittest.TestCase):
    def test_load_snapshot_reads_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "snapshot.json"
            path.write_text(json.dumps(SNAPSHOT), encoding="utf-8")
            directory = load_snapshot(path)
        self.assertEqual(directory.user_id, 42)

    def test_load_snapshot_rejects_bad_documents(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "missing.json"
            not_object = Path(tmp) / "list.json"
            not_object.write_text("[1, 2]", encoding="utf-8")
            broken = Path(tmp) / "broken.json"
            broken.write_text("{", encoding="utf-8")
            for path in (missing, not_object, broken):
                with self.subTest(path=path.name), self.assertRaises(SnapshotError):
                    load_snapshot(path)


if __name__ == "__main__":
    unittest.main()
