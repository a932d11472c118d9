"""Tests for top-level folder/guild grouping."""

from __future__ import annotations

import unittest

from guildtree.directory import Folder, Guild, NotFoundError
from guildtree.node_model import GuildRef, NodeKind, walk
from guildtree.tree_build import DIRECT_MESSAGES_LABEL, build_guilds_tree

GUILDS = {
    1: Guild(1, "alpha"),
    2: Guild(2, "beta"),
    3: Guild(3, "gamma"),
    4: Guild(4, "delta"),
}


def guild_by_id(guild_id: int) -> Guild:
    try:
        return GUILDS[guild_id]
    except KeyError:
        raise NotFoundError(f"guild {guild_id}") from None


class BuildGuildsTreeTests(unittest.TestCase):
    def test_folders_and_standalone_guilds_keep_input_order(self) -> None:
        folders = [
            Folder(guild_ids=(1,)),
            Folder(guild_ids=(2, 3), id=50, name="Games", color=0x00FF00),
            Folder(guild_ids=(4,)),
        ]
        root = build_guilds_tree(folders, guild_by_id, include_direct_messages=False)

        self.assertEqual([child.label for child in root.children], ["alpha", "[#00ff00]Games[-]", "delta"])
        folder = root.children[1]
        self.assertEqual(folder.kind, NodeKind.FOLDER)
        self.assertIsNone(folder.reference)
        self.assertEqual([child.reference for child in folder.children], [GuildRef(2), GuildRef(3)])

    def test_missing_guild_is_skipped_without_aborting_folder(self) -> None:
        folders = [Folder(guild_ids=(1, 99, 2), id=50)]
        with self.assertLogs("guildtree.tree_build.folders", level="INFO") as logs:
            root = build_guilds_tree(folders, guild_by_id, include_direct_messages=False)

        folder = root.children[0]
        self.assertEqual(folder.label, "Folder")
        self.assertEqual([child.label for child in folder.children], ["alpha", "beta"])
        self.assertTrue(any("99" in line for line in logs.output))

    def test_unexpected_lookup_error_skips_guild_and_keeps_building(self) -> None:
        def flaky_guild_by_id(guild_id: int) -> Guild:
            if guild_id == 2:
                raise ConnectionError("connection reset")
            return guild_by_id(guild_id)

        with self.assertLogs("guildtree.tree_build.folders", level="INFO") as logs:
            root = build_guilds_tree(
                [Folder(guild_ids=(1, 2, 3), id=50)],
                flaky_guild_by_id,
                include_direct_messages=False,
            )

        self.assertEqual([child.label for child in root.children[0].children], ["alpha", "gamma"])
        self.assertTrue(any("connection reset" in line for line in logs.output))

    def test_unresolvable_standalone_guild_produces_no_node(self) -> None:
        root = build_guilds_tree([Folder(guild_ids=(99,)), Folder(guild_ids=(1,))], guild_by_id, include_direct_messages=False)
        self.assertEqual([child.label for child in root.children], ["alpha"])

    def test_each_guild_id_produces_at_most_one_node(self) -> None:
        folders = [Folder(guild_ids=(1, 1), id=5), Folder(guild_ids=(1,))]
        root = build_guilds_tree(
            folders,
            guild_by_id,
            known_guilds=list(GUILDS.values()),
            include_direct_messages=False,
        )
        guild_refs = [node.reference for node, _ in walk(root) if isinstance(node.reference, GuildRef)]
        self.assertEqual(len(guild_refs), len(set(guild_refs)))
        self.assertEqual(guild_refs, [GuildRef(1), GuildRef(2), GuildRef(3), GuildRef(4)])

    def test_known_guilds_without_folders_become_top_level(self) -> None:
        root = build_guilds_tree([], guild_by_id, known_guilds=[GUILDS[3], GUILDS[1]])
        self.assertEqual([child.label for child in root.children], [DIRECT_MESSAGES_LABEL, "gamma", "alpha"])
        self.assertEqual(root.children[0].kind, NodeKind.PRIVATE_ROOT)

    def test_auto_expand_folders_flag(self) -> None:
        folders = [Folder(guild_ids=(1, 2), id=5)]
        expanded = build_guilds_tree(folders, guild_by_id, include_direct_messages=False)
        collapsed = build_guilds_tree(folders, guild_by_id, auto_expand_folders=False, include_direct_messages=False)
        self.assertTrue(expanded.children[0].expanded)
        self.assertFalse(collapsed.children[0].expanded)


if __name__ == "__main__":
    unittest.main()
