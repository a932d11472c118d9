"""Top-level tree construction from guild folders and the known guild set."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from ..directory.types import Folder, Guild
from ..node_model import GuildRef, Node, NodeKind, new_root
from .labels import folder_label

logger = logging.getLogger(__name__)

DIRECT_MESSAGES_LABEL = "Direct Messages"


def guild_node(guild: Guild) -> Node:
    return Node(guild.name, GuildRef(guild.id), kind=NodeKind.GUILD)


def _is_standalone(folder: Folder) -> bool:
    """Folder entries without id wrapping exactly one guild are plain guilds."""
    return folder.id is None and len(folder.guild_ids) == 1


def build_guilds_tree(
    folders: Sequence[Folder],
    guild_by_id: Callable[[int], Guild],
    *,
    known_guilds: Sequence[Guild] = (),
    auto_expand_folders: bool = True,
    include_direct_messages: bool = True,
) -> Node:
    """Build root → (DM root, folders, standalone guilds) in input order.

    Unresolvable guild ids are logged and skipped. ``known_guilds`` not
    referenced by any folder are appended after the folder entries.
    """
    root = new_root()
    if include_direct_messages:
        root.add_child(Node(DIRECT_MESSAGES_LABEL, None, kind=NodeKind.PRIVATE_ROOT))

    placed: set[int] = set()

    def add_guild(parent: Node, guild_id: int) -> None:
        if guild_id in placed:
            return
        try:
            guild = guild_by_id(guild_id)
        except Exception as exc:
            logger.info("guild not found in state: guild_id=%s err=%s", guild_id, exc)
            return
        placed.add(guild_id)
        parent.add_child(guild_node(guild))

    for folder in folders:
        if _is_standalone(folder):
            add_guild(root, folder.guild_ids[0])
            continue
        folder_node = root.add_child(
            Node(folder_label(folder), None, kind=NodeKind.FOLDER, expanded=auto_expand_folders)
        )
        for guild_id in folder.guild_ids:
            add_guild(folder_node, guild_id)

    for guild in known_guilds:
        if guild.id not in placed:
            placed.add(guild.id)
            root.add_child(guild_node(guild))
    return root


__all__ = ["DIRECT_MESSAGES_LABEL", "build_guilds_tree", "guild_node"]
