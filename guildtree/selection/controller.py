"""Activation state machine for the guilds tree.

Activating a node either toggles an already-populated subtree, lazily builds
a guild's (or the Direct Messages root's) channel subtree, or switches the
active conversation. The controller owns the tree; builders only return
detached nodes which are attached here in one step.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from ..directory.service import DirectoryService
from ..directory.types import Channel
from ..node_model import ChannelRef, GuildRef, Node, NodeKind
from ..tree_build import (
    channel_label,
    resolve_guild_channels,
    resolve_private_channels,
    sort_channels_by_position,
)
from .fetch import ChannelFetchResult, ChannelFetchScheduler

logger = logging.getLogger(__name__)

COMPOSITION_SURFACE = "message_input"
PRIVATE_CHANNELS_KEY = "private_channels"


class SelectionKind:
    IDLE = "idle"
    GUILD_OPEN = "guild_open"
    CHANNEL_ACTIVE = "channel_active"


@dataclass(frozen=True)
class SelectionState:
    """Current selection; ``guild_id``/``channel_id`` set per ``kind``."""

    kind: str = SelectionKind.IDLE
    guild_id: int | None = None
    channel_id: int | None = None

    @classmethod
    def guild_open(cls, guild_id: int) -> SelectionState:
        return cls(SelectionKind.GUILD_OPEN, guild_id=guild_id)

    @classmethod
    def channel_active(cls, channel_id: int) -> SelectionState:
        return cls(SelectionKind.CHANNEL_ACTIVE, channel_id=channel_id)


IDLE = SelectionState()


@dataclass(frozen=True)
class ConversationDeps:
    """Content-display and focus collaborators."""

    display_conversation: Callable[[int, str], None]
    reset_conversation: Callable[[], None]
    reset_composition: Callable[[], None]
    request_focus: Callable[[str], None]


class SelectionController:
    """Reacts to node activation; see module docstring for the transitions."""

    def __init__(
        self,
        root: Node,
        directory: DirectoryService,
        conversation: ConversationDeps,
        *,
        scheduler: ChannelFetchScheduler | None = None,
        composition_surface: str = COMPOSITION_SURFACE,
        on_tree_changed: Callable[[], None] | None = None,
    ) -> None:
        self.root = root
        self.directory = directory
        self.conversation = conversation
        self.scheduler = scheduler
        self.composition_surface = composition_surface
        self.on_tree_changed = on_tree_changed
        self._state = IDLE
        self._fetch_targets: dict[object, Node] = {}

    @property
    def state(self) -> SelectionState:
        return self._state

    @property
    def selected_channel_id(self) -> int | None:
        return self._state.channel_id

    def _notify_tree_changed(self) -> None:
        if self.on_tree_changed is not None:
            self.on_tree_changed()

    def activate(self, node: Node) -> None:
        """Run the transition for one activation of ``node``."""
        if node.children:
            self._toggle(node)
            return

        reference = node.reference
        if isinstance(reference, GuildRef):
            self._populate(node, reference, lambda: self.directory.channels_of_guild(reference.guild_id))
        elif isinstance(reference, ChannelRef):
            self._open_channel(reference.channel_id)
        elif node.kind == NodeKind.PRIVATE_ROOT:
            self._populate(node, PRIVATE_CHANNELS_KEY, self.directory.private_channels)

    def _toggle(self, node: Node) -> None:
        node.expanded = not node.expanded
        if not node.expanded and (isinstance(node.reference, GuildRef) or node.kind == NodeKind.PRIVATE_ROOT):
            # Channel subtrees are rebuilt from a fresh fetch on next expansion.
            node.clear_children()
        self._notify_tree_changed()

    def _populate(self, node: Node, key: object, fetch: Callable[[], Sequence[Channel]]) -> None:
        if self.scheduler is None:
            try:
                channels = fetch()
            except Exception as exc:
                logger.error("failed to get channels for %s: %s", key, exc)
                return
            self._attach_channels(node, key, channels)
            return

        if self.scheduler.schedule(key, fetch) is None:
            logger.debug("channel fetch for %s already pending", key)
            return
        self._fetch_targets[key] = node

    def _attach_channels(self, node: Node, key: object, channels: Sequence[Channel]) -> None:
        if key == PRIVATE_CHANNELS_KEY:
            node.replace_children(resolve_private_channels(channels))
            node.expanded = True
            self._notify_tree_changed()
            return

        try:
            user_id = self.directory.current_user_id()
        except Exception as exc:
            logger.error("failed to get current user id: %s", exc)
            return
        children = resolve_guild_channels(
            sort_channels_by_position(channels),
            user_id,
            self.directory.permissions_of,
        )
        node.replace_children(children)
        node.expanded = True
        if isinstance(key, GuildRef):
            self._state = SelectionState.guild_open(key.guild_id)
        self._notify_tree_changed()

    def _open_channel(self, channel_id: int) -> None:
        self.conversation.reset_conversation()
        self.conversation.reset_composition()
        self._state = IDLE

        try:
            channel = self.directory.channel_by_id(channel_id)
        except Exception as exc:
            logger.error("failed to get channel %s: %s", channel_id, exc)
            # Content is still requested; only the title and focus are lost.
            self.conversation.display_conversation(channel_id, str(channel_id))
            return

        self.conversation.display_conversation(channel_id, channel_label(channel))
        self._state = SelectionState.channel_active(channel_id)
        self.conversation.request_focus(self.composition_surface)

    def apply_completed_fetches(self) -> int:
        """Apply finished background fetches; call from the UI thread.

        Returns the number of results drained (including failures).
        """
        if self.scheduler is None:
            return 0
        for request in self.scheduler.expire_stale():
            logger.warning(
                "channel fetch for %s timed out after %.1fs",
                request.key,
                self.scheduler.timeout_seconds,
            )
        results = self.scheduler.drain_results()
        for result in results:
            self._apply_result(result)
        return len(results)

    def _apply_result(self, result: ChannelFetchResult) -> None:
        key = result.request.key
        node = self._fetch_targets.get(key)
        if not self.scheduler.is_pending(key):
            self._fetch_targets.pop(key, None)
        if node is None:
            logger.debug("dropping channel fetch result for unknown target %s", key)
            return
        if result.error is not None:
            logger.error("failed to get channels for %s: %s", key, result.error)
            return
        self._attach_channels(node, key, result.channels)


__all__ = [
    "COMPOSITION_SURFACE",
    "PRIVATE_CHANNELS_KEY",
    "IDLE",
    "SelectionKind",
    "SelectionState",
    "ConversationDeps",
    "SelectionController",
]
