"""Selection state machine and background channel fetching."""

from __future__ import annotations

from .controller import (
    COMPOSITION_SURFACE,
    IDLE,
    PRIVATE_CHANNELS_KEY,
    ConversationDeps,
    SelectionController,
    SelectionKind,
    SelectionState,
)
from .fetch import DEFAULT_FETCH_TIMEOUT_SECONDS, ChannelFetchRequest, ChannelFetchResult, ChannelFetchScheduler

__all__ = [
    "COMPOSITION_SURFACE",
    "IDLE",
    "PRIVATE_CHANNELS_KEY",
    "ConversationDeps",
    "SelectionController",
    "SelectionKind",
    "SelectionState",
    "DEFAULT_FETCH_TIMEOUT_SECONDS",
    "ChannelFetchRequest",
    "ChannelFetchResult",
    "ChannelFetchScheduler",
]
