"""Key binding translation and dispatch."""

from __future__ import annotations

from .key_registry import KeyComboBinding, KeyComboRegistry
from .keys import (
    DEFAULT_KEY_BINDINGS,
    NAVIGATION_PRIMITIVES,
    PRIMITIVE_KEYS,
    SELECT_CURRENT,
    SELECT_FIRST,
    SELECT_LAST,
    SELECT_NEXT,
    SELECT_PREVIOUS,
    KeyBindings,
    translate_key,
)

__all__ = [
    "KeyComboBinding",
    "KeyComboRegistry",
    "KeyBindings",
    "DEFAULT_KEY_BINDINGS",
    "NAVIGATION_PRIMITIVES",
    "PRIMITIVE_KEYS",
    "SELECT_PREVIOUS",
    "SELECT_NEXT",
    "SELECT_FIRST",
    "SELECT_LAST",
    "SELECT_CURRENT",
    "translate_key",
]
