"""Key-name dispatch table used by the tree cursor."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class KeyComboBinding:
    """One or more key names routed to a single handler."""

    combos: tuple[str, ...]
    handler: Callable[[], bool | None]


class KeyComboRegistry:
    """Exact-match key dispatch; unknown keys report ``None`` so callers can pass them on."""

    def __init__(self) -> None:
        self._handlers: dict[str, Callable[[], bool | None]] = {}

    def register(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        """Register bindings (later combos overwrite earlier ones); returns ``self``."""
        for binding in bindings:
            for combo in binding.combos:
                self._handlers[combo] = binding.handler
        return self

    def __contains__(self, key: str) -> bool:
        return key in self._handlers

    def dispatch(self, key: str) -> bool | None:
        handler = self._handlers.get(key)
        if handler is None:
            return None
        return handler()


__all__ = ["KeyComboBinding", "KeyComboRegistry"]
