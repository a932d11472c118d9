"""Configured key names → tree navigation primitives.

Each primitive maps to the terminal key the tree widget already understands
(``UP``, ``DOWN``, ``HOME``, ``END``, ``ENTER``). Keys that are not bound
to a primitive pass through untouched.
"""

from __future__ import annotations

from dataclasses import dataclass, fields

SELECT_PREVIOUS = "select_previous"
SELECT_NEXT = "select_next"
SELECT_FIRST = "select_first"
SELECT_LAST = "select_last"
SELECT_CURRENT = "select_current"

NAVIGATION_PRIMITIVES = (SELECT_PREVIOUS, SELECT_NEXT, SELECT_FIRST, SELECT_LAST, SELECT_CURRENT)

PRIMITIVE_KEYS = {
    SELECT_PREVIOUS: "UP",
    SELECT_NEXT: "DOWN",
    SELECT_FIRST: "HOME",
    SELECT_LAST: "END",
    SELECT_CURRENT: "ENTER",
}


@dataclass(frozen=True)
class KeyBindings:
    """Key name configured for each navigation primitive."""

    select_previous: str = "k"
    select_next: str = "j"
    select_first: str = "g"
    select_last: str = "G"
    select_current: str = "ENTER"

    def primitive_for(self, key: str) -> str | None:
        """Return the primitive bound to ``key`` (first match in primitive order)."""
        for primitive in NAVIGATION_PRIMITIVES:
            if getattr(self, primitive) == key:
                return primitive
        return None

    @classmethod
    def from_mapping(cls, raw: object) -> KeyBindings:
        """Build bindings from a config mapping; bad or unknown entries keep defaults."""
        if not isinstance(raw, dict):
            return cls()
        known = {item.name for item in fields(cls)}
        overrides: dict[str, str] = {}
        for name, value in raw.items():
            if name not in known:
                continue
            if not isinstance(value, str) or not value.strip():
                continue
            overrides[name] = value.strip()
        return cls(**overrides)

    def to_mapping(self) -> dict[str, str]:
        return {primitive: getattr(self, primitive) for primitive in NAVIGATION_PRIMITIVES}


DEFAULT_KEY_BINDINGS = KeyBindings()


def translate_key(key: str, bindings: KeyBindings = DEFAULT_KEY_BINDINGS) -> str:
    """Return the terminal key for a bound primitive, or ``key`` unchanged."""
    primitive = bindings.primitive_for(key)
    if primitive is None:
        return key
    return PRIMITIVE_KEYS[primitive]


__all__ = [
    "SELECT_PREVIOUS",
    "SELECT_NEXT",
    "SELECT_FIRST",
    "SELECT_LAST",
    "SELECT_CURRENT",
    "NAVIGATION_PRIMITIVES",
    "PRIMITIVE_KEYS",
    "KeyBindings",
    "DEFAULT_KEY_BINDINGS",
    "translate_key",
]
