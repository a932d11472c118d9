"""Tests for key-binding translation and the key registry."""

from __future__ import annotations

import unittest

from guildtree.input import (
    SELECT_CURRENT,
    SELECT_LAST,
    KeyBindings,
    KeyComboBinding,
    KeyComboRegistry,
    translate_key,
)


class TranslateKeyTests(unittest.TestCase):
    def test_default_bindings_map_to_terminal_keys(self) -> None:
        self.assertEqual(
            [translate_key(key) for key in ("k", "j", "g", "G", "ENTER")],
            ["UP", "DOWN", "HOME", "END", "ENTER"],
        )

    def test_unbound_keys_pass_through(self) -> None:
        self.assertEqual(translate_key("x"), "x")
        self.assertEqual(translate_key("ctrl+k"), "ctrl+k")
        self.assertEqual(translate_key("UP"), "UP")

    def test_custom_bindings(self) -> None:
        bindings = KeyBindings(select_previous="w", select_next="s")
        self.assertEqual(translate_key("w", bindings), "UP")
        self.assertEqual(translate_key("s", bindings), "DOWN")
        self.assertEqual(translate_key("k", bindings), "k")
        self.assertEqual(bindings.primitive_for("G"), SELECT_LAST)
        self.assertEqual(bindings.primitive_for("ENTER"), SELECT_CURRENT)


class KeyBindingsFromMappingTests(unittest.TestCase):
    def test_invalid_entries_keep_defaults(self) -> None:
        bindings = KeyBindings.from_mapping(
            {
                "select_next": " n ",
                "select_previous": 5,
                "select_first": "",
                "unknown_action": "q",
            }
        )
        self.assertEqual(bindings, KeyBindings(select_next="n"))

    def test_non_mapping_returns_defaults(self) -> None:
        self.assertEqual(KeyBindings.from_mapping(["j"]), KeyBindings())

    def test_to_mapping_round_trips(self) -> None:
        bindings = KeyBindings(select_current="l")
        self.assertEqual(KeyBindings.from_mapping(bindings.to_mapping()), bindings)


class KeyComboRegistryTests(unittest.TestCase):
    def test_dispatch_calls_handler_and_reports_unknown_keys(self) -> None:
        calls: list[str] = []
        registry = KeyComboRegistry().register(
            KeyComboBinding(("UP", "k"), lambda: calls.append("up") or True),
        )
        self.assertTrue(registry.dispatch("k"))
        self.assertIsNone(registry.dispatch("DOWN"))
        self.assertIn("UP", registry)
        self.assertEqual(calls, ["up"])


if __name__ == "__main__":
    unittest.main()
