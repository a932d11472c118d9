"""Persistent JSON config: key bindings and tree theme settings.

All access is defensive: a missing, unreadable, or malformed config falls
back to defaults and never aborts startup.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir, user_log_dir

from .input import KeyBindings
from .ui_theme import normalize_theme_name

logger = logging.getLogger(__name__)

APP_NAME = "guildtree"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
LOG_PATH = Path(user_log_dir(APP_NAME, appauthor=False)) / "guildtree.log"


@dataclass(frozen=True)
class TreeThemeSettings:
    """Tree-specific theme options."""

    name: str = "default"
    auto_expand_folders: bool = True
    graphics: bool = True


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object, or ``{}`` when unusable."""
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except Exception as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("ignoring config %s: top level is not an object", CONFIG_PATH)
        return {}
    return data


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON; write errors are logged only."""
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception as exc:
        logger.warning("failed to save config %s: %s", CONFIG_PATH, exc)


def load_key_bindings() -> KeyBindings:
    """Load navigation key bindings; unknown or invalid entries keep defaults."""
    return KeyBindings.from_mapping(load_config().get("keys"))


def save_key_bindings(bindings: KeyBindings) -> None:
    config = load_config()
    config["keys"] = bindings.to_mapping()
    save_config(config)


def _bool_setting(raw: dict[str, object], key: str, default: bool) -> bool:
    value = raw.get(key)
    return value if isinstance(value, bool) else default


def load_theme_settings() -> TreeThemeSettings:
    """Load tree theme settings; only explicit booleans override flags."""
    raw = load_config().get("theme")
    if not isinstance(raw, dict):
        return TreeThemeSettings()
    raw_name = raw.get("name")
    return TreeThemeSettings(
        name=normalize_theme_name(raw_name if isinstance(raw_name, str) else None),
        auto_expand_folders=_bool_setting(raw, "auto_expand_folders", True),
        graphics=_bool_setting(raw, "graphics", True),
    )


def save_theme_settings(settings: TreeThemeSettings) -> None:
    config = load_config()
    config["theme"] = {
        "name": normalize_theme_name(settings.name),
        "auto_expand_folders": bool(settings.auto_expand_folders),
        "graphics": bool(settings.graphics),
    }
    save_config(config)


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "LOG_PATH",
    "TreeThemeSettings",
    "load_config",
    "save_config",
    "load_key_bindings",
    "save_key_bindings",
    "load_theme_settings",
    "save_theme_settings",
]
