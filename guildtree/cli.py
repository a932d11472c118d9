"""Command-line front door for guildtree.

Loads a directory snapshot, builds the guilds tree, optionally replays a
sequence of key presses through the tree cursor, and prints the result.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import LOG_PATH, load_key_bindings, load_theme_settings
from .directory import SnapshotError, load_snapshot
from .navigation import TreeCursor
from .node_model import GuildRef, NodeKind
from .render import render_tree
from .selection import ConversationDeps, SelectionController
from .tree_build import build_guilds_tree
from .ui_theme import available_theme_names, resolve_theme

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(threadName)s | %(name)s : %(message)s"


def configure_logging(log_file: Path, level: str) -> None:
    """Send log records to ``log_file`` so they never mix with tree output."""
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
    except OSError:
        handler = logging.StreamHandler(sys.stderr)
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=[handler],
        force=True,
    )


class ConversationLog:
    """Records conversation collaborator calls for printing after the run."""

    def __init__(self) -> None:
        self.title: str | None = None
        self.focus: str | None = None

    def deps(self) -> ConversationDeps:
        return ConversationDeps(
            display_conversation=self._display,
            reset_conversation=self._reset,
            reset_composition=lambda: None,
            request_focus=self._focus,
        )

    def _display(self, _channel_id: int, title: str) -> None:
        self.title = title

    def _reset(self) -> None:
        self.title = None
        self.focus = None

    def _focus(self, surface: str) -> None:
        self.focus = surface


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments, build the tree from a snapshot, and print it."""
    parser = argparse.ArgumentParser(description="Render the guilds/channels navigation tree from a JSON snapshot.")
    parser.add_argument("snapshot", help="Path to a directory snapshot (JSON).")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--no-graphics", action="store_true", help="Indent with spaces instead of tree lines.")
    parser.add_argument("--expand-all", action="store_true", help="Populate every guild and the Direct Messages root.")
    parser.add_argument(
        "--keys",
        default="",
        help="Space-separated key names to replay through the tree cursor before printing.",
    )
    parser.add_argument("--log-file", type=Path, default=LOG_PATH, help="Log file path.")
    parser.add_argument("--log-level", default="INFO", help="Logging level (DEBUG, INFO, WARNING, ...).")
    args = parser.parse_args(argv)

    configure_logging(args.log_file, args.log_level)

    try:
        directory = load_snapshot(Path(args.snapshot))
    except SnapshotError as exc:
        raise SystemExit(str(exc)) from exc

    settings = load_theme_settings()
    theme = resolve_theme(args.theme or settings.name, no_color=args.no_color)
    root = build_guilds_tree(
        directory.folders,
        directory.guild_by_id,
        known_guilds=directory.guilds,
        auto_expand_folders=settings.auto_expand_folders,
    )

    conversation = ConversationLog()
    controller = SelectionController(root, directory.service(), conversation.deps())

    if args.expand_all:
        for node in list(root.children):
            targets = node.children if node.kind == NodeKind.FOLDER else [node]
            for target in targets:
                if isinstance(target.reference, GuildRef) or target.kind == NodeKind.PRIVATE_ROOT:
                    controller.activate(target)

    cursor = TreeCursor(root, controller.activate, load_key_bindings())
    for key in args.keys.split():
        cursor.handle_key(key)

    sys.stdout.write(
        render_tree(
            root,
            theme=theme,
            graphics=settings.graphics and not args.no_graphics,
            selected_idx=cursor.selected_idx if args.keys else None,
            active_channel_id=controller.selected_channel_id,
        )
        + "\n"
    )
    if conversation.title is not None:
        sys.stdout.write(f"conversation: {conversation.title}\n")


if __name__ == "__main__":
    main()
