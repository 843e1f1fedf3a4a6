"""Command-line front door for notenav.

Parses CLI options, resolves the notes root, and performs the initial load.
Then either prints the tree or dispatches into the interactive runtime.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .note_tree import NoteTree
from .preview import DEFAULT_STYLE, available_styles
from .render import format_tree_text
from .runtime.config import notes_root
from .runtime.navigation import visible_entries
from .runtime.session import Session
from .ui_theme import available_theme_names, resolve_theme

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _style_name(value: str) -> str:
    """argparse type for Pygments style names."""
    if value not in available_styles():
        raise argparse.ArgumentTypeError(f"unknown style: {value!r}")
    return value


def _theme_name(value: str) -> str:
    """argparse type for UI theme names."""
    name = value.strip().lower()
    if name not in available_theme_names():
        raise argparse.ArgumentTypeError(f"unknown theme: {value!r}")
    return name


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="notenav",
        description="Browse Markdown and text notes as a collapsible tree and open them in an editor.",
    )
    parser.add_argument("search", nargs="?", default="", help="Only show notes containing this text.")
    parser.add_argument("--notesdir", default=None, help="Notes directory (overrides the config file).")
    parser.add_argument("--style", type=_style_name, default=DEFAULT_STYLE, help="Pygments style for the preview pane.")
    parser.add_argument(
        "--theme",
        type=_theme_name,
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--preview", action="store_true", help="Start with the preview pane open.")
    parser.add_argument("--print", dest="print_tree", action="store_true", help="Print the whole tree and exit.")
    parser.add_argument("--log-file", default=None, help="Write debug logs to this file.")
    return parser


def configure_logging(log_file: str | None) -> None:
    """Attach a DEBUG file handler; the terminal belongs to the TUI."""
    if not log_file:
        return
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger = logging.getLogger("notenav")
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and run notenav.

    Initial load failures are fatal and exit with a ``notenav:`` message.
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.log_file)

    notesdir = args.notesdir

    def resolve_root() -> Path:
        return notes_root(notesdir)

    tree = NoteTree(resolve_root, search_term=args.search.strip())
    session = Session(tree, show_preview=args.preview)
    try:
        session.start()
    except OSError as exc:
        raise SystemExit(f"notenav: {exc}") from exc

    if args.print_tree or not sys.stdin.isatty() or not sys.stdout.isatty():
        tree.expand_all()
        sys.stdout.write(format_tree_text(visible_entries(tree.root)))
        return

    from .runtime.loop import run_session
    from .runtime.terminal import TerminalController

    stdin_fd = sys.stdin.fileno()
    terminal = TerminalController(stdin_fd, sys.stdout.fileno())
    run_session(
        session,
        terminal,
        stdin_fd,
        theme=resolve_theme(args.theme, no_color=args.no_color),
        style=args.style,
        no_color=args.no_color,
    )


if __name__ == "__main__":
    main()
