"""Interactive session state and the actions key handlers invoke.

A ``Session`` ties the ``NoteTree`` to a ``Navigator`` and a status line.
It never touches the terminal; the event loop renders whatever it holds.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from pathlib import Path

from ..editor import resolve_editor
from ..errors import EditorError
from ..note_tree import NoteTree, is_readable_file, safe_path_within
from .config import configured_editor
from .navigation import Navigator, VisibleEntry

logger = logging.getLogger(__name__)

HELP_TEXT = "↑/↓ move • → expand • ← collapse • <enter> open • r reload • p preview • q quit"

EditorLauncher = Callable[[Path, str], "str | None"]


class Session:
    """Owns the loaded tree, the navigation state, and the footer status."""

    def __init__(
        self,
        tree: NoteTree,
        *,
        editor_name: Callable[[], str] = configured_editor,
        show_preview: bool = False,
    ) -> None:
        self.tree = tree
        self.navigator = Navigator()
        self.status = HELP_TEXT
        self.editor_name = editor_name
        self.show_preview = show_preview
        self.dirty = True

    @property
    def search_term(self) -> str:
        return self.tree.search_term

    def start(self) -> None:
        """Perform the initial load; failures propagate to the caller."""
        self.tree.load()
        self.navigator.reset()
        self.refresh()

    def refresh(self) -> None:
        """Rebuild the visible projection from the current tree."""
        self.navigator.recompute(self.tree.root)
        self.dirty = True

    def selected(self) -> VisibleEntry | None:
        return self.navigator.selected()

    def move(self, delta: int) -> bool:
        moved = self.navigator.move(delta)
        if moved:
            self.dirty = True
        return moved

    def resize(self, width: int, height: int) -> None:
        if self.navigator.resize(width, height):
            self.dirty = True

    def expand_selected(self) -> None:
        entry = self.selected()
        if entry is None or not entry.node.is_dir or entry.node.expanded:
            return
        try:
            self.tree.expand(entry.node)
        except OSError as exc:
            logger.warning("expand failed for %s: %s", entry.node.path, exc)
            self.status = f"error: {exc}"
            self.dirty = True
            return
        self.refresh()

    def collapse_selected(self) -> None:
        entry = self.selected()
        if entry is None or not entry.node.is_dir or not entry.node.expanded:
            return
        self.tree.collapse(entry.node)
        self.refresh()

    def toggle_preview(self) -> None:
        self.show_preview = not self.show_preview
        self.dirty = True

    def reload(self, status: str | None = None) -> bool:
        """Rebuild the tree from disk; on failure keep the previous tree."""
        try:
            self.tree.reload()
        except OSError as exc:
            logger.warning("reload failed: %s", exc)
            self.status = f"reload failed: {exc}"
            self.dirty = True
            return False
        self.navigator.reset()
        self.refresh()
        self.status = status if status is not None else "reloaded at " + time.strftime("%H:%M:%S")
        return True

    def open_target(self) -> Path | None:
        """Return a freshly verified path for the selected file, or ``None``.

        The check runs against the root as configured right now, not the root
        the tree was loaded from. Rejections read as an unreadable file.
        """
        entry = self.selected()
        if entry is None or entry.node.is_dir:
            return None
        root = self.tree.resolve_root()
        safe = safe_path_within(root, entry.node.path)
        if safe is None or not is_readable_file(root, safe):
            self.status = f"cannot open {entry.node.name}: not readable"
            self.dirty = True
            return None
        return safe

    def open_selected(self, launch: EditorLauncher) -> bool:
        """Open the selected file in the configured editor, then reload.

        Returns whether the editor was launched.
        """
        entry = self.selected()
        if entry is None or entry.node.is_dir:
            return False
        try:
            editor_path = resolve_editor(self.editor_name())
        except EditorError as exc:
            self.status = f"editor error: {exc}"
            self.dirty = True
            return False
        target = self.open_target()
        if target is None:
            return False
        error = launch(target, editor_path)
        self.on_editor_exit(error)
        return True

    def on_editor_exit(self, error: str | None) -> None:
        """Handle the resume after the editor returns the terminal."""
        if self.reload(status=HELP_TEXT) and error:
            self.status = error


__all__ = ["HELP_TEXT", "Session"]
