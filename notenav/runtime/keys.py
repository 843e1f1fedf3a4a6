"""Key dispatch for the tree view."""

from __future__ import annotations

from collections.abc import Callable

from .session import Session

QUIT_KEYS = frozenset({"q", "ESC", "CTRL_C"})
UP_KEYS = frozenset({"UP", "k"})
DOWN_KEYS = frozenset({"DOWN", "j"})
EXPAND_KEYS = frozenset({"RIGHT", "l"})
COLLAPSE_KEYS = frozenset({"LEFT", "h"})
OPEN_KEYS = frozenset({"ENTER_CR", "ENTER_LF"})


def handle_key(key: str, session: Session, *, open_selected: Callable[[], None]) -> bool:
    """Apply one key to ``session``; returns ``False`` when the user quits."""
    if key in QUIT_KEYS:
        return False
    if key in UP_KEYS:
        session.move(-1)
    elif key in DOWN_KEYS:
        session.move(1)
    elif key in EXPAND_KEYS:
        session.expand_selected()
    elif key in COLLAPSE_KEYS:
        session.collapse_selected()
    elif key in OPEN_KEYS:
        open_selected()
    elif key == "r":
        session.reload()
    elif key == "p":
        session.toggle_preview()
    return True


__all__ = ["handle_key"]
