"""Flattened tree projection plus cursor and viewport bookkeeping.

``visible_entries`` is the only projection renderers and key handlers use.
It is rebuilt in full after every mutation rather than patched.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..note_tree import Node

HEADER_ROWS = 2
FOOTER_ROWS = 2
MAX_SCROLL_MARGIN = 2


@dataclass(frozen=True)
class VisibleEntry:
    """One on-screen row: a node and its nesting depth (root children are 0)."""

    node: Node
    depth: int


def _flatten(node: Node, depth: int, out: list[VisibleEntry]) -> None:
    out.append(VisibleEntry(node=node, depth=depth))
    if node.is_dir and node.expanded:
        for child in node.children:
            _flatten(child, depth + 1, out)


def visible_entries(root: Node | None) -> list[VisibleEntry]:
    """Pre-order projection of the root's children; the root itself never shows."""
    out: list[VisibleEntry] = []
    if root is None:
        return out
    for child in root.children:
        _flatten(child, 0, out)
    return out


def usable_rows(height: int) -> int:
    """Rows left for the list once header and footer chrome are removed."""
    return height - HEADER_ROWS - FOOTER_ROWS


def scroll_margin(usable: int) -> int:
    """Context rows kept around the cursor, shrunk for very small windows."""
    return max(0, min(MAX_SCROLL_MARGIN, (usable - 1) // 2))


def clamp_cursor(cursor: int, total: int) -> int:
    if total <= 0:
        return 0
    return max(0, min(cursor, total - 1))


def adjust_scroll(cursor: int, scroll: int, total: int, usable: int) -> int:
    """Return a window start that keeps ``cursor`` visible with soft margins.

    A non-positive ``usable`` means the whole sequence is the window.
    """
    if usable <= 0:
        return 0
    margin = scroll_margin(usable)
    if cursor < scroll + margin:
        scroll = max(0, cursor - margin)
    if cursor >= scroll + usable - margin:
        scroll = max(0, cursor - usable + margin + 1)
    return max(0, min(scroll, max(0, total - usable)))


@dataclass
class Navigator:
    """Cursor/scroll state over the current visible projection."""

    entries: list[VisibleEntry] = field(default_factory=list)
    cursor: int = 0
    scroll: int = 0
    width: int = 0
    height: int = 0

    @property
    def usable(self) -> int:
        return usable_rows(self.height)

    def recompute(self, root: Node | None) -> None:
        self.entries = visible_entries(root)
        self.cursor = clamp_cursor(self.cursor, len(self.entries))
        self._adjust()

    def reset(self) -> None:
        self.cursor = 0
        self.scroll = 0

    def move(self, delta: int) -> bool:
        """Move the cursor by ``delta``; stepping past either end is a no-op."""
        target = self.cursor + delta
        if target < 0 or target >= len(self.entries):
            return False
        self.cursor = target
        self._adjust()
        return True

    def resize(self, width: int, height: int) -> bool:
        if (width, height) == (self.width, self.height):
            return False
        self.width = width
        self.height = height
        self._adjust()
        return True

    def selected(self) -> VisibleEntry | None:
        if not self.entries:
            return None
        return self.entries[self.cursor]

    def window(self) -> list[tuple[int, VisibleEntry]]:
        """Return ``(index, entry)`` pairs currently inside the viewport."""
        usable = self.usable
        if usable <= 0:
            return list(enumerate(self.entries))
        end = min(len(self.entries), self.scroll + usable)
        return [(idx, self.entries[idx]) for idx in range(self.scroll, end)]

    def _adjust(self) -> None:
        self.scroll = adjust_scroll(self.cursor, self.scroll, len(self.entries), self.usable)


__all__ = [
    "HEADER_ROWS",
    "FOOTER_ROWS",
    "VisibleEntry",
    "Navigator",
    "visible_entries",
    "usable_rows",
    "scroll_margin",
    "clamp_cursor",
    "adjust_scroll",
]
