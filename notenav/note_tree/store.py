"""Node Store mutations: lazy expand, collapse, and whole-tree reload."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from .build import build_tree
from .scan import read_directory_nodes
from .types import Node

logger = logging.getLogger(__name__)


def expand(node: Node, root: Path, search_term: str = "") -> bool:
    """Expand a directory node, scanning its children on first use.

    Returns whether the node changed. Scanner errors propagate before any
    field is touched, so a failed expand leaves the node exactly as it was.
    """
    if not node.is_dir:
        return False
    if node.expanded and node.loaded:
        return False
    if not node.loaded:
        children = read_directory_nodes(node.path, root, search_term)
        node.children = children
        node.loaded = True
    node.expanded = True
    return True


def collapse(node: Node) -> bool:
    """Collapse a directory node while keeping its scanned children cached."""
    if not node.is_dir or not node.expanded:
        return False
    node.expanded = False
    return True


def expand_all(node: Node, root: Path, search_term: str = "") -> None:
    """Expand ``node`` and every directory below it.

    Subdirectories that fail to scan stay collapsed; the walk continues.
    """
    stack = [node]
    while stack:
        current = stack.pop()
        if not current.is_dir:
            continue
        try:
            expand(current, root, search_term)
        except OSError as exc:
            logger.debug("leaving %s collapsed: %s", current.path, exc)
            continue
        stack.extend(current.children)


class NoteTree:
    """Owns the current root node plus the parameters it was scanned with.

    ``resolve_root`` is consulted on every load so a reconfigured notes
    directory is picked up by the next reload.
    """

    def __init__(
        self,
        resolve_root: Callable[[], Path],
        search_term: str = "",
        builder: Callable[[Path, str], Node] = build_tree,
    ) -> None:
        self.resolve_root = resolve_root
        self.search_term = search_term
        self._builder = builder
        self.root_path: Path | None = None
        self.root: Node | None = None

    def load(self) -> Node:
        """Build a fresh tree and replace the current one only on success."""
        root_path = Path(self.resolve_root())
        root = self._builder(root_path, self.search_term)
        self.root_path = root_path
        self.root = root
        return root

    def reload(self) -> Node:
        """Discard the current tree and rebuild it from disk."""
        logger.info("reloading tree")
        return self.load()

    def expand(self, node: Node) -> bool:
        if self.root_path is None:
            return False
        return expand(node, self.root_path, self.search_term)

    def collapse(self, node: Node) -> bool:
        return collapse(node)

    def expand_all(self) -> None:
        if self.root is None or self.root_path is None:
            return
        expand_all(self.root, self.root_path, self.search_term)


__all__ = ["expand", "collapse", "expand_all", "NoteTree"]
