"""Tree Builder: validate the notes root and materialize its first level."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

from ..errors import NotesRootNotADirectoryError, UnreadableError
from .guard import is_listable_dir, safe_path_within
from .scan import read_directory_nodes
from .types import Node

logger = logging.getLogger(__name__)


def build_tree(root: Path, search_term: str = "") -> Node:
    """Return the synthetic, always-expanded root node for ``root``.

    Raises ``FileNotFoundError`` (or another ``OSError``) when ``root`` cannot
    be stat'ed, ``NotesRootNotADirectoryError`` when it is not a directory, and
    ``UnreadableError`` when it cannot be listed.
    """
    root = Path(os.path.abspath(root))
    info = root.stat()
    if not stat.S_ISDIR(info.st_mode):
        raise NotesRootNotADirectoryError(f"notesdir must point to a directory: {root}")
    root_path = safe_path_within(root, root)
    if root_path is None or not is_listable_dir(root, root_path):
        raise UnreadableError(f"cannot read notesdir: {root}")

    children = read_directory_nodes(root_path, root, search_term)
    logger.info("loaded %d top-level entries from %s (search=%r)", len(children), root, search_term)
    return Node(
        name=root.name or str(root),
        path=root_path,
        is_dir=True,
        expanded=True,
        children=children,
        loaded=True,
    )


__all__ = ["build_tree"]
