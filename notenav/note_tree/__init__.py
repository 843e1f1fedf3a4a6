"""Sandboxed, lazily expanded tree of note files.

This package contains the non-UI tree primitives:
- path guard helpers that keep every access inside the notes root
- one-level directory scanning with title extraction and search filtering
- tree building for first load and reload
- node mutations (expand/collapse) and the ``NoteTree`` owner
"""

from __future__ import annotations

from .build import build_tree
from .guard import is_listable_dir, is_readable_file, safe_join_within, safe_path_within
from .scan import NOTE_EXTENSIONS, NoteScan, heading_text, is_note_name, read_directory_nodes, scan_note
from .store import NoteTree, collapse, expand, expand_all
from .types import Node

__all__ = [
    "Node",
    "NOTE_EXTENSIONS",
    "NoteScan",
    "NoteTree",
    "build_tree",
    "collapse",
    "expand",
    "expand_all",
    "heading_text",
    "is_listable_dir",
    "is_note_name",
    "is_readable_file",
    "read_directory_nodes",
    "safe_join_within",
    "safe_path_within",
    "scan_note",
]
