"""One-level directory scanning with note filtering and title extraction."""

from __future__ import annotations

import logging
import os
import re
import stat
from dataclasses import dataclass
from pathlib import Path

from ..errors import ScanFailureError, UnreadableError
from .guard import is_listable_dir, safe_path_within
from .types import Node

logger = logging.getLogger(__name__)

NOTE_EXTENSIONS = frozenset({".md", ".txt"})

# Applied to a stripped line: one to six hashes, optional space, heading text.
_HEADING_RE = re.compile(r"#{1,6}\s*(.+)")


@dataclass(frozen=True)
class NoteScan:
    """Result of the single pass over a note file."""

    title: str
    matched: bool


def is_note_name(name: str) -> bool:
    """Return whether ``name`` carries one of the note extensions."""
    return Path(name).suffix.lower() in NOTE_EXTENSIONS


def heading_text(line: str) -> str | None:
    """Return the trimmed heading text of a Markdown heading line, else ``None``."""
    match = _HEADING_RE.fullmatch(line.strip())
    if match is None:
        return None
    return match.group(1).strip()


def scan_note(path: Path, search_term: str = "") -> NoteScan:
    """Extract the first heading and test for ``search_term`` in one pass.

    Lines are streamed without a length cap. Reading stops once the title is
    known and the term (when given) has matched. ``OSError`` propagates.
    """
    folded_term = search_term.casefold()
    title: str | None = None
    matched = not folded_term
    with path.open("r", encoding="utf-8-sig", errors="replace") as handle:
        for line in handle:
            if title is None:
                title = heading_text(line)
            if not matched and folded_term in line.casefold():
                matched = True
            if title is not None and matched:
                break
    return NoteScan(title=title or "", matched=matched)


def _list_entries(directory: Path) -> list[tuple[os.DirEntry[str], bool]]:
    """List ``directory`` entries paired with an lstat-based directory flag."""
    try:
        scanner = os.scandir(directory)
    except FileNotFoundError:
        raise
    except OSError as exc:
        raise UnreadableError(f"cannot read directory: {directory}") from exc

    entries: list[tuple[os.DirEntry[str], bool]] = []
    try:
        with scanner:
            for entry in scanner:
                try:
                    st = entry.stat(follow_symlinks=False)
                except OSError:
                    logger.debug("skipping unstat-able entry %s", entry.path)
                    continue
                entries.append((entry, stat.S_ISDIR(st.st_mode)))
    except OSError as exc:
        raise ScanFailureError(f"scan failed in {directory}: {exc}") from exc

    entries.sort(key=lambda item: (not item[1], item[0].name.lower()))
    return entries


def _directory_node(root: Path, name: str, path: Path, search_term: str) -> Node | None:
    if not is_listable_dir(root, path):
        logger.debug("skipping unreadable directory %s", path)
        return None
    node = Node(name=name, path=path, is_dir=True)
    if not search_term:
        return node

    try:
        children = read_directory_nodes(path, root, search_term)
    except OSError as exc:
        logger.debug("skipping directory %s during search: %s", path, exc)
        return None
    if not children:
        return None
    node.children = children
    node.loaded = True
    node.expanded = True
    return node


def _file_node(name: str, path: Path, search_term: str) -> Node | None:
    try:
        if not stat.S_ISREG(os.stat(path).st_mode):
            return None
        scanned = scan_note(path, search_term)
    except OSError as exc:
        logger.debug("skipping unreadable file %s: %s", path, exc)
        return None
    if not scanned.matched:
        return None
    return Node(name=name, path=path, is_dir=False, title=scanned.title)


def read_directory_nodes(directory: Path, root: Path, search_term: str = "") -> list[Node]:
    """Return the child nodes of ``directory`` ordered directories-first.

    Every child is checked against ``root`` before it is listed or opened.
    Unreadable or escaping entries are omitted. With a ``search_term``,
    subdirectories are scanned recursively, dropped when nothing inside
    matches, and otherwise returned pre-expanded.

    Raises ``UnreadableError`` when ``directory`` itself cannot be listed (or
    lies outside ``root``), ``FileNotFoundError`` when it is missing, and
    ``ScanFailureError`` for I/O errors while iterating it.
    """
    safe_directory = safe_path_within(root, directory)
    if safe_directory is None:
        raise UnreadableError(f"cannot read directory: {directory}")

    nodes: list[Node] = []
    for entry, is_dir in _list_entries(safe_directory):
        name = entry.name
        if not is_dir and not is_note_name(name):
            continue
        safe_child = safe_path_within(root, safe_directory / name)
        if safe_child is None:
            continue
        if is_dir:
            node = _directory_node(root, name, safe_child, search_term)
        else:
            node = _file_node(name, safe_child, search_term)
        if node is not None:
            nodes.append(node)
    return nodes


__all__ = [
    "NOTE_EXTENSIONS",
    "NoteScan",
    "is_note_name",
    "heading_text",
    "scan_note",
    "read_directory_nodes",
]
