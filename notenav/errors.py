"""Error taxonomy for tree loading, sandbox checks, and editor resolution.

Classes also derive from the matching built-in ``OSError`` subclass so callers
that only care about "could not read this" can catch the built-in type.
``NotFound`` conditions use the built-in ``FileNotFoundError`` unchanged.
"""

from __future__ import annotations


class NoteTreeError(Exception):
    """Base class for notenav failures."""


class PathEscapeError(NoteTreeError, PermissionError):
    """Candidate path resolves outside the notes root."""


class NotesRootNotADirectoryError(NoteTreeError, NotADirectoryError):
    """Notes root exists but is not a directory."""


class UnreadableError(NoteTreeError, PermissionError):
    """Directory cannot be listed or file cannot be opened."""


class ScanFailureError(NoteTreeError, OSError):
    """Generic I/O failure while a directory scan was in progress."""


class EditorError(NoteTreeError):
    """Configured editor is invalid, not allowed, or not installed."""


__all__ = [
    "NoteTreeError",
    "PathEscapeError",
    "NotesRootNotADirectoryError",
    "UnreadableError",
    "ScanFailureError",
    "EditorError",
]
