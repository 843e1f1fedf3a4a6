"""Sandbox checks that keep every tree path inside the notes root.

``safe_join_within`` is the primitive: normalize a relative candidate, join it
onto the root, resolve symlinks on both sides, and require containment.
Every read, listing, and editor-open goes through these helpers again; no
result is cached because the filesystem may change between calls.
"""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

from ..errors import PathEscapeError

logger = logging.getLogger(__name__)


def _is_parent_relative(rel: str) -> bool:
    """Return whether ``rel`` starts with a ``..`` path component."""
    return rel == os.pardir or rel.startswith(os.pardir + os.sep)


def _resolve_or_absolute(path: str) -> str:
    """Resolve symlinks strictly, falling back to a best-effort resolution.

    A dangling symlink still resolves to its target so a missing file behind
    an outside link cannot pass as an in-root path.
    """
    try:
        return os.path.realpath(path, strict=True)
    except OSError:
        return os.path.abspath(os.path.realpath(path))


def safe_join_within(base: str | os.PathLike[str], user_path: str | os.PathLike[str]) -> Path:
    """Join ``user_path`` onto ``base`` and return the resolved path inside it.

    Raises ``PathEscapeError`` when the candidate is absolute, climbs out with
    ``..``, or resolves (directly or through a symlink) outside ``base``.
    A candidate that does not exist yet resolves to its absolute joined path.
    """
    base_str = os.fspath(base)
    clean = os.path.normpath(os.fspath(user_path))
    if os.path.isabs(clean):
        raise PathEscapeError(f"absolute paths not allowed: {clean}")
    if _is_parent_relative(clean):
        raise PathEscapeError(f"path escapes base dir: {clean}")

    joined = os.path.join(base_str, clean)
    rel = os.path.relpath(joined, base_str)
    if _is_parent_relative(rel):
        raise PathEscapeError(f"path escapes base dir: {clean}")

    try:
        resolved_base = os.path.realpath(base_str, strict=True)
    except OSError as exc:
        raise PathEscapeError(f"cannot resolve base dir: {base_str}") from exc
    resolved_joined = _resolve_or_absolute(joined)

    if resolved_joined != resolved_base:
        base_with_sep = resolved_base.rstrip(os.sep) + os.sep
        joined_with_sep = resolved_joined.rstrip(os.sep) + os.sep
        if not joined_with_sep.startswith(base_with_sep):
            raise PathEscapeError(f"symlink escape detected: {clean}")
    return Path(resolved_joined)


def safe_path_within(root: str | os.PathLike[str], path: str | os.PathLike[str]) -> Path | None:
    """Return the verified absolute form of ``path`` under ``root`` or ``None``.

    ``path`` may be absolute; it is re-expressed relative to ``root`` (or to
    the resolved root, for paths that were already canonicalized) and then
    checked with ``safe_join_within``. Rejections are logged, never raised.
    """
    try:
        root_str = os.fspath(root)
        path_str = os.fspath(path)
        rel = os.path.relpath(path_str, root_str)
        if _is_parent_relative(rel):
            rel = os.path.relpath(path_str, os.path.realpath(root_str))
        return safe_join_within(root, rel)
    except (PathEscapeError, ValueError) as exc:
        logger.debug("rejected %s under %s: %s", path, root, exc)
        return None


def is_readable_file(root: str | os.PathLike[str], path: str | os.PathLike[str]) -> bool:
    """Return whether ``path`` is a regular file inside ``root`` that can be read.

    FIFOs and devices are refused before any open so the check never blocks.
    """
    safe = safe_path_within(root, path)
    if safe is None:
        return False
    try:
        if not stat.S_ISREG(os.stat(safe).st_mode):
            return False
        with safe.open("rb") as handle:
            handle.read(1)
    except OSError:
        return False
    return True


def is_listable_dir(root: str | os.PathLike[str], path: str | os.PathLike[str]) -> bool:
    """Return whether ``path`` is inside ``root`` and its entries can be listed."""
    safe = safe_path_within(root, path)
    if safe is None:
        return False
    try:
        with os.scandir(safe) as entries:
            next(entries, None)
    except OSError:
        return False
    return True


__all__ = [
    "safe_join_within",
    "safe_path_within",
    "is_readable_file",
    "is_listable_dir",
]
