"""Editor resolution and launch for opening notes.

Only bare command names from a fixed allowlist are accepted, and the binary
must be on ``PATH``. Launching temporarily leaves raw/alternate-screen TUI
mode and returns an error message string instead of raising.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path
from typing import Callable

from .errors import EditorError

logger = logging.getLogger(__name__)

ALLOWED_EDITORS = ("vim", "nvim", "vi", "nano", "hx", "emacs")
_FORBIDDEN_CHARS = frozenset(" /\t\\")


def resolve_editor(raw: str) -> str:
    """Validate the configured editor name and return its full binary path."""
    name = raw.strip()
    if not name or any(ch in _FORBIDDEN_CHARS for ch in name) or Path(name).name != name:
        raise EditorError(f"invalid editor: {name!r} (use a bare command name)")
    if name not in ALLOWED_EDITORS:
        raise EditorError(f"editor not allowed: {name!r} (allowed: {', '.join(ALLOWED_EDITORS)})")
    path = shutil.which(name)
    if path is None:
        raise EditorError(f"editor not found in PATH: {name!r}")
    return path


def launch_editor(
    target: Path,
    editor_path: str,
    disable_tui_mode: Callable[[], None],
    enable_tui_mode: Callable[[], None],
) -> str | None:
    """Run the editor on ``target`` with the terminal handed over until it exits."""
    logger.info("launching %s on %s", editor_path, target)
    disable_tui_mode()
    try:
        subprocess.run([editor_path, str(target)], check=False)
    except OSError as exc:
        logger.warning("editor launch failed: %s", exc)
        return f"Failed to launch editor: {exc}"
    finally:
        enable_tui_mode()
    return None


__all__ = ["ALLOWED_EDITORS", "resolve_editor", "launch_editor"]
