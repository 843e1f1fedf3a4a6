"""Read-only preview of the selected note, highlighted with Pygments.

The file is re-checked against the notes root right before it is opened.
Rejections and read failures both render as an unreadable placeholder.
"""

from __future__ import annotations

import itertools
import logging
import os
import stat
from pathlib import Path

from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import MarkdownLexer, TextLexer
from pygments.styles import get_all_styles
from pygments.util import ClassNotFound

from .ansi import clip_ansi_line, sanitize_terminal_text
from .note_tree import safe_path_within

logger = logging.getLogger(__name__)

DEFAULT_STYLE = "monokai"
PREVIEW_MAX_LINE_CHARS = 4_096
UNREADABLE_PLACEHOLDER = "(unreadable)"

_FORMATTERS: dict[str, Terminal256Formatter] = {}


def available_styles() -> list[str]:
    return sorted(get_all_styles())


def _formatter_for(style: str) -> Terminal256Formatter:
    formatter = _FORMATTERS.get(style)
    if formatter is None:
        try:
            formatter = Terminal256Formatter(style=style)
        except ClassNotFound:
            formatter = Terminal256Formatter(style=DEFAULT_STYLE)
        _FORMATTERS[style] = formatter
    return formatter


def read_preview_text(root: Path, path: Path, max_lines: int) -> str | None:
    """Return up to ``max_lines`` lines of ``path`` or ``None`` when unreadable."""
    safe = safe_path_within(root, path)
    if safe is None:
        return None
    try:
        if not stat.S_ISREG(os.stat(safe).st_mode):
            return None
        with safe.open("r", encoding="utf-8-sig", errors="replace") as handle:
            lines = [line[:PREVIEW_MAX_LINE_CHARS] for line in itertools.islice(handle, max(0, max_lines))]
    except OSError as exc:
        logger.debug("preview read failed for %s: %s", safe, exc)
        return None
    return "".join(line if line.endswith("\n") else line + "\n" for line in lines)


def highlight_preview(text: str, path: Path, style: str = DEFAULT_STYLE, no_color: bool = False) -> str:
    """Sanitize ``text`` and, unless ``no_color``, apply Markdown/text highlighting."""
    safe_text = sanitize_terminal_text(text)
    if no_color:
        return safe_text
    lexer_cls = MarkdownLexer if path.suffix.lower() == ".md" else TextLexer
    lexer = lexer_cls(stripnl=False, ensurenl=True)
    return highlight(safe_text, lexer, _formatter_for(style))


def preview_lines(
    root: Path,
    path: Path,
    max_lines: int,
    width: int,
    style: str = DEFAULT_STYLE,
    no_color: bool = False,
) -> list[str]:
    """Return clipped, styled preview rows for ``path`` (at most ``max_lines``)."""
    if max_lines <= 0 or width <= 0:
        return []
    text = read_preview_text(root, path, max_lines)
    if text is None:
        return [clip_ansi_line(UNREADABLE_PLACEHOLDER, width)]
    rendered = highlight_preview(text, path, style=style, no_color=no_color)
    rows = rendered.splitlines()[:max_lines]
    return [clip_ansi_line(row, width) for row in rows]


__all__ = [
    "DEFAULT_STYLE",
    "UNREADABLE_PLACEHOLDER",
    "available_styles",
    "read_preview_text",
    "highlight_preview",
    "preview_lines",
]
