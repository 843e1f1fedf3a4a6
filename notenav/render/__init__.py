"""Screen composition for the tree view, footer, and optional preview pane.

Frame building is pure (``build_frame`` returns rows); ``render_frame`` is
the only function that writes to the terminal.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from ..ansi import clip_ansi_line, display_width, sanitize_terminal_text
from ..runtime.navigation import VisibleEntry, usable_rows
from ..ui_theme import DEFAULT_THEME, UITheme

APP_TITLE = "notenav - Notes Navigator"
INDENT = "  "
MARKER_EXPANDED = "▾ "
MARKER_COLLAPSED = "▸ "
MARKER_FILE = "• "
PREVIEW_DIVIDER = " │ "


def row_marker(entry: VisibleEntry) -> str:
    if entry.node.is_dir:
        return MARKER_EXPANDED if entry.node.expanded else MARKER_COLLAPSED
    return MARKER_FILE


def row_text(entry: VisibleEntry) -> str:
    """Plain row: depth indent, marker glyph, then title or name."""
    label = sanitize_terminal_text(entry.node.display_name()).replace("\n", " ")
    return INDENT * entry.depth + row_marker(entry) + label


def format_row(entry: VisibleEntry, theme: UITheme = DEFAULT_THEME, selected: bool = False) -> str:
    """Styled row; the selected row is drawn in reverse video without colors."""
    if selected:
        return f"{theme.reverse}{row_text(entry)}{theme.reset}"
    node = entry.node
    label = sanitize_terminal_text(node.display_name()).replace("\n", " ")
    if node.is_dir:
        color = theme.tree_dir
    elif node.title.strip():
        color = theme.tree_title
    else:
        color = theme.tree_file
    marker = row_marker(entry)
    return f"{INDENT * entry.depth}{theme.tree_marker}{marker}{theme.reset}{color}{label}{theme.reset}"


@dataclass(frozen=True)
class RenderContext:
    """Everything one frame needs; produced by the event loop from the session."""

    window: Sequence[tuple[int, VisibleEntry]]
    cursor: int
    width: int
    height: int
    status: str
    search_term: str = ""
    theme: UITheme = DEFAULT_THEME
    preview: Sequence[str] | None = None


def header_line(search_term: str, theme: UITheme = DEFAULT_THEME) -> str:
    line = f"{theme.title}{APP_TITLE}{theme.reset}"
    if search_term:
        term = sanitize_terminal_text(search_term)
        line += f"  search: {theme.search_term}{term}{theme.reset}"
    return line


def list_widths(width: int, with_preview: bool) -> tuple[int, int]:
    """Return ``(tree_width, preview_width)`` for the current terminal width."""
    if not with_preview or width < 20:
        return width, 0
    tree_width = max(1, width // 2)
    return tree_width, max(0, width - tree_width - len(PREVIEW_DIVIDER))


def body_rows(height: int, entry_count: int) -> int:
    """Rows available for the list; a non-positive usable height shows everything."""
    usable = usable_rows(height)
    return usable if usable > 0 else entry_count


def build_frame(context: RenderContext) -> list[str]:
    """Return every screen row for ``context`` (header, body, footer)."""
    theme = context.theme
    width = context.width if context.width > 0 else 10_000
    with_preview = context.preview is not None
    tree_width, preview_width = list_widths(width, with_preview)

    rows = [clip_ansi_line(header_line(context.search_term, theme), width), ""]
    body_count = body_rows(context.height, len(context.window))
    preview = list(context.preview or ())
    for offset in range(body_count):
        if offset < len(context.window):
            idx, entry = context.window[offset]
            left = clip_ansi_line(format_row(entry, theme, selected=idx == context.cursor), tree_width)
            if idx == context.cursor:
                left += theme.reset
        else:
            left = ""
        if with_preview and preview_width > 0:
            pad = " " * max(0, tree_width - display_width(left))
            right = preview[offset] if offset < len(preview) else ""
            left = f"{left}{pad}{theme.divider}{PREVIEW_DIVIDER}{theme.reset}{right}{theme.reset}"
        rows.append(left)

    rows.append("")
    rows.append(clip_ansi_line(f"{theme.status}{sanitize_terminal_text(context.status)}{theme.reset}", width) + theme.reset)
    return rows


def render_frame(context: RenderContext, write: Callable[[str], None]) -> None:
    """Draw one frame from the top-left corner, clearing leftovers."""
    rows = build_frame(context)
    out = ["\033[H"]
    for idx, row in enumerate(rows):
        out.append(row)
        out.append("\033[K")
        if idx < len(rows) - 1:
            out.append("\r\n")
    out.append("\033[J")
    write("".join(out))


def format_tree_text(entries: Sequence[VisibleEntry]) -> str:
    """Plain multi-line rendition of ``entries`` for non-interactive output."""
    return "".join(row_text(entry) + "\n" for entry in entries)


__all__ = [
    "APP_TITLE",
    "RenderContext",
    "row_text",
    "format_row",
    "header_line",
    "list_widths",
    "body_rows",
    "build_frame",
    "render_frame",
    "format_tree_text",
]
