"""Single-threaded event loop: resize polling, key reads, and redraws."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from ..editor import launch_editor
from ..input import read_key
from ..preview import DEFAULT_STYLE, preview_lines
from ..render import RenderContext, body_rows, list_widths, render_frame
from ..ui_theme import DEFAULT_THEME, UITheme
from .keys import handle_key
from .session import Session
from .terminal import TerminalController

logger = logging.getLogger(__name__)

KEY_POLL_MS = 200


def build_render_context(
    session: Session,
    theme: UITheme = DEFAULT_THEME,
    style: str = DEFAULT_STYLE,
    no_color: bool = False,
) -> RenderContext:
    """Snapshot the session into a ``RenderContext`` for one frame."""
    navigator = session.navigator
    window = navigator.window()
    preview: list[str] | None = None
    if session.show_preview:
        _tree_width, preview_width = list_widths(navigator.width, True)
        rows = body_rows(navigator.height, len(window))
        entry = session.selected()
        preview = []
        if entry is not None and not entry.node.is_dir and preview_width > 0:
            preview = preview_lines(
                Path(session.tree.resolve_root()),
                entry.node.path,
                rows,
                preview_width,
                style=style,
                no_color=no_color,
            )
    return RenderContext(
        window=window,
        cursor=navigator.cursor,
        width=navigator.width,
        height=navigator.height,
        status=session.status,
        search_term=session.search_term,
        theme=theme,
        preview=preview,
    )


def run_session(
    session: Session,
    terminal: TerminalController,
    stdin_fd: int,
    *,
    theme: UITheme = DEFAULT_THEME,
    style: str = DEFAULT_STYLE,
    no_color: bool = False,
) -> None:
    """Process resize and key events strictly one at a time until quit."""

    def open_selected() -> None:
        session.open_selected(
            lambda target, editor_path: launch_editor(
                target,
                editor_path,
                terminal.disable_tui_mode,
                terminal.enable_tui_mode,
            )
        )
        # The editor may leave the screen in any state.
        session.dirty = True

    with terminal.raw_mode():
        while True:
            term = shutil.get_terminal_size((80, 24))
            session.resize(term.columns, term.lines)
            if session.dirty:
                render_frame(build_render_context(session, theme, style, no_color), terminal.write)
                session.dirty = False

            key = read_key(stdin_fd, timeout_ms=KEY_POLL_MS)
            if not key:
                continue
            if not handle_key(key, session, open_selected=open_selected):
                logger.info("quit requested")
                return


__all__ = ["build_render_context", "run_session"]
