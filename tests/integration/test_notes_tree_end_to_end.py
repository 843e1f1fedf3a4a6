"""End-to-end checks: load, expand, scroll, and reload against a real tree."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path

from notenav.note_tree import NoteTree, safe_path_within
from notenav.render import format_tree_text
from notenav.runtime.loop import build_render_context
from notenav.runtime.session import Session


class EndToEndTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.base = Path(self._tmp.name).resolve()
        self.root = self.base / "notes"
        (self.root / "sub").mkdir(parents=True)
        (self.root / "a.md").write_text("# A\nbody\n", encoding="utf-8")
        (self.root / "sub" / "b.txt").write_text("no heading\n", encoding="utf-8")

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _session(self, search_term: str = "") -> Session:
        session = Session(NoteTree(lambda: self.root, search_term=search_term))
        session.start()
        session.resize(80, 24)
        return session

    def _rows(self, session: Session) -> list[tuple[str, int]]:
        return [(entry.node.name, entry.depth) for entry in session.navigator.entries]

    def test_directories_first_then_lazy_expansion(self) -> None:
        session = self._session()
        self.assertEqual(self._rows(session), [("sub", 0), ("a.md", 0)])

        session.expand_selected()

        self.assertEqual(self._rows(session), [("sub", 0), ("b.txt", 1), ("a.md", 0)])
        self.assertEqual(format_tree_text(session.navigator.entries), "▾ sub\n  • b.txt\n• A\n")

    def test_search_prefilters_and_preexpands(self) -> None:
        (self.root / "sub" / "deeper").mkdir()
        (self.root / "sub" / "deeper" / "hit.md").write_text("# Hit\nthe token\n", encoding="utf-8")
        (self.root / "empty").mkdir()
        (self.root / "empty" / "miss.md").write_text("nothing\n", encoding="utf-8")

        session = self._session("TOKEN")

        self.assertEqual(self._rows(session), [("sub", 0), ("deeper", 1), ("hit.md", 2)])

    def test_outside_symlinks_never_appear(self) -> None:
        outside = self.base / "outside"
        outside.mkdir()
        (outside / "leak.md").write_text("# Leak\n", encoding="utf-8")
        os.symlink(outside / "leak.md", self.root / "sub" / "leak.md")
        os.symlink(outside, self.root / "escape")

        session = self._session()
        session.expand_selected()

        names = [name for name, _depth in self._rows(session)]
        self.assertNotIn("leak.md", names)
        self.assertNotIn("escape", names)
        for entry in session.navigator.entries:
            self.assertIsNotNone(safe_path_within(self.root, entry.node.path))

    def test_reload_after_scrolling_returns_to_top(self) -> None:
        for idx in range(40):
            (self.root / f"note{idx:02d}.md").write_text(f"# Note {idx}\n", encoding="utf-8")
        session = self._session()
        for _ in range(35):
            session.move(1)
        self.assertGreater(session.navigator.scroll, 0)

        session.reload()

        self.assertEqual(session.navigator.cursor, 0)
        self.assertEqual(session.navigator.scroll, 0)
        context = build_render_context(session)
        self.assertEqual(context.window[0][0], 0)

    def test_render_context_includes_preview_for_selected_file(self) -> None:
        session = self._session()
        session.move(1)
        session.toggle_preview()

        context = build_render_context(session, no_color=True)

        self.assertEqual(list(context.preview or [])[:2], ["# A", "body"])


if __name__ == "__main__":
    unittest.main()
