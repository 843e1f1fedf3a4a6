"""Tests for CLI argument handling and non-interactive output."""

from __future__ import annotations

import io
import logging
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from notenav import cli


class CliMainTests(unittest.TestCase):
    def _run(self, argv: list[str]) -> str:
        out = io.StringIO()
        with mock.patch("sys.stdout", out):
            cli.main(argv)
        return out.getvalue()

    def test_print_mode_lists_whole_tree(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "sub").mkdir()
            (root / "sub" / "b.txt").write_text("plain\n", encoding="utf-8")
            (root / "a.md").write_text("# Alpha\n", encoding="utf-8")

            output = self._run(["--notesdir", str(root), "--print"])

        self.assertEqual(output, "▾ sub\n  • b.txt\n• Alpha\n")

    def test_search_term_filters_output(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "keep.md").write_text("needle\n", encoding="utf-8")
            (root / "drop.md").write_text("hay\n", encoding="utf-8")

            output = self._run(["needle", "--notesdir", str(root), "--print"])

        self.assertEqual(output, "• keep.md\n")

    def test_missing_notes_dir_is_fatal(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(SystemExit) as ctx:
                self._run(["--notesdir", str(Path(tmp) / "missing"), "--print"])
        self.assertIn("notenav:", str(ctx.exception.code))

    def test_file_notes_dir_is_fatal(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "file.md"
            path.write_text("x\n", encoding="utf-8")
            with self.assertRaises(SystemExit) as ctx:
                self._run(["--notesdir", str(path), "--print"])
        self.assertIn("notesdir must point to a directory", str(ctx.exception.code))

    def test_unknown_style_is_rejected(self) -> None:
        with mock.patch("sys.stderr", io.StringIO()):
            with self.assertRaises(SystemExit):
                cli.build_parser().parse_args(["--style", "no-such-style"])

    def test_unknown_theme_is_rejected(self) -> None:
        with mock.patch("sys.stderr", io.StringIO()):
            with self.assertRaises(SystemExit):
                cli.build_parser().parse_args(["--theme", "no-such-theme"])

    def test_theme_names_are_case_insensitive(self) -> None:
        args = cli.build_parser().parse_args(["--theme", "Ocean"])
        self.assertEqual(args.theme, "ocean")

    def test_log_file_receives_debug_records(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp) / "notes"
            root.mkdir()
            log_path = Path(tmp) / "notenav.log"
            package_logger = logging.getLogger("notenav")
            handlers_before = list(package_logger.handlers)
            level_before = package_logger.level
            try:
                self._run(["--notesdir", str(root), "--print", "--log-file", str(log_path)])
            finally:
                for handler in package_logger.handlers:
                    if handler not in handlers_before:
                        handler.close()
                package_logger.handlers = handlers_before
                package_logger.setLevel(level_before)
            self.assertIn("loaded 0 top-level entries", log_path.read_text(encoding="utf-8"))


if __name__ == "__main__":
    unittest.main()
