"""Tests for the key/value config file and notes-root resolution."""

from __future__ import annotations

import os
import stat
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from notenav.runtime import config


class ConfigFileTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)
        self.config_path = self.tmp / "cfg" / "config"
        patcher = mock.patch("notenav.runtime.config.CONFIG_PATH", self.config_path)
        patcher.start()
        self.addCleanup(patcher.stop)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_ensure_config_creates_private_defaults(self) -> None:
        path = config.ensure_config()

        self.assertEqual(path, self.config_path)
        self.assertEqual(path.read_text(encoding="utf-8"), config.DEFAULT_CONFIG_TEXT)
        self.assertEqual(stat.S_IMODE(path.stat().st_mode), 0o600)

    def test_ensure_config_tightens_existing_permissions(self) -> None:
        self.config_path.parent.mkdir(parents=True)
        self.config_path.write_text("notesdir=/x\n", encoding="utf-8")
        os.chmod(self.config_path, 0o644)

        config.ensure_config()

        self.assertEqual(stat.S_IMODE(self.config_path.stat().st_mode), 0o600)
        self.assertEqual(self.config_path.read_text(encoding="utf-8"), "notesdir=/x\n")

    def test_parse_config_skips_comments_and_malformed_lines(self) -> None:
        parsed = config.parse_config(
            "# comment\n\nNotesDir = ~/n \nbogus line\neditor=nano\nempty=\n"
        )
        self.assertEqual(parsed, {"notesdir": "~/n", "editor": "nano", "empty": ""})

    def test_notes_root_prefers_override_then_config_then_default(self) -> None:
        home = self.tmp / "home"
        with mock.patch.object(Path, "home", return_value=home):
            self.assertEqual(config.notes_root(), home / "notes")

            self.config_path.write_text("notesdir=~/journal\n", encoding="utf-8")
            self.assertEqual(config.notes_root(), home / "journal")

            self.assertEqual(config.notes_root(str(self.tmp / "cli")), self.tmp / "cli")

    def test_configured_editor_defaults_to_vim(self) -> None:
        self.assertEqual(config.configured_editor(), "vim")
        self.config_path.write_text("editor=\n", encoding="utf-8")
        self.assertEqual(config.configured_editor(), "vim")
        self.config_path.write_text("editor=hx\n", encoding="utf-8")
        self.assertEqual(config.configured_editor(), "hx")


class ExpandTildeTests(unittest.TestCase):
    def test_only_leading_tilde_is_expanded(self) -> None:
        with mock.patch.object(Path, "home", return_value=Path("/home/u")):
            self.assertEqual(config.expand_tilde("~"), "/home/u")
            self.assertEqual(config.expand_tilde("~/notes"), "/home/u/notes")
            self.assertEqual(config.expand_tilde("~other/notes"), "~other/notes")
            self.assertEqual(config.expand_tilde("$HOME/notes"), "$HOME/notes")
            self.assertEqual(config.expand_tilde("/abs"), "/abs")


if __name__ == "__main__":
    unittest.main()
