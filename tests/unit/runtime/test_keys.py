"""Tests for key dispatch onto session actions."""

from __future__ import annotations

import unittest
from unittest import mock

from notenav.runtime.keys import handle_key


class HandleKeyTests(unittest.TestCase):
    def test_quit_keys_stop_the_loop(self) -> None:
        for key in ("q", "ESC", "CTRL_C"):
            with self.subTest(key=key):
                self.assertFalse(handle_key(key, mock.Mock(), open_selected=mock.Mock()))

    def test_movement_and_tree_keys(self) -> None:
        cases = {
            "UP": ("move", (-1,)),
            "k": ("move", (-1,)),
            "DOWN": ("move", (1,)),
            "j": ("move", (1,)),
            "RIGHT": ("expand_selected", ()),
            "l": ("expand_selected", ()),
            "LEFT": ("collapse_selected", ()),
            "h": ("collapse_selected", ()),
            "r": ("reload", ()),
            "p": ("toggle_preview", ()),
        }
        for key, (method, args) in cases.items():
            with self.subTest(key=key):
                session = mock.Mock()
                self.assertTrue(handle_key(key, session, open_selected=mock.Mock()))
                getattr(session, method).assert_called_once_with(*args)

    def test_enter_opens_selection(self) -> None:
        for key in ("ENTER_CR", "ENTER_LF"):
            open_selected = mock.Mock()
            self.assertTrue(handle_key(key, mock.Mock(), open_selected=open_selected))
            open_selected.assert_called_once_with()

    def test_unknown_keys_are_ignored(self) -> None:
        session = mock.Mock()
        self.assertTrue(handle_key("UNKNOWN", session, open_selected=mock.Mock()))
        self.assertEqual(session.method_calls, [])


if __name__ == "__main__":
    unittest.main()
