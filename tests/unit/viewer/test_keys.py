"""Tests for raw key decoding and key dispatch."""

from __future__ import annotations

import os
import unittest

from labeljump.viewer import keys
from labeljump.viewer.keys import KeyComboBinding, KeyComboRegistry, is_text_key, read_key


class ReadKeyTests(unittest.TestCase):
    def setUp(self) -> None:
        keys._PENDING_BYTES.clear()
        self.read_fd, self.write_fd = os.pipe()

    def tearDown(self) -> None:
        keys._PENDING_BYTES.clear()
        os.close(self.read_fd)
        if self.write_fd is not None:
            os.close(self.write_fd)

    def _feed(self, data: bytes) -> None:
        os.write(self.write_fd, data)

    def test_printable_and_control_keys(self) -> None:
        self._feed(b"a\r\x7f\x15\x03")
        self.assertEqual(
            [read_key(self.read_fd) for _ in range(5)],
            ["a", "ENTER", "BACKSPACE", "CTRL_U", "CTRL_C"],
        )

    def test_arrow_and_page_keys(self) -> None:
        self._feed(b"\x1b[A\x1b[B\x1b[5~\x1b[6~")
        self.assertEqual(
            [read_key(self.read_fd) for _ in range(4)],
            ["UP", "DOWN", "PAGE_UP", "PAGE_DOWN"],
        )

    def test_unbound_sequences_are_consumed_whole(self) -> None:
        self._feed(b"\x1b[3~a\x1b[1;2Ab\x1b[15~c\x1bOPd")
        self.assertEqual(
            [read_key(self.read_fd) for _ in range(8)],
            ["UNKNOWN", "a", "UNKNOWN", "b", "UNKNOWN", "c", "UNKNOWN", "d"],
        )

    def test_tilde_home_and_end(self) -> None:
        self._feed(b"\x1b[1~\x1b[4~\x1bOH")
        self.assertEqual([read_key(self.read_fd) for _ in range(3)], ["HOME", "END", "HOME"])

    def test_tab_token(self) -> None:
        self._feed(b"\t")
        self.assertEqual(read_key(self.read_fd), "TAB")

    def test_multibyte_character(self) -> None:
        self._feed("é".encode("utf-8"))
        self.assertEqual(read_key(self.read_fd), "é")

    def test_lone_escape_and_pending_byte(self) -> None:
        self._feed(b"\x1bx")
        self.assertEqual(read_key(self.read_fd), "ESC")
        self.assertEqual(read_key(self.read_fd), "x")

    def test_escape_without_followup_times_out(self) -> None:
        self._feed(b"\x1b")
        self.assertEqual(read_key(self.read_fd), "ESC")

    def test_timeout_and_eof_return_empty(self) -> None:
        self.assertEqual(read_key(self.read_fd, timeout_ms=1), "")
        os.close(self.write_fd)
        self.write_fd = None
        self.assertEqual(read_key(self.read_fd), "")


class KeyDispatchTests(unittest.TestCase):
    def test_dispatch_reports_whether_bound(self) -> None:
        hits: list[str] = []
        registry = KeyComboRegistry().register_bindings(
            KeyComboBinding(("ESC", "CTRL_C"), lambda: hits.append("cancel")),
        )
        self.assertTrue(registry.dispatch("CTRL_C"))
        self.assertFalse(registry.dispatch("x"))
        self.assertEqual(hits, ["cancel"])

    def test_is_text_key(self) -> None:
        self.assertTrue(is_text_key("a"))
        self.assertTrue(is_text_key("A"))
        self.assertFalse(is_text_key("UP"))
        self.assertFalse(is_text_key("\x00"))


if __name__ == "__main__":
    unittest.main()
