"""Tests for the viewer document acting as a jump host.

Covers span construction over the viewport and folds, offset resolution,
scrolling, and cursor/selection updates.
"""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from labeljump.jump.host import RenderedLabel
from labeljump.jump.matching import Span
from labeljump.viewer.document import TextDocument, TextPosition, lower_preserving_offsets


def _numbered(count: int) -> str:
    return "".join(f"line {idx}\n" for idx in range(count))


class SpanTests(unittest.TestCase):
    def test_viewport_is_one_lowercased_span(self) -> None:
        document = TextDocument("Hello World\nFOO\nbar\n", height=10)
        self.assertEqual(document.lines, ["Hello World", "FOO", "bar"])
        self.assertEqual(document.visible_spans(), [Span(0, "hello world\nfoo\nbar")])

    def test_viewport_limits_span_text(self) -> None:
        document = TextDocument(_numbered(10), height=2, top=3)
        self.assertEqual(document.visible_spans(), [Span(0, "line 3\nline 4")])

    def test_folds_split_spans(self) -> None:
        document = TextDocument(_numbered(6), height=10)
        document.fold(1, 3)

        self.assertEqual(document.visible_lines(), [0, 1, 4, 5])
        self.assertEqual(
            document.visible_spans(),
            [Span(0, "line 0\nline 1"), Span(1, "line 4\nline 5")],
        )

    def test_overlapping_folds_merge(self) -> None:
        document = TextDocument(_numbered(10), height=20)
        document.fold(1, 3)
        document.fold(2, 6)
        self.assertEqual(document.folds, [(1, 6)])

    def test_resolve_maps_offsets_to_lines(self) -> None:
        document = TextDocument("abc\nde\nfgh\n", height=10)
        document.fold(1, 2)
        spans = document.visible_spans()

        self.assertEqual(len(spans), 1)
        self.assertEqual(document.resolve(0, 0), TextPosition(0, 0))
        self.assertEqual(document.resolve(0, 5), TextPosition(1, 1))
        self.assertEqual(document.resolve(0, 6), TextPosition(1, 2))

    def test_resolve_second_span(self) -> None:
        document = TextDocument(_numbered(6), height=10)
        document.fold(1, 3)
        document.visible_spans()

        self.assertEqual(document.resolve(1, 0), TextPosition(4, 0))
        self.assertEqual(document.resolve(1, 9), TextPosition(5, 2))

    def test_lowercasing_keeps_offsets(self) -> None:
        self.assertEqual(lower_preserving_offsets("ABC"), "abc")
        self.assertEqual(lower_preserving_offsets("İX"), "İx")


class ScrollTests(unittest.TestCase):
    def test_scroll_by_clamps(self) -> None:
        document = TextDocument(_numbered(10), height=4)
        self.assertTrue(document.scroll_by(3))
        self.assertEqual(document.top, 3)
        self.assertTrue(document.scroll_by(100))
        self.assertEqual(document.top, 6)
        self.assertFalse(document.scroll_by(1))
        document.scroll_by(-100)
        self.assertEqual(document.top, 0)

    def test_scroll_skips_folded_lines(self) -> None:
        document = TextDocument(_numbered(10), height=3)
        document.fold(0, 4)
        document.scroll_by(1)
        self.assertEqual(document.top, 5)

    def test_scroll_to_moves_out_of_fold_body(self) -> None:
        document = TextDocument(_numbered(10), height=3)
        document.fold(2, 5)
        document.scroll_to(4)
        self.assertEqual(document.top, 2)


class CursorTests(unittest.TestCase):
    def test_primary_cursor_clears_selection(self) -> None:
        document = TextDocument("abc\n")
        document.set_selection(TextPosition(0, 0), TextPosition(0, 2))
        document.set_primary_cursor(TextPosition(0, 1))
        self.assertEqual(document.cursors, [TextPosition(0, 1)])
        self.assertIsNone(document.selection_range())

    def test_selection_anchor_and_range(self) -> None:
        document = TextDocument("abc\ndef\n")
        document.set_primary_cursor(TextPosition(1, 2))
        anchor = document.current_selection_anchor()
        document.set_selection(anchor, TextPosition(0, 1))

        self.assertEqual(document.current_selection_anchor(), TextPosition(1, 2))
        self.assertEqual(document.selection_range(), (TextPosition(0, 1), TextPosition(1, 2)))

    def test_replace_cursors_sorts_and_dedupes(self) -> None:
        document = TextDocument("abc\ndef\n")
        document.replace_cursors([TextPosition(1, 0), TextPosition(0, 2), TextPosition(1, 0)])
        self.assertEqual(document.cursors, [TextPosition(0, 2), TextPosition(1, 0)])

    def test_replace_cursors_with_nothing_keeps_cursor(self) -> None:
        document = TextDocument("abc\n")
        document.replace_cursors([])
        self.assertEqual(document.cursors, [TextPosition(0, 0)])

    def test_labels_by_line(self) -> None:
        document = TextDocument("abc\ndef\n")
        label = RenderedLabel(TextPosition(1, 2), "A", "")
        document.render_labels([label])
        self.assertEqual(document.labels_on_line(1), {2: label})
        document.clear_labels()
        self.assertEqual(document.labels_on_line(1), {})

    def test_display_is_one_based(self) -> None:
        self.assertEqual(TextPosition(0, 4).display(), "1:5")


class FromPathTests(unittest.TestCase):
    def test_reads_latin1_fallback(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "notes.txt"
            path.write_bytes(b"caf\xe9\r\nbar\r\n")
            document = TextDocument.from_path(path)
            self.assertEqual(document.lines, ["caf\xe9", "bar"])
            self.assertEqual(document.path, path)


if __name__ == "__main__":
    unittest.main()
