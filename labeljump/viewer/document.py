"""In-memory text document that acts as a jump host.

Holds the lines of one file, a scrollable viewport with optional folded
line ranges, cursors and selection, plus the transient label overlay,
status text, and query text a renderer draws. Each contiguous run of
visible lines is exposed as one span.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from ..jump.host import RenderedLabel
from ..jump.matching import Span

logger = logging.getLogger(__name__)


@dataclass(frozen=True, order=True)
class TextPosition:
    """Zero-based line and column (character offset) in a document."""

    line: int
    column: int

    def display(self) -> str:
        """Return the 1-based ``line:column`` form used in CLI output."""
        return f"{self.line + 1}:{self.column + 1}"


def read_text(path: Path) -> str:
    """Read text using tolerant encoding fallback order."""
    for encoding in ("utf-8", "utf-8-sig", "latin-1"):
        try:
            return path.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    return path.read_bytes().decode("utf-8", errors="replace")


def lower_preserving_offsets(text: str) -> str:
    """Lowercase per character, keeping characters whose lowercase form grows."""
    lowered = text.lower()
    if len(lowered) == len(text):
        return lowered
    return "".join(ch.lower() if len(ch.lower()) == 1 else ch for ch in text)


class TextDocument:
    """Lines, viewport, cursors, and label overlay for one buffer."""

    def __init__(self, text: str, *, path: Path | None = None, height: int = 24, top: int = 0) -> None:
        self.path = path
        self.lines = [line.rstrip("\r") for line in text.split("\n")]
        if len(self.lines) > 1 and self.lines[-1] == "" and text.endswith("\n"):
            self.lines.pop()
        self.height = max(1, height)
        self.top = 0
        self.folds: list[tuple[int, int]] = []
        self.cursors: list[TextPosition] = [TextPosition(0, 0)]
        self.selection_anchor: TextPosition | None = None
        self.labels: list[RenderedLabel] = []
        self.status = ""
        self.query = ""
        self._span_lines: list[list[int]] = []
        self.scroll_to(top)

    @classmethod
    def from_path(cls, path: Path, *, height: int = 24, top: int = 0) -> TextDocument:
        return cls(read_text(path), path=path, height=height, top=top)

    # Viewport

    def is_hidden(self, line: int) -> bool:
        """Return whether ``line`` is inside a fold body (fold headers stay visible)."""
        return any(start < line <= end for start, end in self.folds)

    def fold_at(self, line: int) -> tuple[int, int] | None:
        for fold in self.folds:
            if fold[0] == line:
                return fold
        return None

    def fold(self, start: int, end: int) -> None:
        """Hide lines ``start + 1 .. end``; overlapping folds are merged."""
        start = max(0, start)
        end = min(len(self.lines) - 1, end)
        if end <= start:
            return
        merged: list[tuple[int, int]] = []
        for fold_start, fold_end in sorted([*self.folds, (start, end)]):
            if merged and fold_start <= merged[-1][1]:
                merged[-1] = (merged[-1][0], max(merged[-1][1], fold_end))
            else:
                merged.append((fold_start, fold_end))
        self.folds = merged
        self.scroll_to(self.top)

    def _shown_lines(self) -> list[int]:
        return [line for line in range(len(self.lines)) if not self.is_hidden(line)]

    def scroll_to(self, line: int) -> None:
        line = max(0, min(len(self.lines) - 1, line))
        while line > 0 and self.is_hidden(line):
            line -= 1
        self.top = line

    def scroll_by(self, delta: int) -> bool:
        """Move the viewport by ``delta`` visible lines; return whether it moved."""
        shown = self._shown_lines()
        idx = shown.index(self.top) if self.top in shown else 0
        max_idx = max(0, len(shown) - self.height)
        new_idx = max(0, min(max_idx, idx + delta))
        previous = self.top
        self.top = shown[new_idx] if shown else 0
        return self.top != previous

    def resize(self, height: int) -> bool:
        height = max(1, height)
        changed = height != self.height
        self.height = height
        return changed

    def visible_lines(self) -> list[int]:
        """Return the document line shown on each viewport row, top to bottom."""
        rows: list[int] = []
        line = self.top
        while line < len(self.lines) and len(rows) < self.height:
            if not self.is_hidden(line):
                rows.append(line)
            line += 1
        return rows

    # Jump host

    def visible_spans(self) -> list[Span]:
        runs: list[list[int]] = []
        for line in self.visible_lines():
            if runs and runs[-1][-1] == line - 1:
                runs[-1].append(line)
            else:
                runs.append([line])
        self._span_lines = runs
        return [
            Span(index, lower_preserving_offsets("\n".join(self.lines[line] for line in run)))
            for index, run in enumerate(runs)
        ]

    def resolve(self, span: int, offset: int) -> TextPosition:
        run = self._span_lines[span]
        for line in run:
            length = len(self.lines[line])
            if offset <= length:
                return TextPosition(line, offset)
            offset -= length + 1
        last = run[-1]
        return TextPosition(last, len(self.lines[last]))

    def render_labels(self, labels: Sequence[RenderedLabel]) -> None:
        self.labels = list(labels)

    def clear_labels(self) -> None:
        self.labels = []

    def set_primary_cursor(self, position: TextPosition) -> None:
        self.cursors = [position]
        self.selection_anchor = None
        logger.debug("cursor -> %s", position.display())

    def set_selection(self, anchor: TextPosition, head: TextPosition) -> None:
        self.selection_anchor = anchor
        self.cursors = [head]
        logger.debug("selection %s -> %s", anchor.display(), head.display())

    def replace_cursors(self, positions: Sequence[TextPosition]) -> None:
        # A document always keeps at least one cursor.
        if not positions:
            return
        self.cursors = sorted(set(positions))
        self.selection_anchor = None
        logger.debug("cursors -> %s", ", ".join(pos.display() for pos in self.cursors))

    def current_selection_anchor(self) -> TextPosition:
        if self.selection_anchor is not None:
            return self.selection_anchor
        return self.cursors[0]

    def show_status(self, message: str) -> None:
        self.status = message

    def set_query_text(self, text: str) -> None:
        self.query = text

    # Queries used by the renderer

    @property
    def primary_cursor(self) -> TextPosition:
        return self.cursors[0]

    def selection_range(self) -> tuple[TextPosition, TextPosition] | None:
        """Return the ordered ``(start, end)`` of the selection, if any."""
        if self.selection_anchor is None:
            return None
        head = self.cursors[0]
        return (min(self.selection_anchor, head), max(self.selection_anchor, head))

    def labels_on_line(self, line: int) -> dict[int, RenderedLabel]:
        return {label.position.column: label for label in self.labels if label.position.line == line}
