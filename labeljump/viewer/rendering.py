"""Screen composition for the jump viewer.

Draws viewport rows with syntax colors, then overlays labels, cursors and
the selection cell by cell. The last two rows hold the status message and
the query prompt. Rendering is side-effect free and returns one string.
"""

from __future__ import annotations

import unicodedata

from ..ui_theme import UITheme
from .document import TextDocument, TextPosition
from .highlight import LineStyles

TAB_STOP = 8
CHROME_ROWS = 2


def char_display_width(ch: str, col: int) -> int:
    """Return terminal column width for one character at visual column ``col``."""
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def _display_cell(ch: str, col: int) -> tuple[str, int]:
    width = char_display_width(ch, col)
    if ch == "\t":
        return " " * width, width
    if not ch.isprintable():
        return "?", 1
    return ch, width


def _styled(style: str, text: str, reset: str) -> str:
    if not style:
        return text
    return f"{style}{text}{reset}"


def render_row(
    document: TextDocument,
    line: int,
    width: int,
    theme: UITheme,
    char_styles: list[str] | None = None,
) -> str:
    """Render one document line clipped to ``width`` columns."""
    text = document.lines[line]
    labels = document.labels_on_line(line)
    cursor_columns = {cursor.column for cursor in document.cursors if cursor.line == line}
    selection = document.selection_range()

    out: list[str] = []
    used = 0
    for column, ch in enumerate(text):
        label = labels.get(column)
        if label is not None:
            cell, cell_width, style = label.glyph, 1, label.style
        else:
            cell, cell_width = _display_cell(ch, used)
            style = char_styles[column] if char_styles is not None and column < len(char_styles) else ""
            if column in cursor_columns:
                style = theme.reverse
            elif selection is not None and selection[0] <= TextPosition(line, column) < selection[1]:
                style = theme.selection + style
        if used + cell_width > width:
            break
        out.append(_styled(style, cell, theme.reset))
        used += cell_width

    if used < width:
        end_label = labels.get(len(text))
        if end_label is not None:
            out.append(_styled(end_label.style, end_label.glyph, theme.reset))
            used += 1
        elif len(text) in cursor_columns:
            out.append(_styled(theme.reverse, " ", theme.reset))
            used += 1

    fold = document.fold_at(line)
    if fold is not None:
        marker = f" ... {fold[1] - fold[0]} lines"
        room = max(0, width - used)
        if room:
            out.append(_styled(theme.fold_marker, marker[:room], theme.reset))
    return "".join(out)


def build_status_line(left_text: str, width: int, right_text: str = "") -> str:
    usable = max(1, width - 1)
    if not right_text:
        return left_text[:usable]
    if usable <= len(right_text):
        return right_text[-usable:]
    left_limit = max(0, usable - len(right_text) - 1)
    left = left_text[:left_limit]
    gap = " " * (usable - len(left) - len(right_text))
    return f"{left}{gap}{right_text}"


MODE_HINTS = {
    "jump": "Esc cancel",
    "select": "Esc cancel",
    "multi-jump": "Enter accept  Esc cancel",
}


def render_screen(
    document: TextDocument,
    mode: str,
    width: int,
    theme: UITheme,
    line_styles: LineStyles | None = None,
) -> str:
    """Return the full-screen frame for the current document state."""
    width = max(1, width)
    out: list[str] = ["\033[H\033[J"]
    rows = document.visible_lines()
    for row in range(document.height):
        if row < len(rows):
            line = rows[row]
            styles = line_styles[line] if line_styles is not None and line < len(line_styles) else None
            out.append(render_row(document, line, width, theme, styles))
        else:
            out.append(_styled(theme.filler, "~", theme.reset))
        out.append("\r\n")

    status = build_status_line(document.status, width, MODE_HINTS.get(mode, ""))
    out.append(_styled(theme.status, status, theme.reset))
    out.append("\r\n")
    prompt = f"{mode}> "
    out.append(_styled(theme.prompt, prompt, theme.reset))
    out.append(document.query.replace("\t", " ")[: max(0, width - len(prompt) - 1)])
    return "".join(out)
