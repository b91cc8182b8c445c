"""Command-line front door for labeljump.

Parses CLI options, loads the target file into a viewer document, and
runs one jump, select, or multi-jump session on it. ``--query`` runs the
session from a fixed keystroke buffer without touching the terminal.
"""

from __future__ import annotations

import argparse
import shutil
import sys
from pathlib import Path

from . import config
from .jump import COMMANDS, COMMITTED, JUMP, JUMP_MODES, OPEN, JumpSession, SessionConfig, SessionState
from .jump.labels import LabelAlphabet
from .logging_setup import configure_logging
from .ui_theme import UITheme, available_theme_names, resolve_theme
from .viewer import JumpLoopCallbacks, TextDocument, TextPosition, highlight_lines, run_jump_loop
from .viewer.highlight import LineStyles
from .viewer.keys import read_key
from .viewer.rendering import CHROME_ROWS
from .viewer.terminal import TerminalController


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _int_pair(value: str) -> tuple[int, int]:
    first, sep, second = value.partition(":")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected two numbers separated by ':', got {value!r}")
    return _positive_int(first), _positive_int(second)


def _cursor_position(value: str) -> TextPosition:
    """argparse type for a 1-based ``LINE:COL`` cursor."""
    line, column = _int_pair(value)
    return TextPosition(line - 1, column - 1)


def _fold_range(value: str) -> tuple[int, int]:
    """argparse type for a 1-based inclusive ``START:END`` fold."""
    start, end = _int_pair(value)
    if end <= start:
        raise argparse.ArgumentTypeError("fold end must be after fold start")
    return start - 1, end - 1


def _label_alphabet(value: str) -> LabelAlphabet:
    try:
        return LabelAlphabet(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _default_viewport_height() -> int:
    term = shutil.get_terminal_size((80, 24))
    return max(1, term.lines - CHROME_ROWS)


def format_outcome(document: TextDocument, state: SessionState) -> list[str]:
    """Describe committed cursors as ``line:col`` or a selection as ``a-b``."""
    if state.phase != COMMITTED:
        return []
    if document.selection_anchor is not None:
        return [f"{document.selection_anchor.display()}-{document.primary_cursor.display()}"]
    return [cursor.display() for cursor in document.cursors]


def run_scripted(document: TextDocument, session: JumpSession, raw: str, accept: bool) -> str:
    """Feed ``raw`` as one keystroke buffer and report what the session did."""
    state = session.on_query_changed(raw)
    lines = [state.status]
    for match in state.labeled:
        position = document.resolve(match.position.span, match.position.offset)
        lines.append(f"{match.label} {position.display()}")
    if accept:
        state = session.on_accept()
        if state.is_open:
            lines.append(state.status)
    if state.phase != OPEN:
        lines.append(state.phase)
    lines.extend(format_outcome(document, state))
    return "\n".join(lines) + "\n"


def run_interactive(
    document: TextDocument,
    session: JumpSession,
    theme: UITheme,
    line_styles: LineStyles | None,
) -> SessionState:
    if not (sys.stdin.isatty() and sys.stdout.isatty()):
        raise SystemExit("Interactive mode needs a terminal; use --query for scripted runs.")
    stdin_fd = sys.stdin.fileno()
    terminal = TerminalController(stdin_fd, sys.stdout.fileno())

    def screen_size() -> tuple[int, int]:
        term = shutil.get_terminal_size((80, 24))
        return term.columns, term.lines

    callbacks = JumpLoopCallbacks(
        read_key=lambda: read_key(stdin_fd),
        write=terminal.write,
        screen_size=screen_size,
    )
    with terminal.raw_mode():
        return run_jump_loop(session, document, callbacks, theme, line_styles)


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and run one labeljump session on a file.

    Interactive runs print the committed cursor positions (1-based
    ``line:column``) and exit with status 1 when the session is cancelled.
    """
    parser = argparse.ArgumentParser(
        description="Jump to any visible occurrence of a typed string by its on-screen label."
    )
    parser.add_argument("path", help="File to open.")
    parser.add_argument("--mode", choices=JUMP_MODES, default=JUMP, help="Session mode (default: jump).")
    parser.add_argument("--line", type=_positive_int, default=1, help="First line shown in the viewport.")
    parser.add_argument("--cursor", type=_cursor_position, default=None, help="Initial cursor as LINE:COL.")
    parser.add_argument("--height", type=_positive_int, default=None, help="Viewport height in lines.")
    parser.add_argument(
        "--fold",
        type=_fold_range,
        action="append",
        default=[],
        metavar="START:END",
        help="Fold lines START+1..END (repeatable).",
    )
    parser.add_argument("--labels", type=_label_alphabet, default=None, help="Label glyphs, in order.")
    parser.add_argument("--theme", default=None, help=f"UI theme name ({', '.join(available_theme_names())}).")
    parser.add_argument("--style", default=None, help="Pygments style name for source highlighting.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--save", action="store_true", help="Persist --labels/--theme/--style as defaults.")
    parser.add_argument("--query", metavar="RAW", default=None, help="Run non-interactively with this input.")
    parser.add_argument("--accept", action="store_true", help="With --query, send Enter after the input.")
    parser.add_argument("--debug-log", metavar="PATH", default=None, help="Write debug records to PATH.")
    args = parser.parse_args(argv)

    if args.accept and args.query is None:
        raise SystemExit("--accept requires --query.")
    path = Path(args.path)
    if not path.is_file():
        raise SystemExit(f"File not found: {path}")

    try:
        configure_logging(args.debug_log)
    except OSError as exc:
        raise SystemExit(f"Cannot open debug log {exc.filename}: {exc.strerror}") from exc

    if args.save:
        if args.labels is not None:
            config.save_label_alphabet(args.labels)
        if args.theme:
            config.save_theme_name(args.theme)
        if args.style:
            config.save_syntax_style(args.style)

    alphabet = args.labels if args.labels is not None else config.load_label_alphabet()
    theme = resolve_theme(args.theme or config.load_theme_name(), no_color=args.no_color)
    style = args.style or config.load_syntax_style()
    height = args.height if args.height is not None else _default_viewport_height()

    document = TextDocument.from_path(path, height=height)
    for start, end in args.fold:
        document.fold(start, end)
    document.scroll_to(args.line - 1)
    if args.cursor is not None:
        document.set_primary_cursor(args.cursor)

    session = COMMANDS[args.mode](document, SessionConfig(alphabet=alphabet, styles=theme.label_styles()))
    if session is None:
        raise SystemExit(f"Cannot open {path}.")

    if args.query is not None:
        sys.stdout.write(run_scripted(document, session, args.query, args.accept))
        return

    line_styles = None if args.no_color else highlight_lines(document.lines, path, style)
    state = run_interactive(document, session, theme, line_styles)
    if state.phase != COMMITTED:
        raise SystemExit(1)
    for line in format_outcome(document, state):
        sys.stdout.write(line + "\n")


if __name__ == "__main__":
    main()
