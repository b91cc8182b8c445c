"""Interactive loop that feeds terminal keys into one jump session.

Printable keys edit the query buffer and every edit re-runs the session's
keystroke transition with the full buffer. Scrolling re-runs it with the
unchanged buffer so labels follow the new viewport.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..jump.session import JumpSession, SessionState
from ..ui_theme import UITheme
from .document import TextDocument
from .highlight import LineStyles
from .keys import KeyComboBinding, KeyComboRegistry, is_text_key
from .rendering import CHROME_ROWS, render_screen

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class JumpLoopCallbacks:
    """Terminal operations injected into ``run_jump_loop``."""

    read_key: Callable[[], str]
    write: Callable[[str], None]
    screen_size: Callable[[], tuple[int, int]]


def run_jump_loop(
    session: JumpSession,
    document: TextDocument,
    callbacks: JumpLoopCallbacks,
    theme: UITheme,
    line_styles: LineStyles | None = None,
) -> SessionState:
    """Run until the session commits or is cancelled; return its final state."""

    def query_changed() -> None:
        session.on_query_changed(document.query)

    def backspace() -> None:
        if document.query:
            document.query = document.query[:-1]
            query_changed()

    def clear_query() -> None:
        if document.query:
            document.query = ""
            query_changed()

    def scroll(delta: Callable[[], int]) -> Callable[[], None]:
        def handler() -> None:
            if document.scroll_by(delta()):
                query_changed()

        return handler

    def type_text(text: str) -> Callable[[], None]:
        def handler() -> None:
            document.query += text
            query_changed()

        return handler

    def page() -> int:
        return max(1, document.height - 1)

    registry = KeyComboRegistry().register_bindings(
        KeyComboBinding(("ENTER",), session.on_accept),
        KeyComboBinding(("ESC", "CTRL_C"), session.on_cancel),
        KeyComboBinding(("BACKSPACE",), backspace),
        KeyComboBinding(("CTRL_U",), clear_query),
        KeyComboBinding(("TAB",), type_text("\t")),
        KeyComboBinding(("UP",), scroll(lambda: -1)),
        KeyComboBinding(("DOWN",), scroll(lambda: 1)),
        KeyComboBinding(("PAGE_UP",), scroll(lambda: -page())),
        KeyComboBinding(("PAGE_DOWN",), scroll(lambda: page())),
    )

    while session.is_open:
        columns, rows = callbacks.screen_size()
        if document.resize(rows - CHROME_ROWS):
            query_changed()
        callbacks.write(render_screen(document, session.mode, columns, theme, line_styles))

        key = callbacks.read_key()
        if not key:
            # End of input.
            session.on_cancel()
            continue
        if registry.dispatch(key):
            continue
        if is_text_key(key):
            document.query += key
            query_changed()
        else:
            logger.debug("ignored key %r", key)

    return session.state
