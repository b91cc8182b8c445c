"""Terminal viewer that hosts jump sessions over one text file."""

from __future__ import annotations

from .document import TextDocument, TextPosition, read_text
from .highlight import highlight_lines
from .loop import JumpLoopCallbacks, run_jump_loop
from .rendering import render_screen

__all__ = [
    "JumpLoopCallbacks",
    "TextDocument",
    "TextPosition",
    "highlight_lines",
    "read_text",
    "render_screen",
    "run_jump_loop",
]
