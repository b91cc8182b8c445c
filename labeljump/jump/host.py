"""Host-side collaborator interface for jump sessions.

A host owns the real document: it supplies visible text, draws labels,
and applies cursor or selection changes. Positions it returns from
``resolve`` are opaque to the session and only passed back to the host.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Protocol

from .matching import Span


@dataclass(frozen=True)
class RenderedLabel:
    """One label to draw at a host-native position in a visual style."""

    position: Any
    glyph: str
    style: str


class JumpHost(Protocol):
    def visible_spans(self) -> list[Span]: ...

    def resolve(self, span: int, offset: int) -> Any: ...

    def render_labels(self, labels: Sequence[RenderedLabel]) -> None: ...

    def clear_labels(self) -> None: ...

    def set_primary_cursor(self, position: Any) -> None: ...

    def set_selection(self, anchor: Any, head: Any) -> None: ...

    def replace_cursors(self, positions: Sequence[Any]) -> None: ...

    def current_selection_anchor(self) -> Any: ...

    def show_status(self, message: str) -> None: ...

    def set_query_text(self, text: str) -> None: ...
