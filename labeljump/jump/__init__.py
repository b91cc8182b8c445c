"""Incremental label-jump core: parsing, matching, labeling, sessions.

Nothing here performs I/O; hosts plug in through ``JumpHost``.
"""

from __future__ import annotations

from .commands import COMMANDS, start_jump, start_multi_jump, start_select
from .host import JumpHost, RenderedLabel
from .labels import (
    DEFAULT_LABELS,
    LabelAlphabet,
    LabeledMatch,
    LabelResult,
    assign_labels,
    label_matches,
    labelable_matches,
    status_message,
)
from .matching import Position, Span, matches_by_prefix, matches_for
from .query import QueryState, parse_query
from .session import (
    CANCELLED,
    COMMITTED,
    JUMP,
    JUMP_MODES,
    MULTI_JUMP,
    OPEN,
    SELECT,
    JumpSession,
    LabelStyles,
    SessionConfig,
    SessionState,
    normalize_mode,
    on_accept,
    on_cancel,
    on_query_changed,
    open_session,
    toggle_selection,
)

__all__ = [
    "CANCELLED",
    "COMMANDS",
    "COMMITTED",
    "DEFAULT_LABELS",
    "JUMP",
    "JUMP_MODES",
    "JumpHost",
    "JumpSession",
    "LabelAlphabet",
    "LabelResult",
    "LabelStyles",
    "LabeledMatch",
    "MULTI_JUMP",
    "OPEN",
    "Position",
    "QueryState",
    "RenderedLabel",
    "SELECT",
    "SessionConfig",
    "SessionState",
    "Span",
    "assign_labels",
    "label_matches",
    "labelable_matches",
    "matches_by_prefix",
    "matches_for",
    "normalize_mode",
    "on_accept",
    "on_cancel",
    "on_query_changed",
    "open_session",
    "parse_query",
    "start_jump",
    "start_multi_jump",
    "start_select",
    "status_message",
]
