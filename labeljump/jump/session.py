"""Jump, select, and multi-jump session state machine.

A session starts ``open`` and ends ``committed`` or ``cancelled``. All
session data lives in one frozen ``SessionState`` record; each transition
takes the previous record, talks to the host, and returns the next one.
``JumpSession`` is the thin driver that keeps the current record for a
caller that only forwards events.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from functools import reduce
from typing import Any

from .host import JumpHost, RenderedLabel
from .labels import LabelAlphabet, LabeledMatch, label_matches, status_message
from .matching import Position
from .query import QueryState, parse_query

logger = logging.getLogger(__name__)

JUMP = "jump"
SELECT = "select"
MULTI_JUMP = "multi-jump"
JUMP_MODES = (JUMP, SELECT, MULTI_JUMP)

OPEN = "open"
COMMITTED = "committed"
CANCELLED = "cancelled"

_MODE_VERBS = {JUMP: "jump", SELECT: "select", MULTI_JUMP: "toggle"}
NOTHING_SELECTED_STATUS = "No labels selected. Type a label to toggle it"


def normalize_mode(name: str) -> str:
    """Return canonical mode name; accepts ``_`` for ``-``."""
    candidate = str(name).strip().lower().replace("_", "-")
    if candidate == "multi":
        candidate = MULTI_JUMP
    if candidate not in JUMP_MODES:
        raise ValueError(f"unknown jump mode: {name!r}")
    return candidate


@dataclass(frozen=True)
class LabelStyles:
    """Visual classes for plain and toggled labels."""

    labeled: str = "label"
    toggled: str = "toggled"


@dataclass(frozen=True)
class SessionConfig:
    alphabet: LabelAlphabet = field(default_factory=LabelAlphabet)
    styles: LabelStyles = field(default_factory=LabelStyles)


@dataclass(frozen=True)
class SessionState:
    """Everything one session knows after its latest event."""

    mode: str
    phase: str = OPEN
    query: QueryState = QueryState()
    labeled: tuple[LabeledMatch, ...] = ()
    total: int = 0
    selection: frozenset[str] = frozenset()
    status: str = ""

    @property
    def is_open(self) -> bool:
        return self.phase == OPEN

    def targets(self) -> dict[str, Position]:
        return {match.label: match.position for match in self.labeled}


def toggle_selection(selection: frozenset[str], actions: tuple[str, ...]) -> frozenset[str]:
    """Fold ``actions`` into ``selection`` with XOR membership."""
    return reduce(lambda current, glyph: current ^ {glyph}, actions, selection)


def _multi_jump_status(state: SessionState, budget: int) -> str:
    message = status_message(state.query.needle, state.total, budget, _MODE_VERBS[MULTI_JUMP])
    if state.selection:
        message += f", Enter to accept ({len(state.selection)} selected)"
    return message


def _render(state: SessionState, host: JumpHost, config: SessionConfig) -> None:
    labels: list[RenderedLabel] = []
    for match in state.labeled:
        toggled = state.mode == MULTI_JUMP and match.label in state.selection
        labels.append(
            RenderedLabel(
                position=host.resolve(match.position.span, match.position.offset),
                glyph=match.label,
                style=config.styles.toggled if toggled else config.styles.labeled,
            )
        )
    host.render_labels(labels)


def _finish(state: SessionState, host: JumpHost, phase: str) -> SessionState:
    host.clear_labels()
    logger.debug("session %s: mode=%s needle=%r", phase, state.mode, state.query.needle)
    return replace(state, phase=phase, labeled=())


def open_session(mode: str, host: JumpHost, config: SessionConfig) -> SessionState:
    state = SessionState(
        mode=normalize_mode(mode),
        status=status_message("", 0, config.alphabet.budget),
    )
    host.clear_labels()
    host.show_status(state.status)
    logger.debug("session open: mode=%s labels=%d", state.mode, config.alphabet.budget)
    return state


def on_query_changed(
    state: SessionState,
    raw: str,
    host: JumpHost,
    config: SessionConfig,
) -> SessionState:
    """Re-derive labels for ``raw`` and apply any label actions it carries.

    Jump and select modes act on the first action glyph only and commit
    whether or not it resolves. Multi-jump toggles every action glyph and
    stays open.
    """
    if not state.is_open:
        return state

    alphabet = config.alphabet
    query = parse_query(raw, alphabet)
    result = label_matches(host.visible_spans(), query.needle, alphabet)
    state = replace(state, query=query, labeled=result.labeled, total=result.total)
    logger.debug(
        "keystroke: needle=%r actions=%r total=%d labeled=%d",
        query.needle,
        "".join(query.actions),
        result.total,
        len(result.labeled),
    )

    if state.mode == MULTI_JUMP:
        state = replace(state, selection=toggle_selection(state.selection, query.actions))
        state = replace(state, status=_multi_jump_status(state, alphabet.budget))
        if query.actions:
            host.set_query_text(query.needle)
        host.show_status(state.status)
        _render(state, host, config)
        return state

    state = replace(
        state,
        status=status_message(query.needle, result.total, alphabet.budget, _MODE_VERBS[state.mode]),
    )
    host.show_status(state.status)
    _render(state, host, config)
    if not query.actions:
        return state

    target = state.targets().get(query.actions[0])
    if target is not None:
        head = host.resolve(target.span, target.offset)
        if state.mode == JUMP:
            host.set_primary_cursor(head)
        else:
            host.set_selection(host.current_selection_anchor(), head)
    return _finish(state, host, COMMITTED)


def on_accept(state: SessionState, host: JumpHost, config: SessionConfig) -> SessionState:
    """Commit toggled labels in multi-jump; close the prompt in other modes."""
    if not state.is_open:
        return state
    if state.mode != MULTI_JUMP:
        return _finish(state, host, CANCELLED)
    if not state.selection:
        state = replace(state, status=NOTHING_SELECTED_STATUS)
        host.show_status(state.status)
        return state

    targets = state.targets()
    positions: list[Any] = []
    for glyph in config.alphabet:
        if glyph not in state.selection:
            continue
        target = targets.get(glyph)
        if target is not None:
            positions.append(host.resolve(target.span, target.offset))
    host.replace_cursors(positions)
    return _finish(state, host, COMMITTED)


def on_cancel(state: SessionState, host: JumpHost) -> SessionState:
    if not state.is_open:
        return state
    return _finish(state, host, CANCELLED)


class JumpSession:
    """Drive one session's state record from host events."""

    def __init__(self, mode: str, host: JumpHost, config: SessionConfig | None = None) -> None:
        self.host = host
        self.config = config if config is not None else SessionConfig()
        self.state = open_session(mode, host, self.config)

    @property
    def mode(self) -> str:
        return self.state.mode

    @property
    def is_open(self) -> bool:
        return self.state.is_open

    def on_query_changed(self, raw: str) -> SessionState:
        self.state = on_query_changed(self.state, raw, self.host, self.config)
        return self.state

    def on_accept(self) -> SessionState:
        self.state = on_accept(self.state, self.host, self.config)
        return self.state

    def on_cancel(self) -> SessionState:
        self.state = on_cancel(self.state, self.host)
        return self.state
