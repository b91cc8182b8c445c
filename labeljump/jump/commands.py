"""Entry points that open one session per invocation."""

from __future__ import annotations

from collections.abc import Callable

from .host import JumpHost
from .session import JUMP, MULTI_JUMP, SELECT, JumpSession, SessionConfig


def _start(mode: str, host: JumpHost | None, config: SessionConfig | None) -> JumpSession | None:
    if host is None:
        return None
    return JumpSession(mode, host, config)


def start_jump(host: JumpHost | None, config: SessionConfig | None = None) -> JumpSession | None:
    """Open a jump session, or do nothing when there is no document."""
    return _start(JUMP, host, config)


def start_select(host: JumpHost | None, config: SessionConfig | None = None) -> JumpSession | None:
    return _start(SELECT, host, config)


def start_multi_jump(host: JumpHost | None, config: SessionConfig | None = None) -> JumpSession | None:
    return _start(MULTI_JUMP, host, config)


COMMANDS: dict[str, Callable[..., JumpSession | None]] = {
    JUMP: start_jump,
    SELECT: start_select,
    MULTI_JUMP: start_multi_jump,
}
