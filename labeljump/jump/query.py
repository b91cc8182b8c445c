"""Split a raw keystroke buffer into a search needle and label actions.

Everything up to the first label glyph is the needle. After that point
only label glyphs count; any other character is dropped.
"""

from __future__ import annotations

from collections.abc import Container
from dataclasses import dataclass


@dataclass(frozen=True)
class QueryState:
    """Needle plus the ordered label glyphs typed after it."""

    needle: str = ""
    actions: tuple[str, ...] = ()


def parse_query(raw: str, alphabet: Container[str]) -> QueryState:
    """Parse ``raw`` against ``alphabet`` membership (case-sensitive)."""
    split = len(raw)
    for idx, ch in enumerate(raw):
        if ch in alphabet:
            split = idx
            break
    needle = raw[:split]
    actions = tuple(ch for ch in raw[split:] if ch in alphabet)
    return QueryState(needle=needle, actions=actions)
