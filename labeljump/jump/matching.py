"""Prefix matching over visible text spans.

For a needle ``n`` the table maps every non-empty prefix ``n[:j]`` to the
positions where that prefix starts. Lists are in discovery order: span
index ascending, then offset ascending.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Position:
    """Offset into one span's text; orders by ``(span, offset)``."""

    span: int
    offset: int


@dataclass(frozen=True)
class Span:
    """One contiguous visible region with lowercased text."""

    index: int
    text: str


def matches_by_prefix(spans: Iterable[Span], needle: str) -> dict[str, list[Position]]:
    """Return positions for each non-empty prefix of ``needle``.

    The empty prefix is never populated, so an empty needle yields ``{}``.
    Cost is O(visible text x needle length), bounded by the viewport.
    """
    table: dict[str, list[Position]] = {}
    if not needle:
        return table

    prefixes = [needle[:j] for j in range(1, len(needle) + 1)]
    for span in spans:
        text = span.text
        text_len = len(text)
        for i in range(text_len):
            for j, prefix in enumerate(prefixes, start=1):
                if i + j > text_len:
                    break
                if text[i + j - 1] != prefix[-1]:
                    # Longer prefixes share this mismatching character.
                    break
                table.setdefault(prefix, []).append(Position(span.index, i))
    return table


def matches_for(table: dict[str, list[Position]], needle: str) -> list[Position]:
    """Return the match list for ``needle`` itself, or ``[]``."""
    if not needle:
        return []
    return table.get(needle, [])
