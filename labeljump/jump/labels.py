"""Label alphabet and label assignment for prefix matches.

Labels come from the shortest needle prefix whose match count fits the
alphabet, but only positions that match the full needle get drawn. A
label keeps the index of its position in that shortest-prefix list, so
labels skipped by the full-needle filter leave gaps (``A``, ``C`` with no
``B``) instead of shifting later labels mid-keystroke.
"""

from __future__ import annotations

import string
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from .matching import Position, Span, matches_by_prefix, matches_for

DEFAULT_LABELS = string.ascii_uppercase


class LabelAlphabet(Sequence[str]):
    """Immutable ordered set of distinct single-character glyphs."""

    __slots__ = ("_glyphs", "_members")

    def __init__(self, glyphs: Iterable[str] = DEFAULT_LABELS) -> None:
        ordered = tuple(glyphs)
        if not ordered:
            raise ValueError("label alphabet must not be empty")
        for glyph in ordered:
            if not isinstance(glyph, str) or len(glyph) != 1:
                raise ValueError(f"label glyphs must be single characters, got {glyph!r}")
            if glyph.isspace():
                raise ValueError("label glyphs must not be whitespace")
        if len(set(ordered)) != len(ordered):
            raise ValueError("label glyphs must be distinct")
        self._glyphs = ordered
        self._members = frozenset(ordered)

    @property
    def budget(self) -> int:
        return len(self._glyphs)

    def __len__(self) -> int:
        return len(self._glyphs)

    def __getitem__(self, index):  # type: ignore[override]
        return self._glyphs[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self._glyphs)

    def __contains__(self, glyph: object) -> bool:
        return glyph in self._members

    def __eq__(self, other: object) -> bool:
        if isinstance(other, LabelAlphabet):
            return self._glyphs == other._glyphs
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._glyphs)

    def __repr__(self) -> str:
        return f"LabelAlphabet({''.join(self._glyphs)!r})"


@dataclass(frozen=True)
class LabeledMatch:
    position: Position
    label: str


@dataclass(frozen=True)
class LabelResult:
    """Drawable labels for one keystroke plus the full-needle match count."""

    labeled: tuple[LabeledMatch, ...] = ()
    total: int = 0

    def targets(self) -> dict[str, Position]:
        """Return the label -> position map used to resolve typed glyphs."""
        return {match.label: match.position for match in self.labeled}


def labelable_matches(
    table: dict[str, list[Position]],
    needle: str,
    budget: int,
) -> list[Position]:
    """Return matches of the shortest prefix whose count is within ``budget``."""
    for j in range(1, len(needle) + 1):
        matches = table.get(needle[:j])
        if matches is not None and len(matches) <= budget:
            return matches
    return []


def assign_labels(
    table: dict[str, list[Position]],
    needle: str,
    alphabet: LabelAlphabet,
) -> LabelResult:
    labelable = labelable_matches(table, needle, alphabet.budget)
    targets = matches_for(table, needle)
    target_set = set(targets)
    labeled = tuple(
        LabeledMatch(position, alphabet[idx])
        for idx, position in enumerate(labelable)
        if position in target_set
    )
    return LabelResult(labeled=labeled, total=len(targets))


def label_matches(spans: Iterable[Span], needle: str, alphabet: LabelAlphabet) -> LabelResult:
    """Match ``needle`` against ``spans`` and assign labels in one step."""
    return assign_labels(matches_by_prefix(spans, needle), needle, alphabet)


def status_message(needle: str, total: int, budget: int, verb: str = "jump") -> str:
    """Describe a keystroke's result for the query prompt."""
    if total == 0:
        if needle:
            return "No matches"
        return "Type lowercase letters or symbols"
    if total > budget:
        return f"{total} matches (type more to narrow down)"
    return f"{total} matches. Type label to {verb}"
