"""Source locations and offset-to-position mapping."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based character offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Span:
    """Source range from start (inclusive) to end (exclusive)."""

    start: Position
    end: Position


class LineIndex:
    """Map character offsets in a source string to line/column positions."""

    def __init__(self, source: str) -> None:
        self._starts = [0]
        for i, ch in enumerate(source):
            if ch == "\n":
                self._starts.append(i + 1)

    def position(self, offset: int) -> Position:
        line_idx = bisect_right(self._starts, offset) - 1
        return Position(line_idx + 1, offset - self._starts[line_idx] + 1, offset)

    def span(self, start: int, end: int) -> Span:
        return Span(self.position(start), self.position(end))
