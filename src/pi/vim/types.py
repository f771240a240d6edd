"""Core value types shared by the buffer, cursor, selection and editor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

Mode = Literal["normal", "insert", "visual", "command", "search", "replace"]

MODES: tuple[Mode, ...] = ("normal", "insert", "visual", "command", "search", "replace")

# One buffer line: an ordered sequence of display characters.
Row = list[str]


@dataclass(frozen=True, order=True)
class CursorPosition:
    """A (row, col) position in the buffer.

    Ordering is lexicographic by ``(row, col)``, which is row-major buffer
    order. ``col`` may equal the row length: the slot after the last
    character.
    """

    row: int = 0
    col: int = 0

    def with_row(self, row: int) -> CursorPosition:
        return CursorPosition(row, self.col)

    def with_col(self, col: int) -> CursorPosition:
        return CursorPosition(self.row, col)


@dataclass(frozen=True)
class SelectionRange:
    """A normalized selection: ``start <= end`` in row-major order."""

    start: CursorPosition
    end: CursorPosition

    def contains(self, row: int, col: int) -> bool:
        """Half-open membership test; the ``end`` position itself is excluded."""
        if row < self.start.row or row > self.end.row:
            return False
        if self.start.row == self.end.row:
            return self.start.col <= col < self.end.col
        if row == self.start.row:
            return col >= self.start.col
        if row == self.end.row:
            return col < self.end.col
        return True

    @property
    def is_empty(self) -> bool:
        return self.start == self.end
