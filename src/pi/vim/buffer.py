"""Line-oriented text buffer.

Each row is a list of display characters. The buffer always holds at least
one row; every mutating operation takes the cursor position it acts on and
returns where the cursor ends up, clamping instead of raising on
out-of-range input.
"""

from __future__ import annotations

import copy

from pi.vim.reflow import reflow_row
from pi.vim.types import CursorPosition, Row, SelectionRange
from pi.vim.utils import split_chars


class TextBuffer:
    """Ordered rows of display characters; never empty."""

    def __init__(self, rows: list[Row] | None = None) -> None:
        self._rows: list[Row] = [list(r) for r in rows] if rows else [[]]

    @classmethod
    def from_text(cls, text: str) -> TextBuffer:
        """Build a buffer from text, one row per line."""
        lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
        return cls([split_chars(line) for line in lines])

    # -- Queries -------------------------------------------------------------

    @property
    def rows(self) -> list[Row]:
        return self._rows

    @property
    def line_count(self) -> int:
        return len(self._rows)

    @property
    def last_row(self) -> int:
        return len(self._rows) - 1

    def row_length(self, row: int) -> int:
        if 0 <= row < len(self._rows):
            return len(self._rows[row])
        return 0

    def get_row(self, row: int) -> Row:
        return self._rows[row] if 0 <= row < len(self._rows) else []

    def get_lines(self) -> list[str]:
        return ["".join(r) for r in self._rows]

    def get_text(self) -> str:
        return "\n".join(self.get_lines())

    def snapshot(self) -> list[Row]:
        """Detached deep copy of the rows, safe to hand to a renderer."""
        return copy.deepcopy(self._rows)

    def _clamp(self, pos: CursorPosition) -> CursorPosition:
        row = max(0, min(pos.row, self.last_row))
        col = max(0, min(pos.col, len(self._rows[row])))
        return CursorPosition(row, col)

    # -- Mutations -----------------------------------------------------------

    def insert_char(self, pos: CursorPosition, char: str, width: int) -> CursorPosition:
        """Insert *char* at *pos*; wrap the row if it now exceeds *width*."""
        pos = self._clamp(pos)
        self._rows[pos.row].insert(pos.col, char)

        relocated = reflow_row(self._rows, pos.row, width)
        if relocated is not None:
            return relocated
        return CursorPosition(pos.row, pos.col + 1)

    def delete_backward(self, pos: CursorPosition) -> CursorPosition:
        """Delete the character before *pos*, or merge with the previous row at column 0."""
        pos = self._clamp(pos)

        if pos.col > 0:
            del self._rows[pos.row][pos.col - 1]
            return CursorPosition(pos.row, pos.col - 1)

        if pos.row > 0:
            previous = self._rows[pos.row - 1]
            previous_length = len(previous)
            previous.extend(self._rows[pos.row])
            del self._rows[pos.row]
            return CursorPosition(pos.row - 1, previous_length)

        # (0, 0): nothing before the cursor
        return pos

    def split_row(self, pos: CursorPosition) -> CursorPosition:
        """Split the row at *pos*; the tail becomes a new row below."""
        pos = self._clamp(pos)
        line = self._rows[pos.row]

        self._rows[pos.row] = line[: pos.col]
        self._rows.insert(pos.row + 1, line[pos.col :])
        return CursorPosition(pos.row + 1, 0)

    def delete_range(self, rng: SelectionRange) -> CursorPosition:
        """Remove the half-open range ``[start, end)``; the cursor moves to ``start``."""
        start = self._clamp(min(rng.start, rng.end))
        end = self._clamp(max(rng.start, rng.end))

        if start.row == end.row:
            del self._rows[start.row][start.col : end.col]
        else:
            merged = self._rows[start.row][: start.col] + self._rows[end.row][end.col :]
            self._rows[start.row : end.row + 1] = [merged]

        return start

    def replace_in_row(self, row: int, col: int, length: int, text: str) -> CursorPosition:
        """Replace *length* characters at (*row*, *col*) with *text*; no reflow."""
        pos = self._clamp(CursorPosition(row, col))
        line = self._rows[pos.row]
        line[pos.col : pos.col + length] = split_chars(text)
        return pos

    def __len__(self) -> int:
        return len(self._rows)

    def __repr__(self) -> str:
        return f"TextBuffer({self.get_lines()!r})"
