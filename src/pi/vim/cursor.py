"""Cursor navigation as pure functions over ``(CursorPosition, TextBuffer)``.

Vertical moves keep the column numerically, even when it is past the end of
the target row. The editor clamps the result against the target row and
remembers the desired column, so it survives a trip over a short line.
"""

from __future__ import annotations

from typing import Callable

from pi.vim.buffer import TextBuffer
from pi.vim.types import CursorPosition

Motion = Callable[[CursorPosition, TextBuffer], CursorPosition]


def clamp(pos: CursorPosition, buffer: TextBuffer) -> CursorPosition:
    """Pull *pos* inside the buffer: valid row, column at most the row length."""
    row = max(0, min(pos.row, buffer.last_row))
    col = max(0, min(pos.col, buffer.row_length(row)))
    return CursorPosition(row, col)


def move_up(pos: CursorPosition, buffer: TextBuffer) -> CursorPosition:
    return pos.with_row(max(0, min(pos.row - 1, buffer.last_row)))


def move_down(pos: CursorPosition, buffer: TextBuffer) -> CursorPosition:
    return pos.with_row(max(0, min(pos.row + 1, buffer.last_row)))


def move_left(pos: CursorPosition, buffer: TextBuffer) -> CursorPosition:
    pos = clamp(pos, buffer)
    return pos.with_col(max(0, pos.col - 1))


def move_right(pos: CursorPosition, buffer: TextBuffer) -> CursorPosition:
    pos = clamp(pos, buffer)
    return pos.with_col(min(buffer.row_length(pos.row), pos.col + 1))


def line_start(pos: CursorPosition, buffer: TextBuffer) -> CursorPosition:  # '0'
    return pos.with_col(0)


def line_end(pos: CursorPosition, buffer: TextBuffer) -> CursorPosition:  # '$'
    return pos.with_col(buffer.row_length(pos.row))


def first_non_blank(pos: CursorPosition, buffer: TextBuffer) -> CursorPosition:  # '^' / '_'
    """Column of the first non-space character; 0 for blank or empty rows."""
    for col, char in enumerate(buffer.get_row(pos.row)):
        if char != " ":
            return pos.with_col(col)
    return pos.with_col(0)


def buffer_start(pos: CursorPosition, buffer: TextBuffer) -> CursorPosition:  # 'gg'
    return CursorPosition(0, 0)


def buffer_end(pos: CursorPosition, buffer: TextBuffer) -> CursorPosition:  # 'G'
    return CursorPosition(buffer.last_row, buffer.row_length(buffer.last_row))
