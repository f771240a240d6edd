"""Tests for pi.vim.reflow -- character-count line wrapping."""

from __future__ import annotations

from pi.vim.reflow import reflow_row, wrap_line
from pi.vim.types import CursorPosition


class TestWrapLine:
    """wrap_line partitions a row into fixed-width chunks."""

    def test_short_row_is_returned_unchanged(self) -> None:
        row = list("abc")
        result = wrap_line(row, 5)
        assert result == [row]
        assert result[0] is row

    def test_row_exactly_at_width_is_unchanged(self) -> None:
        row = list("abcde")
        assert wrap_line(row, 5) == [row]

    def test_empty_row_is_unchanged(self) -> None:
        assert wrap_line([], 3) == [[]]

    def test_overflow_by_one(self) -> None:
        assert wrap_line(list("abcd"), 3) == [list("abc"), list("d")]

    def test_exact_multiple_has_no_empty_tail(self) -> None:
        assert wrap_line(list("abcdef"), 3) == [list("abc"), list("def")]

    def test_many_chunks(self) -> None:
        chunks = wrap_line(list("abcdefghij"), 4)
        assert chunks == [list("abcd"), list("efgh"), list("ij")]

    def test_not_word_aware(self) -> None:
        chunks = wrap_line(list("hello world"), 4)
        assert ["".join(c) for c in chunks] == ["hell", "o wo", "rld"]

    def test_wrapping_a_wrapped_chunk_is_identity(self) -> None:
        for chunk in wrap_line(list("abcdefgh"), 3):
            assert wrap_line(chunk, 3) == [chunk]


class TestReflowRow:
    """reflow_row replaces the overflowing row in place."""

    def test_fitting_row_returns_none(self) -> None:
        rows = [list("abc")]
        assert reflow_row(rows, 0, 3) is None
        assert rows == [list("abc")]

    def test_cursor_lands_on_last_chunk(self) -> None:
        rows = [list("abcd")]
        cursor = reflow_row(rows, 0, 3)
        assert rows == [list("abc"), list("d")]
        assert cursor == CursorPosition(1, 0)

    def test_middle_row_is_replaced(self) -> None:
        rows = [list("x"), list("abcdefg"), list("y")]
        cursor = reflow_row(rows, 1, 3)
        assert ["".join(r) for r in rows] == ["x", "abc", "def", "g", "y"]
        assert cursor == CursorPosition(3, 0)

    def test_cursor_column_is_last_chunk_length_minus_one(self) -> None:
        rows = [list("abcdefgh")]
        cursor = reflow_row(rows, 0, 5)
        assert rows == [list("abcde"), list("fgh")]
        assert cursor == CursorPosition(1, 2)
