"""Tests for pi.vim.buffer.TextBuffer -- row storage and edits."""

from __future__ import annotations

from pi.vim.buffer import TextBuffer
from pi.vim.types import CursorPosition, SelectionRange


def _range(r1: int, c1: int, r2: int, c2: int) -> SelectionRange:
    return SelectionRange(CursorPosition(r1, c1), CursorPosition(r2, c2))


class TestTextBufferConstruction:
    """A buffer always has at least one row."""

    def test_default_is_single_empty_row(self) -> None:
        buf = TextBuffer()
        assert buf.rows == [[]]
        assert buf.line_count == 1

    def test_empty_rows_list_becomes_single_empty_row(self) -> None:
        assert TextBuffer([]).rows == [[]]

    def test_from_text_splits_lines_and_chars(self) -> None:
        buf = TextBuffer.from_text("ab\ncd")
        assert buf.rows == [["a", "b"], ["c", "d"]]

    def test_from_text_normalizes_crlf(self) -> None:
        assert TextBuffer.from_text("a\r\nb").get_lines() == ["a", "b"]

    def test_from_text_keeps_grapheme_clusters_together(self) -> None:
        buf = TextBuffer.from_text("e\u0301x")
        assert buf.rows == [["e\u0301", "x"]]
        assert buf.row_length(0) == 2

    def test_constructor_copies_rows(self) -> None:
        rows = [["a"]]
        buf = TextBuffer(rows)
        rows[0].append("b")
        assert buf.rows == [["a"]]

    def test_snapshot_is_detached(self) -> None:
        buf = TextBuffer.from_text("ab")
        snap = buf.snapshot()
        snap[0].append("c")
        assert buf.get_text() == "ab"

    def test_row_length_out_of_range_is_zero(self) -> None:
        assert TextBuffer().row_length(5) == 0


class TestInsertChar:
    """insert_char inserts at the cursor and advances it."""

    def test_insert_at_end(self) -> None:
        buf = TextBuffer.from_text("hello")
        cursor = buf.insert_char(CursorPosition(0, 5), "!", 80)
        assert buf.rows == [["h", "e", "l", "l", "o", "!"]]
        assert cursor == CursorPosition(0, 6)

    def test_insert_in_middle(self) -> None:
        buf = TextBuffer.from_text("ac")
        cursor = buf.insert_char(CursorPosition(0, 1), "b", 80)
        assert buf.get_text() == "abc"
        assert cursor == CursorPosition(0, 2)

    def test_insert_into_empty_buffer(self) -> None:
        buf = TextBuffer()
        cursor = buf.insert_char(CursorPosition(0, 0), "x", 80)
        assert buf.rows == [["x"]]
        assert cursor == CursorPosition(0, 1)

    def test_overflow_triggers_reflow(self) -> None:
        buf = TextBuffer.from_text("abc")
        cursor = buf.insert_char(CursorPosition(0, 3), "d", 3)
        assert buf.rows == [["a", "b", "c"], ["d"]]
        assert cursor == CursorPosition(1, 0)

    def test_reflow_keeps_following_rows(self) -> None:
        buf = TextBuffer.from_text("abc\nzz")
        buf.insert_char(CursorPosition(0, 3), "d", 3)
        assert buf.get_lines() == ["abc", "d", "zz"]


class TestDeleteBackward:
    """delete_backward removes the previous char or merges rows."""

    def test_delete_char_before_cursor(self) -> None:
        buf = TextBuffer.from_text("abc")
        cursor = buf.delete_backward(CursorPosition(0, 2))
        assert buf.get_text() == "ac"
        assert cursor == CursorPosition(0, 1)

    def test_merge_with_previous_row(self) -> None:
        buf = TextBuffer([["a", "b"], ["c", "d"]])
        cursor = buf.delete_backward(CursorPosition(1, 0))
        assert buf.rows == [["a", "b", "c", "d"]]
        assert cursor == CursorPosition(0, 2)

    def test_merge_empty_row(self) -> None:
        buf = TextBuffer.from_text("ab\n")
        cursor = buf.delete_backward(CursorPosition(1, 0))
        assert buf.rows == [["a", "b"]]
        assert cursor == CursorPosition(0, 2)

    def test_noop_at_buffer_start(self) -> None:
        buf = TextBuffer.from_text("abc")
        cursor = buf.delete_backward(CursorPosition(0, 0))
        assert buf.get_text() == "abc"
        assert cursor == CursorPosition(0, 0)

    def test_noop_on_empty_buffer_keeps_one_row(self) -> None:
        buf = TextBuffer()
        buf.delete_backward(CursorPosition(0, 0))
        assert buf.rows == [[]]

    def test_insert_then_backspace_round_trip(self) -> None:
        buf = TextBuffer.from_text("abcd")
        cursor = buf.insert_char(CursorPosition(0, 2), "x", 80)
        cursor = buf.delete_backward(cursor)
        assert buf.get_text() == "abcd"
        assert cursor == CursorPosition(0, 2)


class TestSplitRow:
    """split_row breaks a row at the cursor."""

    def test_split_in_middle(self) -> None:
        buf = TextBuffer.from_text("abcd")
        cursor = buf.split_row(CursorPosition(0, 2))
        assert buf.get_lines() == ["ab", "cd"]
        assert cursor == CursorPosition(1, 0)

    def test_split_at_end_creates_empty_row(self) -> None:
        buf = TextBuffer.from_text("ab")
        cursor = buf.split_row(CursorPosition(0, 2))
        assert buf.rows == [["a", "b"], []]
        assert cursor == CursorPosition(1, 0)

    def test_split_at_start(self) -> None:
        buf = TextBuffer.from_text("ab")
        buf.split_row(CursorPosition(0, 0))
        assert buf.rows == [[], ["a", "b"]]

    def test_split_then_backspace_restores_row(self) -> None:
        buf = TextBuffer.from_text("one\nhello\nthree")
        cursor = buf.split_row(CursorPosition(1, 3))
        cursor = buf.delete_backward(cursor)
        assert buf.get_lines() == ["one", "hello", "three"]
        assert cursor == CursorPosition(1, 3)


class TestDeleteRange:
    """delete_range removes a half-open range and returns its start."""

    def test_same_row(self) -> None:
        buf = TextBuffer.from_text("xyz")
        cursor = buf.delete_range(_range(0, 0, 0, 2))
        assert buf.rows == [["z"]]
        assert cursor == CursorPosition(0, 0)

    def test_cross_row_merges_prefix_and_suffix(self) -> None:
        buf = TextBuffer.from_text("abc\ndef\nghi")
        cursor = buf.delete_range(_range(0, 1, 2, 1))
        assert buf.get_lines() == ["ahi"]
        assert cursor == CursorPosition(0, 1)

    def test_cross_row_keeps_other_rows(self) -> None:
        buf = TextBuffer.from_text("top\nabc\ndef\nbottom")
        buf.delete_range(_range(1, 2, 2, 1))
        assert buf.get_lines() == ["top", "abef", "bottom"]

    def test_reversed_range_is_normalized(self) -> None:
        buf = TextBuffer.from_text("xyz")
        cursor = buf.delete_range(_range(0, 2, 0, 0))
        assert buf.get_text() == "z"
        assert cursor == CursorPosition(0, 0)

    def test_empty_range_is_noop(self) -> None:
        buf = TextBuffer.from_text("xyz")
        buf.delete_range(_range(0, 1, 0, 1))
        assert buf.get_text() == "xyz"

    def test_deleting_everything_leaves_one_empty_row(self) -> None:
        buf = TextBuffer.from_text("ab\ncd")
        buf.delete_range(_range(0, 0, 1, 2))
        assert buf.rows == [[]]


class TestReplaceInRow:
    """replace_in_row swaps a slice of a row for new text."""

    def test_replace_word(self) -> None:
        buf = TextBuffer.from_text("say foo now")
        pos = buf.replace_in_row(0, 4, 3, "bar")
        assert buf.get_text() == "say bar now"
        assert pos == CursorPosition(0, 4)

    def test_replace_with_empty_text(self) -> None:
        buf = TextBuffer.from_text("abc")
        buf.replace_in_row(0, 1, 1, "")
        assert buf.get_text() == "ac"
