"""Directional visual selection."""

from __future__ import annotations

from dataclasses import dataclass

from pi.vim.types import CursorPosition, SelectionRange


@dataclass
class Selection:
    """Anchor (where the selection started) and end (the live cursor)."""

    anchor: CursorPosition
    end: CursorPosition

    def extend_to(self, pos: CursorPosition) -> None:
        self.end = pos

    def normalized(self) -> SelectionRange:
        """Range reordered so ``start`` precedes ``end`` in row-major order."""
        return SelectionRange(start=min(self.anchor, self.end), end=max(self.anchor, self.end))

    def contains(self, row: int, col: int) -> bool:
        return self.normalized().contains(row, col)


def begin_selection(cursor: CursorPosition) -> Selection:
    return Selection(anchor=cursor, end=cursor)


def is_selected(selection: Selection | SelectionRange | None, row: int, col: int) -> bool:
    """Return ``True`` if (*row*, *col*) lies in the half-open selection range."""
    if selection is None:
        return False
    return selection.contains(row, col)
