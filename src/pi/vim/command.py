"""Colon-command mini-language and the buffer search it relies on.

Only the substitute form ``s/<search>/<replace>`` is recognised. Fields are
split on ``/``; missing trailing fields are empty strings and anything past
the third field is ignored.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pi.vim.buffer import TextBuffer
from pi.vim.types import CursorPosition, Row
from pi.vim.utils import split_chars

logger = logging.getLogger(__name__)

SUBSTITUTE_PREFIX = "s/"


@dataclass(frozen=True)
class SubstituteCommand:
    """Parsed ``s/search/replace``."""

    search: str
    replace: str


def parse_command(text: str) -> SubstituteCommand | None:
    """Parse a colon command (without the leading ``:``).

    Returns ``None`` for anything that is not a substitute command.
    """
    if not text.startswith(SUBSTITUTE_PREFIX):
        return None

    fields = text.split("/")
    search = fields[1] if len(fields) > 1 else ""
    replace = fields[2] if len(fields) > 2 else ""
    if len(fields) < 3:
        logger.debug("substitute command %r has no replacement field; using ''", text)
    return SubstituteCommand(search=search, replace=replace)


# ---------------------------------------------------------------------------
# Search / substitute over the buffer
# ---------------------------------------------------------------------------


def _find_in_row(row: Row, needle: Row, start: int = 0, stop: int | None = None) -> int:
    """Index of the first match of *needle* in ``row[start:]`` beginning before *stop*, or -1."""
    last = len(row) - len(needle)
    if stop is not None:
        last = min(last, stop - 1)
    for i in range(max(0, start), last + 1):
        if row[i : i + len(needle)] == needle:
            return i
    return -1


def find_next(buffer: TextBuffer, pos: CursorPosition, query: str) -> CursorPosition | None:
    """Next occurrence of *query* after *pos*, wrapping past the end of the buffer.

    The match at *pos* itself is found last, after a full wrap. Returns
    ``None`` for an empty query or when nothing matches.
    """
    needle = split_chars(query)
    if not needle:
        return None

    count = buffer.line_count
    row = max(0, min(pos.row, count - 1))

    col = _find_in_row(buffer.get_row(row), needle, start=pos.col + 1)
    if col >= 0:
        return CursorPosition(row, col)

    for offset in range(1, count):
        r = (row + offset) % count
        col = _find_in_row(buffer.get_row(r), needle)
        if col >= 0:
            return CursorPosition(r, col)

    col = _find_in_row(buffer.get_row(row), needle, stop=pos.col + 1)
    if col >= 0:
        return CursorPosition(row, col)
    return None


def substitute(buffer: TextBuffer, row: int, command: SubstituteCommand) -> CursorPosition | None:
    """Replace the first occurrence of ``command.search`` in *row*.

    Returns the start of the replacement, or ``None`` if there was nothing to
    replace.
    """
    needle = split_chars(command.search)
    if not needle:
        return None

    col = _find_in_row(buffer.get_row(row), needle)
    if col < 0:
        logger.debug("pattern %r not found on row %d", command.search, row)
        return None
    return buffer.replace_in_row(row, col, len(needle), command.replace)
