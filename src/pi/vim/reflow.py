"""Character-count line wrapping.

Rows are wrapped greedily into chunks of exactly ``width`` characters; the
last chunk holds the remainder. There is no word awareness: a word may be
split across rows.
"""

from __future__ import annotations

import logging

from pi.vim.types import CursorPosition, Row

logger = logging.getLogger(__name__)


def wrap_line(row: Row, width: int) -> list[Row]:
    """Split *row* into chunks of at most *width* characters.

    A row that already fits is returned unchanged as ``[row]``. Otherwise
    every chunk but the last holds exactly *width* characters and the last
    holds the remaining ``1..width``.
    """
    if width <= 0 or len(row) <= width:
        return [row]
    return [row[i : i + width] for i in range(0, len(row), width)]


def reflow_row(rows: list[Row], index: int, width: int) -> CursorPosition | None:
    """Re-wrap ``rows[index]`` in place if it exceeds *width*.

    Returns the relocated cursor (last produced chunk, on its final
    character), or ``None`` when the row fits and nothing changed.
    The cursor lands there even when the overflowing insert was mid-row.
    """
    chunks = wrap_line(rows[index], width)
    if len(chunks) == 1:
        return None

    rows[index : index + 1] = chunks
    last_row = index + len(chunks) - 1
    logger.debug("reflowed row %d into %d rows at width %d", index, len(chunks), width)
    return CursorPosition(last_row, len(chunks[-1]) - 1)
