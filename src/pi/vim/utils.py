"""Text utilities: display-character segmentation and width measurement."""

from __future__ import annotations

import grapheme
import wcwidth as _wcwidth


# ---------------------------------------------------------------------------
# Grapheme segmentation
# ---------------------------------------------------------------------------


def split_chars(text: str) -> list[str]:
    """Split *text* into display characters (grapheme clusters).

    A combining sequence or an emoji ZWJ sequence is a single element, so one
    element of a buffer row always occupies one cursor column.
    """
    if not text:
        return []
    return list(grapheme.graphemes(text))


def is_single_char(text: str) -> bool:
    """Return ``True`` if *text* is exactly one printable display character."""
    if not text:
        return False
    if grapheme.length(text) != 1:
        return False
    return ord(text[0]) >= 32 and text != "\x7f"


# ---------------------------------------------------------------------------
# Width measurement
# ---------------------------------------------------------------------------

_width_cache: dict[str, int] = {}
_WIDTH_CACHE_MAX = 512


def _char_width(g: str) -> int:
    cached = _width_cache.get(g)
    if cached is not None:
        return cached
    width = _wcwidth.wcswidth(g)
    if width < 0:
        # Control characters and unknown sequences: fall back to the first
        # codepoint, never negative.
        width = max(0, _wcwidth.wcwidth(g[0]))
    if len(_width_cache) >= _WIDTH_CACHE_MAX:
        _width_cache.clear()
    _width_cache[g] = width
    return width


def visible_width(text: str) -> int:
    """Calculate the terminal display width of *text*."""
    if not text:
        return 0
    if text.isascii() and text.isprintable():
        return len(text)
    return sum(_char_width(g) for g in grapheme.graphemes(text))


def truncate_to_width(text: str, max_width: int, ellipsis: str = "...") -> str:
    """Truncate *text* to fit within *max_width* visible columns.

    The ellipsis counts towards the width. Cuts happen at grapheme
    boundaries, never inside a cluster.
    """
    if max_width <= 0:
        return ""
    if visible_width(text) <= max_width:
        return text

    target = max_width - visible_width(ellipsis)
    if target <= 0:
        return _take_columns(ellipsis, max_width)
    return _take_columns(text, target) + ellipsis


def _take_columns(text: str, max_cols: int) -> str:
    out: list[str] = []
    used = 0
    for g in grapheme.graphemes(text):
        w = _char_width(g)
        if used + w > max_cols:
            break
        out.append(g)
        used += w
    return "".join(out)
