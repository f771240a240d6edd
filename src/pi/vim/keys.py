"""Logical key identifiers and normalisation of incoming key events.

The editor understands seven named keys plus single display characters.
``normalize_key`` maps the spellings a collaborator is likely to hand over
(lower-case key ids, raw terminal bytes, legacy escape sequences) onto
those names.
"""

from __future__ import annotations

from pi.vim.utils import is_single_char

KeyId = str


class Key:
    """Named key constants."""

    escape = "Escape"
    backspace = "Backspace"
    enter = "Enter"
    up = "ArrowUp"
    down = "ArrowDown"
    left = "ArrowLeft"
    right = "ArrowRight"


NAMED_KEYS: frozenset[str] = frozenset(
    {Key.escape, Key.backspace, Key.enter, Key.up, Key.down, Key.left, Key.right}
)

# Lower-case ids as used by terminal keybinding configs
KEY_ALIASES: dict[str, KeyId] = {
    "escape": Key.escape,
    "esc": Key.escape,
    "backspace": Key.backspace,
    "enter": Key.enter,
    "return": Key.enter,
    "up": Key.up,
    "down": Key.down,
    "left": Key.left,
    "right": Key.right,
    "space": " ",
}

# Raw terminal input
LEGACY_KEY_SEQUENCES: dict[str, KeyId] = {
    "\x1b": Key.escape,
    "\r": Key.enter,
    "\n": Key.enter,
    "\x7f": Key.backspace,
    "\x08": Key.backspace,
    "\x1b[A": Key.up,
    "\x1b[B": Key.down,
    "\x1b[C": Key.right,
    "\x1b[D": Key.left,
    "\x1bOA": Key.up,
    "\x1bOB": Key.down,
    "\x1bOC": Key.right,
    "\x1bOD": Key.left,
}


def is_named_key(key: str) -> bool:
    return key in NAMED_KEYS


def normalize_key(data: str) -> KeyId | None:
    """Return the logical key for *data*, or ``None`` if it is not understood.

    Single display characters are returned as-is, so ``"k"`` and ``"K"`` stay
    distinct. Anything else goes through the named, alias and raw-sequence
    tables.
    """
    if not data:
        return None

    if data in NAMED_KEYS:
        return data

    legacy = LEGACY_KEY_SEQUENCES.get(data)
    if legacy is not None:
        return legacy

    if is_single_char(data):
        return data

    return KEY_ALIASES.get(data.lower())
