"""Normal/Visual mode keybindings manager.

Bindings map an action to one or more key sequences. A sequence is a single
key (``"ArrowUp"``, ``"$"``), a run of characters (``"gg"``) or
space-separated keys (``"g g"``).
"""

from __future__ import annotations

from typing import Literal

from pi.vim.keys import KeyId, normalize_key
from pi.vim.utils import split_chars

EditorAction = Literal[
    # Cursor movement
    "cursorUp",
    "cursorDown",
    "cursorLeft",
    "cursorRight",
    "cursorLineStart",
    "cursorLineEnd",
    "cursorFirstNonBlank",
    "bufferStart",
    "bufferEnd",
    # Mode entry
    "enterInsert",
    "enterVisual",
    "enterCommand",
    "enterSearch",
    # Editing
    "deleteSelection",
]

KeySequence = tuple[KeyId, ...]

EditorKeybindingsConfig = dict[EditorAction, str | list[str]]

DEFAULT_EDITOR_KEYBINDINGS: dict[EditorAction, str | list[str]] = {
    # Cursor movement
    "cursorUp": ["ArrowUp", "k"],
    "cursorDown": ["ArrowDown", "j"],
    "cursorLeft": ["ArrowLeft", "h"],
    "cursorRight": ["ArrowRight", "l"],
    "cursorLineStart": "0",
    "cursorLineEnd": "$",
    "cursorFirstNonBlank": ["^", "_"],
    "bufferStart": "gg",
    "bufferEnd": "G",
    # Mode entry
    "enterInsert": "i",
    "enterVisual": "v",
    "enterCommand": ":",
    "enterSearch": "/",
    # Editing
    "deleteSelection": "d",
}

NAVIGATION_ACTIONS: frozenset[EditorAction] = frozenset(
    {
        "cursorUp",
        "cursorDown",
        "cursorLeft",
        "cursorRight",
        "cursorLineStart",
        "cursorLineEnd",
        "cursorFirstNonBlank",
        "bufferStart",
        "bufferEnd",
    }
)


def parse_key_sequence(binding: str) -> KeySequence:
    """Turn a binding string into the tuple of logical keys it stands for.

    Anything that is not a string yields an empty sequence.
    """
    if not isinstance(binding, str):
        return ()
    single = normalize_key(binding)
    if single is not None:
        return (single,)
    if " " in binding.strip():
        keys = [normalize_key(part) for part in binding.split()]
        return tuple(k for k in keys if k is not None)
    return tuple(split_chars(binding))


class EditorKeybindingsManager:
    """Manages keybindings for Normal and Visual mode."""

    def __init__(self, config: EditorKeybindingsConfig | None = None) -> None:
        self._action_to_keys: dict[EditorAction, list[str]] = {}
        self._sequence_to_action: dict[KeySequence, EditorAction] = {}
        self._prefixes: set[KeySequence] = set()
        self._build_maps(config or {})

    def _build_maps(self, config: EditorKeybindingsConfig) -> None:
        self._action_to_keys.clear()

        # Start with defaults
        for action, keys in DEFAULT_EDITOR_KEYBINDINGS.items():
            key_array = keys if isinstance(keys, list) else [keys]
            self._action_to_keys[action] = list(key_array)

        # Override with user config
        for action, keys in config.items():
            key_array = keys if isinstance(keys, list) else [keys]
            self._action_to_keys[action] = list(key_array)

        self._sequence_to_action.clear()
        self._prefixes.clear()
        for action, key_array in self._action_to_keys.items():
            for binding in key_array:
                sequence = parse_key_sequence(binding)
                if not sequence:
                    continue
                self._sequence_to_action[sequence] = action
                for i in range(1, len(sequence)):
                    self._prefixes.add(sequence[:i])

    def resolve(self, sequence: KeySequence) -> EditorAction | None:
        """Action bound to exactly *sequence*, if any."""
        return self._sequence_to_action.get(sequence)

    def is_prefix(self, sequence: KeySequence) -> bool:
        """``True`` if *sequence* is the start of a longer binding."""
        return sequence in self._prefixes

    def matches(self, key: KeyId, action: EditorAction) -> bool:
        """Check if a single key is bound to *action*."""
        return self._sequence_to_action.get((key,)) == action

    def get_keys(self, action: EditorAction) -> list[str]:
        """Get keys bound to an action."""
        return self._action_to_keys.get(action, [])

    def set_config(self, config: EditorKeybindingsConfig) -> None:
        """Update configuration."""
        self._build_maps(config)
