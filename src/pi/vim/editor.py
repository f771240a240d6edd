"""Modal editor state machine.

``ModalEditor`` owns the buffer, cursor, selection, mode and the scratch
strings of the command-line modes. Each key event is processed to
completion by the handler of the active mode; the state machine does no
I/O and never raises on key input.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from pi.vim.buffer import TextBuffer
from pi.vim.command import SubstituteCommand, find_next, parse_command, substitute
from pi.vim.cursor import (
    Motion,
    buffer_end,
    buffer_start,
    clamp,
    first_non_blank,
    line_end,
    line_start,
    move_down,
    move_left,
    move_right,
    move_up,
)
from pi.vim.keybindings import (
    NAVIGATION_ACTIONS,
    EditorAction,
    EditorKeybindingsManager,
    KeySequence,
)
from pi.vim.keys import Key, KeyId, is_named_key, normalize_key
from pi.vim.selection import Selection, begin_selection
from pi.vim.settings import EditorSettings, clamp_line_width
from pi.vim.types import CursorPosition, Mode, Row, SelectionRange
from pi.vim.utils import split_chars, truncate_to_width

logger = logging.getLogger(__name__)

_MOTIONS: dict[EditorAction, Motion] = {
    "cursorUp": move_up,
    "cursorDown": move_down,
    "cursorLeft": move_left,
    "cursorRight": move_right,
    "cursorLineStart": line_start,
    "cursorLineEnd": line_end,
    "cursorFirstNonBlank": first_non_blank,
    "bufferStart": buffer_start,
    "bufferEnd": buffer_end,
}

_VERTICAL_ACTIONS = frozenset({"cursorUp", "cursorDown"})

_MODE_ENTRY: dict[EditorAction, Mode] = {
    "enterInsert": "insert",
    "enterVisual": "visual",
    "enterCommand": "command",
    "enterSearch": "search",
}


def _drop_last_char(text: str) -> str:
    return "".join(split_chars(text)[:-1])


class ModalEditor:
    """Vim-style modal editing session.

    Modes: normal (initial), insert, visual, command, search, replace.
    ``Escape`` returns to normal from anywhere and clears the selection and
    every scratch string.
    """

    def __init__(
        self,
        settings: EditorSettings | None = None,
        text: str = "",
        line_width: int | None = None,
    ) -> None:
        if settings is None:
            settings = EditorSettings()
        if line_width is None:
            line_width = settings.line_width

        self._buffer = TextBuffer.from_text(text) if text else TextBuffer()
        self._cursor = CursorPosition(0, 0)
        self._mode: Mode = "normal"
        self._selection: Selection | None = None

        # Scratch strings of the command-line modes
        self._command: str = ""
        self._search_query: str = ""
        self._replace_query: str = ""

        self._line_width: int = clamp_line_width(line_width, minimum=1)
        self._keybindings = EditorKeybindingsManager(settings.keybindings)

        # Keys typed so far of a multi-key binding such as "gg"
        self._pending_keys: KeySequence = ()

        # Desired column for vertical movement (sticky column)
        self._preferred_col: int | None = None

        self._handlers: dict[Mode, Callable[[KeyId], None]] = {
            "normal": self._handle_normal,
            "insert": self._handle_insert,
            "visual": self._handle_visual,
            "command": self._handle_command,
            "search": self._handle_search,
            "replace": self._handle_replace,
        }

    # -- Queryable state -----------------------------------------------------

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def cursor(self) -> CursorPosition:
        return self._cursor

    @property
    def rows(self) -> list[Row]:
        """Detached copy of the buffer rows."""
        return self._buffer.snapshot()

    @property
    def lines(self) -> list[str]:
        return self._buffer.get_lines()

    def get_text(self) -> str:
        return self._buffer.get_text()

    @property
    def selection(self) -> SelectionRange | None:
        """Normalized selection range, or ``None`` when nothing is selected."""
        return self._selection.normalized() if self._selection is not None else None

    @property
    def command(self) -> str:
        return self._command

    @property
    def search_query(self) -> str:
        return self._search_query

    @property
    def replace_query(self) -> str:
        return self._replace_query

    @property
    def pending_keys(self) -> str:
        return "".join(self._pending_keys)

    @property
    def line_width(self) -> int:
        return self._line_width

    @line_width.setter
    def line_width(self, value: int) -> None:
        # Supplied by the collaborator, which applies its own floor. Existing
        # rows are not re-wrapped; only the next overflowing insert is.
        self._line_width = clamp_line_width(value, minimum=1)

    @property
    def keybindings(self) -> EditorKeybindingsManager:
        return self._keybindings

    def is_selected(self, row: int, col: int) -> bool:
        return self._selection is not None and self._selection.contains(row, col)

    def status_line(self, width: int | None = None) -> str:
        """Mode indicator, followed by the scratch string of command-line modes."""
        text = f"Mode: {self._mode.upper()}"
        if self._mode == "command":
            text += f":{self._command}"
        elif self._mode == "search":
            text += f"/{self._search_query}"
        elif self._mode == "replace":
            text += f"s/{self._search_query}/{self._replace_query}"
        if width is None:
            return text
        return truncate_to_width(text, width)

    # -- Input ---------------------------------------------------------------

    def handle_key(self, data: str) -> None:
        """Process one key event."""
        key = normalize_key(data)
        if key is None:
            logger.debug("ignoring unknown key %r in %s mode", data, self._mode)
            return

        if key == Key.escape:
            self._escape()
            return

        self._handlers[self._mode](key)

    def feed(self, keys: Iterable[str]) -> None:
        """Process a sequence of key events in order."""
        for key in keys:
            self.handle_key(key)

    # -- Mode transitions ----------------------------------------------------

    def _escape(self) -> None:
        self._pending_keys = ()
        self._set_mode("normal")

    def _set_mode(self, mode: Mode) -> None:
        previous = self._mode
        if previous != mode:
            logger.debug("mode %s -> %s", previous, mode)
        self._mode = mode

        if mode != "visual":
            self._selection = None
        if mode == "normal":
            self._command = ""
            self._search_query = ""
            self._replace_query = ""

        if mode in ("insert", "visual") and previous != mode:
            self._cursor = clamp(self._cursor, self._buffer)
            self._preferred_col = None
        if mode == "visual" and previous != "visual":
            self._selection = begin_selection(self._cursor)

    # -- Normal / Visual -----------------------------------------------------

    def _handle_normal(self, key: KeyId) -> None:
        action = self._resolve_action(key)
        if action is None:
            return

        if action in NAVIGATION_ACTIONS:
            self._move(action)
        elif action in _MODE_ENTRY:
            self._set_mode(_MODE_ENTRY[action])
        elif action == "deleteSelection":
            self._delete_selection()

    def _handle_visual(self, key: KeyId) -> None:
        action = self._resolve_action(key)
        if action is None:
            return

        if action in NAVIGATION_ACTIONS:
            self._move(action)
        elif action == "deleteSelection":
            self._delete_selection()

    def _resolve_action(self, key: KeyId) -> EditorAction | None:
        """Feed *key* into the pending sequence and return a completed action."""
        kb = self._keybindings
        sequence = self._pending_keys + (key,)

        action = kb.resolve(sequence)
        if action is None and kb.is_prefix(sequence):
            self._pending_keys = sequence
            return None

        self._pending_keys = ()
        if action is not None or len(sequence) == 1:
            return action

        # The pending prefix went nowhere: start over with this key alone.
        if kb.is_prefix((key,)):
            self._pending_keys = (key,)
            return None
        return kb.resolve((key,))

    def _move(self, action: EditorAction) -> None:
        motion = _MOTIONS[action]
        origin = self._cursor

        if action in _VERTICAL_ACTIONS:
            col = self._preferred_col if self._preferred_col is not None else origin.col
            target = motion(origin.with_col(col), self._buffer)
            self._preferred_col = col
        else:
            target = motion(origin, self._buffer)
            self._preferred_col = None
        self._cursor = clamp(target, self._buffer)

        if self._mode == "visual":
            if self._selection is None:
                self._selection = begin_selection(origin)
            self._selection.extend_to(self._cursor)

    def _delete_selection(self) -> None:
        if self._selection is None:
            return
        rng = self._selection.normalized()
        self._cursor = self._buffer.delete_range(rng)
        self._selection = None
        self._preferred_col = None

    # -- Insert --------------------------------------------------------------

    def _handle_insert(self, key: KeyId) -> None:
        if key == Key.enter:
            self._cursor = self._buffer.split_row(self._cursor)
        elif key == Key.backspace:
            self._cursor = self._buffer.delete_backward(self._cursor)
        elif not is_named_key(key):
            self._cursor = self._buffer.insert_char(self._cursor, key, self._line_width)
        else:
            return
        self._preferred_col = None

    # -- Command line modes --------------------------------------------------

    def _handle_command(self, key: KeyId) -> None:
        if key == Key.enter:
            self._execute_command()
        elif key == Key.backspace:
            self._command = _drop_last_char(self._command)
        elif not is_named_key(key):
            self._command += key

    def _execute_command(self) -> None:
        text = self._command
        self._command = ""

        parsed = parse_command(text)
        if parsed is None:
            logger.debug("ignoring unsupported command %r", text)
            self._set_mode("normal")
            return

        self._search_query = parsed.search
        self._replace_query = parsed.replace
        self._set_mode("replace")

    def _handle_search(self, key: KeyId) -> None:
        if key == Key.enter:
            match = find_next(self._buffer, self._cursor, self._search_query)
            if match is not None:
                self._cursor = match
                self._preferred_col = None
            else:
                logger.debug("no match for %r", self._search_query)
            self._set_mode("normal")
        elif key == Key.backspace:
            self._search_query = _drop_last_char(self._search_query)
        elif not is_named_key(key):
            self._search_query += key

    def _handle_replace(self, key: KeyId) -> None:
        if key != Key.enter:
            return

        command = SubstituteCommand(search=self._search_query, replace=self._replace_query)
        pos = substitute(self._buffer, self._cursor.row, command)
        if pos is not None:
            self._cursor = pos
            self._preferred_col = None
        self._set_mode("normal")
