"""pi-vim: modal text-editing kernel (buffer, cursor, selection, modes, reflow)."""

from pi.vim.buffer import TextBuffer
from pi.vim.command import SubstituteCommand, find_next, parse_command, substitute
from pi.vim.cursor import (
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
from pi.vim.editor import ModalEditor
from pi.vim.keybindings import (
    DEFAULT_EDITOR_KEYBINDINGS,
    EditorAction,
    EditorKeybindingsManager,
)
from pi.vim.keys import Key, KeyId, normalize_key
from pi.vim.reflow import reflow_row, wrap_line
from pi.vim.selection import Selection, begin_selection, is_selected
from pi.vim.settings import EditorSettings, clamp_line_width, load_settings
from pi.vim.types import MODES, CursorPosition, Mode, Row, SelectionRange

__all__ = [
    # Editor
    "ModalEditor",
    # Buffer and reflow
    "TextBuffer",
    "reflow_row",
    "wrap_line",
    # Cursor
    "CursorPosition",
    "buffer_end",
    "buffer_start",
    "clamp",
    "first_non_blank",
    "line_end",
    "line_start",
    "move_down",
    "move_left",
    "move_right",
    "move_up",
    # Selection
    "Selection",
    "SelectionRange",
    "begin_selection",
    "is_selected",
    # Commands
    "SubstituteCommand",
    "find_next",
    "parse_command",
    "substitute",
    # Keys and bindings
    "DEFAULT_EDITOR_KEYBINDINGS",
    "EditorAction",
    "EditorKeybindingsManager",
    "Key",
    "KeyId",
    "normalize_key",
    # Settings
    "EditorSettings",
    "clamp_line_width",
    "load_settings",
    # Types
    "MODES",
    "Mode",
    "Row",
]
