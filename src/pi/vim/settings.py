"""Editor settings with JSON and environment overrides.

Precedence: environment > settings file > defaults. Settings problems are
logged and fall back to defaults; they never stop the editor from starting.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pi.vim.keybindings import EditorKeybindingsConfig

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = ".pi"
SETTINGS_FILE_NAME = "vim.json"

DEFAULT_LINE_WIDTH = 80
MIN_LINE_WIDTH = 40

LINE_WIDTH_ENV = "PI_VIM_LINE_WIDTH"


def clamp_line_width(value: Any, minimum: int = MIN_LINE_WIDTH) -> int:
    """Default 80 for anything that is not a positive integer; floor at *minimum*."""
    if isinstance(value, bool):
        return DEFAULT_LINE_WIDTH
    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            return DEFAULT_LINE_WIDTH
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if not isinstance(value, int) or value <= 0:
        return DEFAULT_LINE_WIDTH
    return max(minimum, value)


def _is_binding(value: Any) -> bool:
    if isinstance(value, str):
        return True
    return isinstance(value, list) and all(isinstance(k, str) for k in value)


def _valid_keybindings(config: dict[str, Any]) -> EditorKeybindingsConfig:
    """Keep entries bound to a key string or a list of key strings."""
    valid: EditorKeybindingsConfig = {}
    for action, keys in config.items():
        if not _is_binding(keys):
            logger.warning("ignoring keybinding for %s: expected a string or list of strings, got %r", action, keys)
            continue
        valid[action] = keys
    return valid


@dataclass
class EditorSettings:
    """Settings consumed by ``ModalEditor``."""

    line_width: int = DEFAULT_LINE_WIDTH
    keybindings: EditorKeybindingsConfig = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.line_width = clamp_line_width(self.line_width)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EditorSettings:
        """Build settings from a JSON-style dict (camelCase keys)."""
        keybindings = data.get("keybindings") or {}
        if not isinstance(keybindings, dict):
            logger.warning("ignoring keybindings: expected an object, got %s", type(keybindings).__name__)
            keybindings = {}
        return cls(
            line_width=data.get("lineWidth", DEFAULT_LINE_WIDTH),
            keybindings=_valid_keybindings(keybindings),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"lineWidth": self.line_width, "keybindings": dict(self.keybindings)}


def get_config_dir() -> Path:
    return Path(os.environ.get("PI_CONFIG_DIR", Path.home() / CONFIG_DIR_NAME))


def get_settings_path() -> Path:
    return get_config_dir() / SETTINGS_FILE_NAME


def _read_settings_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("could not read settings from %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("settings file %s does not contain an object", path)
        return {}
    return data


def load_settings(path: Path | None = None) -> EditorSettings:
    """Load settings from *path* (default ``~/.pi/vim.json``), then the environment."""
    data = _read_settings_file(path if path is not None else get_settings_path())
    settings = EditorSettings.from_dict(data)

    env_width = os.environ.get(LINE_WIDTH_ENV)
    if env_width is not None:
        settings.line_width = clamp_line_width(env_width)

    return settings
