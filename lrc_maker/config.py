from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass, replace
from pathlib import Path
from typing import Any

from lrc_maker.lrc.export import LINE_TERMINATORS, FormatOptions
from lrc_maker.lrc.timecode import PRECISIONS

logger = logging.getLogger(__name__)

DEFAULT_THEME_COLOR = "#f58ea8"  # pink


def _config_dir() -> Path:
    xdg = os.getenv("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "lrc-maker"
    return Path.home() / ".config" / "lrc-maker"


def _config_file() -> Path:
    return _config_dir() / "config.json"


@dataclass(frozen=True)
class Preferences:
    # Locale
    lang: str = "en-US"

    # Serialization
    space_start: int = 1
    space_end: int = 0
    precision: int = 3
    line_terminator: str = "\r\n"

    # Player
    built_in_audio: bool = False
    screen_button: bool = False
    theme_color: str = DEFAULT_THEME_COLOR

    def format_options(self) -> FormatOptions:
        return FormatOptions(
            space_start=self.space_start,
            space_end=self.space_end,
            precision=self.precision,
            line_terminator=self.line_terminator,
        )


# stored key -> field name; stored keys keep their historical camelCase names
STORED_KEYS: dict[str, str] = {
    "lang": "lang",
    "spaceStart": "space_start",
    "spaceEnd": "space_end",
    "fixed": "precision",
    "lineTerminator": "line_terminator",
    "builtInAudio": "built_in_audio",
    "screenButton": "screen_button",
    "themeColor": "theme_color",
}


def is_valid_preference(key: str, value: Any) -> bool:
    name = STORED_KEYS.get(key)
    if name is None:
        return False
    if name in ("space_start", "space_end"):
        return isinstance(value, int) and not isinstance(value, bool)
    if name == "precision":
        return isinstance(value, int) and not isinstance(value, bool) and value in PRECISIONS
    if name == "line_terminator":
        return value in LINE_TERMINATORS
    if name in ("built_in_audio", "screen_button"):
        return isinstance(value, bool)
    # lang, theme_color
    return isinstance(value, str) and bool(value)


def merge_preferences(base: Preferences, data: dict[str, Any]) -> Preferences:
    """Take recognized keys one by one; unknown keys and bad values are skipped."""
    changes: dict[str, Any] = {}
    for key, name in STORED_KEYS.items():
        if key not in data:
            continue
        value = data[key]
        if is_valid_preference(key, value):
            changes[name] = value
        else:
            logger.warning("Ignoring stored preference %s=%r", key, value)
    return replace(base, **changes)


def restore_preferences(stored: str | None, base: Preferences | None = None) -> Preferences:
    """
    Corrupt or missing state means defaults; never raises.
    """
    prefs = base or Preferences()
    if not stored:
        return prefs
    try:
        data = json.loads(stored)
    except ValueError as e:
        logger.warning("Stored preferences are not valid JSON, using defaults: %s", e)
        return prefs
    if not isinstance(data, dict):
        logger.warning("Stored preferences are not an object, using defaults")
        return prefs
    return merge_preferences(prefs, data)


def dump_preferences(prefs: Preferences) -> str:
    by_name = asdict(prefs)
    data = {key: by_name[name] for key, name in STORED_KEYS.items()}
    return json.dumps(data, indent=2, ensure_ascii=False)


def load_preferences() -> Preferences:
    # Priority: config.json → LRC_MAKER_LANG → defaults
    base = Preferences()
    env_lang = os.getenv("LRC_MAKER_LANG")
    if env_lang:
        base = replace(base, lang=env_lang)

    cfg_path = _config_file()
    stored: str | None = None
    if cfg_path.exists():
        try:
            stored = cfg_path.read_text(encoding="utf-8")
        except OSError as e:
            logger.warning("Cannot read %s: %s", cfg_path, e)
    return restore_preferences(stored, base)


def save_preferences(prefs: Preferences) -> Path:
    cfg_path = _config_file()
    cfg_path.parent.mkdir(parents=True, exist_ok=True)
    cfg_path.write_text(dump_preferences(prefs), encoding="utf-8")
    return cfg_path
