"""Persistent JSON config helpers.

Stores extra ignore names, the CLI log level, and the separator used for
ancestor-path walks. All access is defensive: malformed or missing config
falls back safely.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "assettree"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_LOG_LEVEL = "WARNING"
_VALID_SEPARATORS = ("/", "\\")


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Any filesystem/serialization error is ignored to keep callers non-fatal
    when config cannot be written.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
        pass


def load_extra_ignore_names() -> frozenset[str]:
    """Return user-configured names to hide in addition to the built-in list.

    Non-string and blank entries are dropped.
    """
    value = load_config().get("extra_ignore_names")
    if not isinstance(value, list):
        return frozenset()
    return frozenset(item for item in value if isinstance(item, str) and item.strip())


def save_extra_ignore_names(names: list[str]) -> None:
    """Replace the configured extra ignore names, dropping blanks and duplicates."""
    config = load_config()
    config["extra_ignore_names"] = sorted({name for name in names if name.strip()})
    save_config(config)


def load_log_level() -> str:
    """Return the configured log level name, ``WARNING`` when unset or invalid."""
    value = load_config().get("log_level")
    if not isinstance(value, str) or not value.strip():
        return DEFAULT_LOG_LEVEL
    return value.strip().upper()


def load_path_separator() -> str:
    """Return the separator used to split URIs, defaulting to the platform's."""
    value = load_config().get("path_separator")
    return value if value in _VALID_SEPARATORS else os.sep
