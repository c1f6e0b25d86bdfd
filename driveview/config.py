"""Persistent JSON config helpers.

Stores the store origin, highlight style, and request timeout.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from .fetch import DEFAULT_TIMEOUT
from .permalink import normalize_origin
from .preview.syntax import DEFAULT_STYLE

APP_NAME = "driveview"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are ignored to keep runtime behavior non-fatal when
    config cannot be written.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def load_origin() -> str | None:
    """Load the persisted store origin, returning ``None`` when unset/invalid."""
    value = load_config().get("origin")
    if not isinstance(value, str):
        return None
    stripped = normalize_origin(value.strip())
    return stripped if stripped else None


def save_origin(origin: str) -> None:
    stripped = normalize_origin(str(origin).strip())
    if not stripped:
        return
    config = load_config()
    config["origin"] = stripped
    save_config(config)


def load_style() -> str:
    value = load_config().get("style")
    if not isinstance(value, str) or not value.strip():
        return DEFAULT_STYLE
    return value.strip()


def load_timeout() -> float:
    """Return the request timeout in seconds.

    Booleans, non-numbers, and non-positive values fall back to the default.
    """
    value = load_config().get("timeout")
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        return DEFAULT_TIMEOUT
    return float(value)


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "load_config",
    "save_config",
    "load_origin",
    "save_origin",
    "load_style",
    "load_timeout",
]
