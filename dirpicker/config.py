"""Persistent JSON config helpers.

Stores start-root overrides and the hidden-entry preference.
Malformed or missing config falls back to built-in defaults.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

logger = logging.getLogger(__name__)

APP_NAME = "dirpicker"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


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

    Write failures are logged and otherwise ignored so a read-only config
    directory never breaks a browsing session.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        logger.debug("could not write config %s: %s", CONFIG_PATH, exc)


def _load_path(key: str) -> Path | None:
    value = load_config().get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return Path(stripped).expanduser() if stripped else None


def load_start_roots() -> tuple[Path | None, Path | None]:
    """Return configured ``(preferred_root, secondary_root)`` overrides.

    Only non-empty strings are accepted; anything else reads as unset.
    """
    return _load_path("preferred_root"), _load_path("secondary_root")


def save_start_roots(preferred_root: Path | None, secondary_root: Path | None = None) -> None:
    """Persist start-root overrides; ``None`` removes a key."""
    config = load_config()
    for key, value in (("preferred_root", preferred_root), ("secondary_root", secondary_root)):
        if value is None:
            config.pop(key, None)
        else:
            config[key] = str(value)
    save_config(config)


def load_show_hidden() -> bool:
    """Return persisted hidden-entry visibility preference.

    Only explicit boolean values are accepted; any other type falls back to
    ``True`` so listings show every child by default.
    """
    value = load_config().get("show_hidden")
    return value if isinstance(value, bool) else True


def save_show_hidden(show_hidden: bool) -> None:
    """Persist hidden-entry visibility preference as a boolean."""
    config = load_config()
    config["show_hidden"] = bool(show_hidden)
    save_config(config)
