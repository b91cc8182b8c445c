"""Persistent JSON config helpers.

Stores the label alphabet, UI theme, and syntax style preferences.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from .jump.labels import LabelAlphabet

APP_NAME = "labeljump"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH
DEFAULT_SYNTAX_STYLE = "monokai"


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

    Any filesystem/serialization error is ignored to keep runtime behavior
    non-fatal when config cannot be written.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
        pass


def _load_stripped_string(key: str) -> str | None:
    value = load_config().get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_label_alphabet() -> LabelAlphabet:
    """Return the persisted label alphabet, or the default A-Z alphabet.

    Values that are not strings or do not form a valid alphabet (empty,
    repeated glyphs, whitespace) are ignored.
    """
    value = _load_stripped_string("labels")
    if value is None:
        return LabelAlphabet()
    try:
        return LabelAlphabet(value)
    except ValueError:
        return LabelAlphabet()


def save_label_alphabet(alphabet: LabelAlphabet) -> None:
    config = load_config()
    config["labels"] = "".join(alphabet)
    save_config(config)


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    return _load_stripped_string("theme")


def save_theme_name(theme_name: str) -> None:
    """Persist selected UI theme name."""
    stripped = str(theme_name).strip()
    if not stripped:
        return
    config = load_config()
    config["theme"] = stripped
    save_config(config)


def load_syntax_style() -> str:
    """Return the persisted Pygments style name, defaulting to monokai."""
    return _load_stripped_string("style") or DEFAULT_SYNTAX_STYLE


def save_syntax_style(style: str) -> None:
    """Persist the Pygments style name used for source highlighting."""
    stripped = str(style).strip()
    if not stripped:
        return
    config = load_config()
    config["style"] = stripped
    save_config(config)
