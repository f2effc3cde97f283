"""Configuration file management for profile-trophy.

Reads and writes ~/.profile-trophy/config.json for render defaults
(theme, grid limits, panel size, margins, frame/background toggles).
"""
from __future__ import annotations

import json
from pathlib import Path

from profile_trophy.errors import ConfigError

DEFAULT_CONFIG_PATH: Path = Path.home() / ".profile-trophy" / "config.json"

DEFAULT_RENDER_OPTIONS: dict = {
    "theme": "default",
    "max_column": 8,
    "max_row": 3,
    "panel_size": 110,
    "margin_width": 0,
    "margin_height": 0,
    "no_background": False,
    "no_frame": False,
}

_TRUE_WORDS = {"true", "1", "yes", "on"}
_FALSE_WORDS = {"false", "0", "no", "off"}

# Same limits as the matching render flags.
_INT_RANGES: dict = {
    "max_column": ("a positive integer or -1", lambda n: n >= 1 or n == -1),
    "max_row": ("a positive integer", lambda n: n >= 1),
    "panel_size": ("a positive integer", lambda n: n >= 1),
    "margin_width": ("a non-negative integer", lambda n: n >= 0),
    "margin_height": ("a non-negative integer", lambda n: n >= 0),
}


def load_config(config_path: Path | None = None) -> dict:
    """Load config from JSON file. Returns {} if file missing or invalid."""
    path = config_path or DEFAULT_CONFIG_PATH
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict, config_path: Path | None = None) -> None:
    """Write config dict to JSON file. Creates parent dirs if needed."""
    path = config_path or DEFAULT_CONFIG_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")


def _coerce(key: str, value: object) -> object:
    """Coerce value to the type of DEFAULT_RENDER_OPTIONS[key]. Raises ConfigError."""
    default = DEFAULT_RENDER_OPTIONS[key]
    if isinstance(default, bool):
        if isinstance(value, bool):
            return value
        word = str(value).strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
        raise ConfigError(f"'{key}' expects true/false, got {value!r}")
    if isinstance(default, int):
        if isinstance(value, bool):
            raise ConfigError(f"'{key}' expects an integer, got {value!r}")
        try:
            number = int(value)
        except (TypeError, ValueError):
            raise ConfigError(f"'{key}' expects an integer, got {value!r}") from None
        expected, valid = _INT_RANGES[key]
        if not valid(number):
            raise ConfigError(f"'{key}' must be {expected}, got {number}")
        return number
    return str(value)


def get_render_defaults(config_path: Path | None = None) -> dict:
    """Return DEFAULT_RENDER_OPTIONS overlaid with valid stored values."""
    options = dict(DEFAULT_RENDER_OPTIONS)
    stored = load_config(config_path).get("render", {})
    if not isinstance(stored, dict):
        return options
    for key, value in stored.items():
        if key not in DEFAULT_RENDER_OPTIONS:
            continue
        try:
            options[key] = _coerce(key, value)
        except ConfigError:
            continue
    return options


def set_render_default(key: str, value: object, config_path: Path | None = None) -> object:
    """Persist one render default and return the coerced value.

    Raises ConfigError for an unknown key, a value of the wrong type,
    or an integer outside the range the render flags accept.
    """
    if key not in DEFAULT_RENDER_OPTIONS:
        raise ConfigError(
            f"Unknown setting '{key}'. Known: {', '.join(sorted(DEFAULT_RENDER_OPTIONS))}"
        )
    coerced = _coerce(key, value)
    config = load_config(config_path)
    render = config.get("render")
    if not isinstance(render, dict):
        render = {}
    render[key] = coerced
    config["render"] = render
    save_config(config, config_path)
    return coerced
