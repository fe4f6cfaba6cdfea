# rulepass/config.py
"""
Simple settings persistence for RulePass.
Settings saved as JSON in %APPDATA%/RulePass/config.json (Windows) or ~/.rulepass/config.json (fallback).
RULEPASS_CONFIG_DIR overrides the directory.
"""

import os
import json
import logging
from typing import Dict, Any

from .charsets import resolve_class

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "length": 16,
    "max_attempts": 50,
    "classes": ["lower", "upper", "numbers", "special"],
    "no_adjacent_repeats": False,
}

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")

def _appdata_dir() -> str:
    override = os.getenv("RULEPASS_CONFIG_DIR")
    appdata = os.getenv("APPDATA")
    if override:
        d = override
    elif appdata:
        d = os.path.join(appdata, "RulePass")
    else:
        d = os.path.join(os.path.expanduser("~"), ".rulepass")
    os.makedirs(d, exist_ok=True)
    return d

def config_path() -> str:
    return os.path.join(_appdata_dir(), "config.json")

def _defaults() -> Dict[str, Any]:
    out = DEFAULTS.copy()
    out["classes"] = list(DEFAULTS["classes"])
    return out

def _as_int(key: str, value: Any, minimum: int) -> int:
    if isinstance(value, str):
        value = int(value.strip())
    elif isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key} must be an integer, got {value!r}")
    if value < minimum:
        raise ValueError(f"{key} must be >= {minimum}, got {value}")
    return value

def _as_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        if value.strip().lower() in _TRUE:
            return True
        if value.strip().lower() in _FALSE:
            return False
    raise ValueError(f"{key} expects true/false, got {value!r}")

def _as_classes(value: Any) -> list:
    # "lower,upper" from the command line, a list in the JSON file
    if isinstance(value, str):
        value = value.split(",")
    if not isinstance(value, list) or not all(isinstance(n, str) for n in value):
        raise ValueError(f"classes must be a list of class names, got {value!r}")
    names = [n.strip().lower() for n in value if n.strip()]
    if not names:
        raise ValueError("classes must name at least one character class")
    for n in names:
        resolve_class(n)
    return names

def coerce_setting(key: str, value: Any) -> Any:
    """
    Check one setting and return it in its stored form.
    Accepts the raw string from the command line or the value read from JSON.
    Raises ValueError when the value is unusable.
    """
    if key == "length":
        return _as_int(key, value, 0)
    if key == "max_attempts":
        return _as_int(key, value, 1)
    if key == "no_adjacent_repeats":
        return _as_bool(key, value)
    if key == "classes":
        return _as_classes(value)
    raise ValueError(f"unknown setting '{key}'")

def load_config() -> Dict[str, Any]:
    p = config_path()
    if not os.path.exists(p):
        return _defaults()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("ignoring unreadable settings file %s: %s", p, e)
        return _defaults()
    if not isinstance(data, dict):
        logger.warning("ignoring settings file %s: expected a JSON object", p)
        return _defaults()
    # merge defaults, keeping only values that pass the same checks as `config set`
    out = _defaults()
    for key, value in data.items():
        if key not in out:
            logger.warning("ignoring unknown setting %r in %s", key, p)
            continue
        try:
            out[key] = coerce_setting(key, value)
        except ValueError as e:
            logger.warning("using default for %s: %s", key, e)
    return out

def save_config(cfg: Dict[str, Any]) -> None:
    p = config_path()
    with open(p, "w", encoding="utf-8") as f:
        json.dump(cfg, f, ensure_ascii=False, indent=2)
