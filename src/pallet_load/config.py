from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Any, Dict, Optional

import yaml

from .units import parse_float

logger = logging.getLogger(__name__)

SETTINGS_ENV = "PALLET_LOAD_SETTINGS"

DEFAULT_SETTINGS: Dict[str, Any] = {
    "box_length": 40.0,
    "box_width": 30.0,
    "box_height": 20.0,
    "box_weight": 5.0,
    "pallet": "euro",
    "pallet_width": 100.0,
    "pallet_length": 120.0,
    "max_stack_height": 180.0,
    "canvas_width": 600.0,
    "canvas_height": 400.0,
    "canvas_padding": 20.0,
}


def default_settings_path() -> str:
    env_path = os.getenv(SETTINGS_ENV)
    if env_path:
        return os.path.expanduser(env_path)
    return os.path.join(
        os.path.dirname(os.path.dirname(__file__)), "settings.yaml"
    )


def _coerce(key: str, value: Any) -> Any:
    if isinstance(DEFAULT_SETTINGS[key], str):
        return str(value).strip()
    return parse_float(value)


def read_settings(path: str) -> Dict[str, Any]:
    """Merge the YAML mapping at ``path`` over :data:`DEFAULT_SETTINGS`."""
    settings = dict(DEFAULT_SETTINGS)
    if not os.path.exists(path):
        return settings
    with open(path, "r", encoding="utf-8") as f:
        loaded = yaml.safe_load(f) or {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Settings file {path} must contain a mapping")
    for key, value in loaded.items():
        if key not in DEFAULT_SETTINGS:
            logger.warning("Ignoring unknown setting %r in %s", key, path)
            continue
        try:
            settings[key] = _coerce(key, value)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid value for {key!r} in {path}: {e}")
    return settings


@lru_cache(maxsize=None)
def _load_default_settings(path: str) -> Dict[str, Any]:
    return read_settings(path)


def load_settings(path: Optional[str] = None) -> Dict[str, Any]:
    if path is not None:
        return read_settings(path)
    return dict(_load_default_settings(default_settings_path()))


def clear_settings_cache() -> None:
    _load_default_settings.cache_clear()
