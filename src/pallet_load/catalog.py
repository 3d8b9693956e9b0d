from __future__ import annotations

import os
from functools import lru_cache
from typing import Dict, List

import yaml

from .models import PalletSpec
from .units import parse_float

DATA_DIR = os.path.join(os.path.dirname(__file__), "data")

CUSTOM_KEY = "custom"
CUSTOM_NAME = "Personalizado"


def pallets_yaml_path() -> str:
    return os.path.join(DATA_DIR, "pallets.yaml")


def _parse_entry(key: str, entry) -> PalletSpec:
    if not isinstance(entry, dict):
        raise ValueError(f"Invalid pallet entry '{key}': expected a mapping")
    try:
        width = parse_float(entry["width"])
        length = parse_float(entry["length"])
    except (KeyError, TypeError, ValueError) as e:
        raise ValueError(f"Invalid pallet entry '{key}': {e}")
    return PalletSpec(width=width, length=length, name=str(entry.get("name", key)))


def load_pallets_file(path: str) -> Dict[str, PalletSpec]:
    if not os.path.exists(path):
        raise FileNotFoundError(f"Missing pallet catalog: {path}")
    with open(path, "r", encoding="utf-8") as f:
        try:
            loaded = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}")
    if not isinstance(loaded, dict):
        raise ValueError(f"Pallet catalog {path} must be a mapping")
    return {str(key): _parse_entry(str(key), entry) for key, entry in loaded.items()}


@lru_cache(maxsize=None)
def load_pallets() -> Dict[str, PalletSpec]:
    """Return the bundled pallet catalog keyed by short name."""
    return load_pallets_file(pallets_yaml_path())


def pallet_choices() -> List[str]:
    return list(load_pallets()) + [CUSTOM_KEY]


def get_pallet(key: str) -> PalletSpec:
    pallets = load_pallets()
    try:
        return pallets[key]
    except KeyError:
        raise ValueError(
            f"Unknown pallet '{key}', expected one of: {', '.join(pallets)}"
        ) from None


def custom_pallet(width: float, length: float, name: str = CUSTOM_NAME) -> PalletSpec:
    return PalletSpec(width=width, length=length, name=name)
