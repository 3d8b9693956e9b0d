from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .units import CM, KG


class Orientation(str, Enum):
    """Which box edge runs along the pallet length."""

    STRAIGHT = "straight"
    ROTATED = "rotated"


@dataclass(frozen=True)
class BoxSpec:
    """One uniform box type."""

    length: CM
    width: CM
    height: CM
    weight: KG = 0.0


@dataclass(frozen=True)
class PalletSpec:
    """Pallet footprint, ``width`` x ``length``."""

    width: CM
    length: CM
    name: str = "Custom"


@dataclass(frozen=True)
class LoadConstraints:
    max_stack_height: CM


@dataclass(frozen=True)
class PackingResult:
    orientation: Orientation
    boxes_per_layer: int
    layer_count: int
    total_boxes: int
    total_weight: KG
    footprint_efficiency_percent: float
    # Grid of the chosen orientation; columns run along the pallet width.
    columns: int = 0
    rows: int = 0


@dataclass(frozen=True)
class PlacementRect:
    column: int
    row: int
    origin_x: CM
    origin_y: CM
    size_x: CM
    size_y: CM

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.origin_x, self.origin_y, self.size_x, self.size_y)
