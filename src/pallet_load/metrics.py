from __future__ import annotations

from typing import List, Tuple

# Pattern is list of rectangles (x, y, w, l)
Pattern = List[Tuple[float, float, float, float]]


def compute_footprint_efficiency(
    columns: int,
    rows: int,
    size_x: float,
    size_y: float,
    pallet_w: float,
    pallet_l: float,
) -> float:
    """Percentage of the pallet footprint covered by one layer.

    Equal to ``100 * columns * rows * size_x * size_y / (pallet_w * pallet_l)``,
    evaluated axis by axis so large grids stay finite. Not clamped: a value
    above 100 means the inputs disagree with the fitting rule.
    """
    if pallet_w <= 0 or pallet_l <= 0:
        return 0.0
    used_w = columns * size_x / pallet_w
    used_l = rows * size_y / pallet_l
    return 100.0 * used_w * used_l


def compute_leftover(
    pattern: Pattern, pallet_w: float, pallet_l: float
) -> Tuple[float, float]:
    """Free strip left along the pallet width and length axes."""
    if not pattern:
        return pallet_w, pallet_l
    used_w = max(x + w for x, _, w, _ in pattern)
    used_l = max(y + length for _, y, _, length in pattern)
    return max(pallet_w - used_w, 0.0), max(pallet_l - used_l, 0.0)
