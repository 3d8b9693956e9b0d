"""Single-orientation pallet load planner.

Each layer is tiled with one box orientation only; the planner tries the
two planar orientations and keeps the one that fits more boxes. This is a
fast approximation, not an optimal rectangle packer.
"""

from __future__ import annotations

import logging
import math
from typing import Tuple

from .errors import InvalidDimension
from .metrics import compute_footprint_efficiency
from .models import BoxSpec, LoadConstraints, Orientation, PackingResult, PalletSpec
from .stacking import compute_num_layers
from .validation import validate_load_inputs

logger = logging.getLogger(__name__)

OUT_OF_RANGE = "out of range"


def _check_quotient(span: float, size: float, field: str) -> float:
    """``span / size``, or :class:`InvalidDimension` on ``field`` if it overflows."""
    quotient = span / size
    if not math.isfinite(quotient):
        raise InvalidDimension(field, OUT_OF_RANGE, size)
    return quotient


def _fit(span: float, size: float, field: str) -> int:
    if size <= 0:
        return 0
    return max(int(math.floor(_check_quotient(span, size, field))), 0)


def orientation_grid(
    box: BoxSpec, pallet: PalletSpec, orientation: Orientation
) -> Tuple[int, int]:
    """Return ``(columns, rows)`` for ``orientation``.

    Columns run along the pallet width, rows along the pallet length.
    """
    if orientation is Orientation.STRAIGHT:
        return (
            _fit(pallet.width, box.width, "width"),
            _fit(pallet.length, box.length, "length"),
        )
    return (
        _fit(pallet.width, box.length, "length"),
        _fit(pallet.length, box.width, "width"),
    )


def choose_orientation(box: BoxSpec, pallet: PalletSpec) -> Tuple[Orientation, int, int]:
    cols_s, rows_s = orientation_grid(box, pallet, Orientation.STRAIGHT)
    cols_r, rows_r = orientation_grid(box, pallet, Orientation.ROTATED)
    # Ties (including 0 == 0) stay straight.
    if cols_r * rows_r > cols_s * rows_s:
        return Orientation.ROTATED, cols_r, rows_r
    return Orientation.STRAIGHT, cols_s, rows_s


def _total_weight(total_boxes: int, weight: float) -> float:
    if total_boxes == 0 or weight == 0:
        return 0 * weight
    try:
        total = total_boxes * weight
    except OverflowError:
        raise InvalidDimension("weight", OUT_OF_RANGE, weight) from None
    if not math.isfinite(total):
        raise InvalidDimension("weight", OUT_OF_RANGE, weight)
    return total


def compute_load(
    box: BoxSpec, pallet: PalletSpec, constraints: LoadConstraints
) -> PackingResult:
    """Compute the best single-orientation load for ``box`` on ``pallet``.

    Raises :class:`~pallet_load.errors.InvalidDimension` for missing,
    non-finite or non-positive inputs, and for inputs whose ratios do not
    fit in a float. Zero boxes or zero layers are valid results.
    """
    validate_load_inputs(box, pallet, constraints)

    orientation, columns, rows = choose_orientation(box, pallet)
    boxes_per_layer = columns * rows
    _check_quotient(constraints.max_stack_height, box.height, "height")
    layer_count = compute_num_layers(constraints.max_stack_height, box.height)
    total_boxes = boxes_per_layer * layer_count

    if orientation is Orientation.ROTATED:
        size_x, size_y = box.length, box.width
    else:
        size_x, size_y = box.width, box.length
    efficiency = compute_footprint_efficiency(
        columns, rows, size_x, size_y, pallet.width, pallet.length
    )
    logger.debug(
        "Load on %s: %s %dx%d=%d per layer, %d layers",
        pallet.name,
        orientation.value,
        columns,
        rows,
        boxes_per_layer,
        layer_count,
    )
    return PackingResult(
        orientation=orientation,
        boxes_per_layer=boxes_per_layer,
        layer_count=layer_count,
        total_boxes=total_boxes,
        total_weight=_total_weight(total_boxes, box.weight),
        footprint_efficiency_percent=efficiency,
        columns=columns,
        rows=rows,
    )
