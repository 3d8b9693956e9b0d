from __future__ import annotations

from typing import Iterable, List, Tuple

from .models import BoxSpec, Orientation, PackingResult, PalletSpec, PlacementRect
from .planner import orientation_grid

LayerLayout = List[Tuple[float, float, float, float]]


def project(
    result: PackingResult, box: BoxSpec, pallet: PalletSpec
) -> Tuple[PlacementRect, ...]:
    """Placements of one representative layer, row-major.

    The grid comes from ``result.columns``/``result.rows``; every layer of
    the load repeats it. A result whose grid does not multiply out to
    ``boxes_per_layer`` has its grid recomputed from ``box`` and ``pallet``.
    """
    columns, rows = result.columns, result.rows
    if columns * rows != result.boxes_per_layer:
        columns, rows = orientation_grid(box, pallet, result.orientation)
    if result.orientation is Orientation.ROTATED:
        size_x, size_y = box.length, box.width
    else:
        size_x, size_y = box.width, box.length
    placements = []
    for row in range(rows):
        for column in range(columns):
            placements.append(
                PlacementRect(
                    column=column,
                    row=row,
                    origin_x=column * size_x,
                    origin_y=row * size_y,
                    size_x=size_x,
                    size_y=size_y,
                )
            )
    return tuple(placements)


def layout_rects(placements: Iterable[PlacementRect]) -> LayerLayout:
    return [rect.as_tuple() for rect in placements]


def placements_within(
    placements: Iterable[PlacementRect], pallet: PalletSpec, eps: float = 1e-9
) -> bool:
    tol_w = eps * max(pallet.width, 1.0)
    tol_l = eps * max(pallet.length, 1.0)
    for rect in placements:
        if rect.origin_x < -tol_w or rect.origin_y < -tol_l:
            return False
        if rect.origin_x + rect.size_x > pallet.width + tol_w:
            return False
        if rect.origin_y + rect.size_y > pallet.length + tol_l:
            return False
    return True


def placements_overlap(placements: Iterable[PlacementRect], eps: float = 1e-9) -> bool:
    rects = layout_rects(placements)
    for i, (ax, ay, aw, al) in enumerate(rects):
        for bx, by, bw, bl in rects[i + 1 :]:
            if (
                ax + aw > bx + eps
                and bx + bw > ax + eps
                and ay + al > by + eps
                and by + bl > ay + eps
            ):
                return True
    return False
