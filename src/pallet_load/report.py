from __future__ import annotations

from typing import Any, Dict

from .layout import layout_rects, project
from .metrics import compute_leftover
from .models import BoxSpec, LoadConstraints, PackingResult, PalletSpec
from .stacking import compute_stack_height
from .units import format_float


def summarize(
    result: PackingResult,
    box: BoxSpec,
    pallet: PalletSpec,
    constraints: LoadConstraints,
) -> Dict[str, Any]:
    """Plain, JSON-serialisable view of a computed load."""
    rects = layout_rects(project(result, box, pallet))
    leftover_w, leftover_l = compute_leftover(rects, pallet.width, pallet.length)
    return {
        "pallet": {"name": pallet.name, "width": pallet.width, "length": pallet.length},
        "box": {
            "length": box.length,
            "width": box.width,
            "height": box.height,
            "weight": box.weight,
        },
        "max_stack_height": constraints.max_stack_height,
        "orientation": result.orientation.value,
        "columns": result.columns,
        "rows": result.rows,
        "boxes_per_layer": result.boxes_per_layer,
        "layer_count": result.layer_count,
        "total_boxes": result.total_boxes,
        "total_weight": result.total_weight,
        "stack_height": compute_stack_height(result.layer_count, box.height),
        "footprint_efficiency_percent": result.footprint_efficiency_percent,
        "leftover_width": leftover_w,
        "leftover_length": leftover_l,
        "placements": [list(rect) for rect in rects],
    }


def format_summary(summary: Dict[str, Any]) -> str:
    lines = [
        f"Pallet: {summary['pallet']['name']}"
        f" ({format_float(summary['pallet']['width'], 1)} x"
        f" {format_float(summary['pallet']['length'], 1)})",
        f"Orientation: {summary['orientation']}"
        f" ({summary['columns']} x {summary['rows']})",
        f"Per layer: {summary['boxes_per_layer']} x {summary['layer_count']} layers",
        f"Total boxes: {summary['total_boxes']}",
        f"Total weight: {format_float(summary['total_weight'])} kg",
        f"Stack height: {format_float(summary['stack_height'], 1)}"
        f" / {format_float(summary['max_stack_height'], 1)}",
        f"Base efficiency: {format_float(summary['footprint_efficiency_percent'], 1)}%",
        f"Free strip: {format_float(summary['leftover_width'], 1)} x"
        f" {format_float(summary['leftover_length'], 1)}",
    ]
    return "\n".join(lines)
