"""Single-SKU pallet load calculator."""

from .catalog import custom_pallet, get_pallet, load_pallets
from .errors import InvalidDimension
from .layout import layout_rects, project
from .models import (
    BoxSpec,
    LoadConstraints,
    Orientation,
    PackingResult,
    PalletSpec,
    PlacementRect,
)
from .planner import compute_load, orientation_grid
from .stacking import compute_num_layers, compute_stack_height

__all__ = [
    "BoxSpec",
    "PalletSpec",
    "LoadConstraints",
    "Orientation",
    "PackingResult",
    "PlacementRect",
    "InvalidDimension",
    "compute_load",
    "orientation_grid",
    "project",
    "layout_rects",
    "compute_num_layers",
    "compute_stack_height",
    "load_pallets",
    "get_pallet",
    "custom_pallet",
]
