"""Top-down drawing of one pallet layer.

Pallet length runs horizontally and pallet width vertically, so a
placement's ``origin_y`` becomes the screen x coordinate.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from matplotlib.figure import Figure
from matplotlib.patches import Rectangle

from .layout import project
from .models import BoxSpec, PackingResult, PalletSpec, PlacementRect

PALLET_FACE = "#8B4513"
PALLET_EDGE = "#5D2906"
BOX_FACE = "#6366f1"
BOX_EDGE = "#312e81"


@dataclass(frozen=True)
class CanvasTransform:
    scale: float
    offset_x: float
    offset_y: float

    def pallet_rect(self, pallet: PalletSpec) -> Tuple[float, float, float, float]:
        return (
            self.offset_x,
            self.offset_y,
            pallet.length * self.scale,
            pallet.width * self.scale,
        )


def fit_canvas(
    pallet: PalletSpec,
    canvas_w: float,
    canvas_h: float,
    padding: float = 20.0,
) -> CanvasTransform:
    """Uniform scale that fits the pallet inside the padded canvas, centred."""
    available_w = max(canvas_w - 2 * padding, 0.0)
    available_h = max(canvas_h - 2 * padding, 0.0)
    scale = min(available_w / pallet.length, available_h / pallet.width)
    draw_w = pallet.length * scale
    draw_h = pallet.width * scale
    return CanvasTransform(
        scale=scale,
        offset_x=(canvas_w - draw_w) / 2,
        offset_y=(canvas_h - draw_h) / 2,
    )


def to_canvas(
    rect: PlacementRect, transform: CanvasTransform
) -> Tuple[float, float, float, float]:
    s = transform.scale
    return (
        transform.offset_x + rect.origin_y * s,
        transform.offset_y + rect.origin_x * s,
        rect.size_y * s,
        rect.size_x * s,
    )


def draw_top_down(
    ax,
    result: PackingResult,
    box: BoxSpec,
    pallet: PalletSpec,
    show_numbers: bool = True,
    gap: float = 0.0,
) -> int:
    """Draw the pallet and one layer on ``ax``; return the number of boxes drawn."""
    ax.clear()
    ax.add_patch(
        Rectangle(
            (0, 0),
            pallet.length,
            pallet.width,
            fill=True,
            facecolor=PALLET_FACE,
            edgecolor=PALLET_EDGE,
            linewidth=2,
        )
    )
    placements = project(result, box, pallet)
    for i, rect in enumerate(placements):
        x, y, w, h = rect.origin_y, rect.origin_x, rect.size_y, rect.size_x
        ax.add_patch(
            Rectangle(
                (x + gap, y + gap),
                w - 2 * gap,
                h - 2 * gap,
                fill=True,
                facecolor=BOX_FACE,
                alpha=0.9,
                edgecolor=BOX_EDGE,
            )
        )
        if show_numbers:
            ax.text(
                x + w / 2,
                y + h / 2,
                str(i + 1),
                ha="center",
                va="center",
                fontsize=8,
                color="white",
                zorder=10,
            )
    margin = 0.05 * max(pallet.length, pallet.width)
    ax.set_xlim(-margin, pallet.length + margin)
    ax.set_ylim(-margin, pallet.width + margin)
    ax.set_aspect("equal")
    ax.set_title(
        f"{pallet.name}: {result.boxes_per_layer} x {result.layer_count}"
    )
    return len(placements)


def save_top_down(
    path: str,
    result: PackingResult,
    box: BoxSpec,
    pallet: PalletSpec,
    canvas_size: Tuple[float, float] = (600.0, 400.0),
    padding: float = 20.0,
    dpi: int = 100,
    fig: Optional[Figure] = None,
) -> str:
    if fig is None:
        fig = Figure(figsize=(canvas_size[0] / dpi, canvas_size[1] / dpi), dpi=dpi)
    # padding is in canvas pixels, as for fit_canvas
    canvas_w, canvas_h = canvas_size
    fig.subplots_adjust(
        left=padding / canvas_w,
        right=1 - padding / canvas_w,
        bottom=padding / canvas_h,
        top=1 - padding / canvas_h,
    )
    ax = fig.add_subplot(111)
    draw_top_down(ax, result, box, pallet, gap=min(box.length, box.width) * 0.01)
    fig.savefig(path)
    return path
