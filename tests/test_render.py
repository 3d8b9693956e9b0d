import pytest
from matplotlib.figure import Figure

from pallet_load import BoxSpec, LoadConstraints, PalletSpec, compute_load, project
from pallet_load.render import draw_top_down, fit_canvas, save_top_down, to_canvas

EURO = PalletSpec(width=80, length=120, name="Euro")
BOX = BoxSpec(length=40, width=30, height=20, weight=5)


def test_fit_canvas_uses_min_scale_and_centres():
    transform = fit_canvas(EURO, 600, 400, padding=20)
    assert transform.scale == pytest.approx(4.5)
    assert transform.offset_x == pytest.approx(30.0)
    assert transform.offset_y == pytest.approx(20.0)
    assert transform.pallet_rect(EURO) == pytest.approx((30.0, 20.0, 540.0, 360.0))


def test_to_canvas_draws_length_horizontally():
    result = compute_load(BOX, EURO, LoadConstraints(max_stack_height=180))
    rect = project(result, BOX, EURO)[5]
    assert (rect.column, rect.row) == (1, 2)

    transform = fit_canvas(EURO, 600, 400, padding=20)
    assert to_canvas(rect, transform) == pytest.approx((300.0, 200.0, 135.0, 180.0))


def test_draw_top_down_adds_one_patch_per_box():
    result = compute_load(BOX, EURO, LoadConstraints(max_stack_height=180))
    fig = Figure()
    ax = fig.add_subplot(111)

    drawn = draw_top_down(ax, result, BOX, EURO)

    assert drawn == 8
    assert len(ax.patches) == 9
    assert len(ax.texts) == 8


def test_draw_top_down_empty_layer():
    box = BoxSpec(length=200, width=200, height=20)
    result = compute_load(box, EURO, LoadConstraints(max_stack_height=180))
    fig = Figure()
    ax = fig.add_subplot(111)

    assert draw_top_down(ax, result, box, EURO, show_numbers=False) == 0
    assert len(ax.patches) == 1


def test_save_top_down_writes_png(tmp_path):
    result = compute_load(BOX, EURO, LoadConstraints(max_stack_height=180))
    path = tmp_path / "layer.png"
    save_top_down(str(path), result, BOX, EURO)
    assert path.exists()
    assert path.stat().st_size > 0


def test_save_top_down_applies_padding(tmp_path):
    result = compute_load(BOX, EURO, LoadConstraints(max_stack_height=180))
    fig = Figure(figsize=(6, 4), dpi=100)
    save_top_down(
        str(tmp_path / "layer.png"),
        result,
        BOX,
        EURO,
        canvas_size=(600, 400),
        padding=30,
        fig=fig,
    )
    assert fig.subplotpars.left == pytest.approx(30 / 600)
    assert fig.subplotpars.top == pytest.approx(1 - 30 / 400)
