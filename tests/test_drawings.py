"""Smoke tests for the matplotlib previews."""

import matplotlib.patches as patches
from matplotlib.figure import Figure

from drawings import draw_drawer_front, draw_shoe_rack_stack, draw_slat_layout, draw_shelf_stack
from model import DrawerInput, ShelfInput, SlatInput, compute_drawer, compute_shelf, compute_slat


def _rectangles(fig):
    return [p for p in fig.axes[0].patches if isinstance(p, patches.Rectangle)]


def test_drawer_front_draws_each_drawer() -> None:
    cut_list = compute_drawer(DrawerInput(width=50, height=60, count=3))
    fig = draw_drawer_front(50, 60, cut_list, 3)

    assert isinstance(fig, Figure)
    # opening outline + 3 fronts
    assert len(_rectangles(fig)) == 4


def test_shoe_rack_stack(shoe_rack_cut_list) -> None:
    fig = draw_shoe_rack_stack(shoe_rack_cut_list, 2)
    # tray + gap for each rack
    assert len(_rectangles(fig)) == 4


def test_slat_layout_with_splice() -> None:
    result = compute_slat(SlatInput(total=155, count=4, slat_width=3, splice=True))
    fig = draw_slat_layout(155, 4, result)
    # piece + 4 slats + 3 gaps
    assert len(_rectangles(fig)) == 8


def test_shelf_stack() -> None:
    result = compute_shelf(ShelfInput(depth=50, width=80, opening_height=200, count=10))
    fig = draw_shelf_stack(80, 200, result, 10)
    assert len(_rectangles(fig)) == 11
