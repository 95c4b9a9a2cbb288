from __future__ import annotations

import pytest

from health_scatter.layout import MARGIN, compute_surface
from health_scatter.scales import X_AXIS, Y_AXIS


def test_surface_is_three_quarters_of_viewport() -> None:
    surface = compute_surface(1600, 1000)

    assert (surface.width, surface.height) == (1200, 750)
    assert surface.plot_width == 1200 - MARGIN.left - MARGIN.right
    assert surface.plot_height == 750 - MARGIN.top - MARGIN.bottom
    assert surface.extent(X_AXIS) == surface.plot_width
    assert surface.extent(Y_AXIS) == surface.plot_height


def test_tiny_viewport_clamps_plot_area_at_zero() -> None:
    surface = compute_surface(100, 100)
    assert surface.plot_width == 0
    assert surface.plot_height == 0


def test_label_anchors_stack_below_and_left_of_plot() -> None:
    surface = compute_surface(1000, 800)

    x_tops = [surface.label_anchor(X_AXIS, i)[1] for i in range(3)]
    assert x_tops == [surface.margin.top + surface.plot_height + 20 + 20 * (i + 1) for i in range(3)]
    assert {surface.label_anchor(X_AXIS, i)[0] for i in range(3)} == {surface.margin.left + surface.plot_width / 2}

    y_lefts = [surface.label_anchor(Y_AXIS, i)[0] for i in range(3)]
    assert y_lefts == [0, 20, 40]


def test_unknown_axis() -> None:
    with pytest.raises(ValueError):
        compute_surface(800, 600).extent("z")
