"""Scale factory: padded domains, pixel ranges and tick generation."""

from __future__ import annotations

import itertools

import numpy as np
import pytest

from health_scatter.scales import X_AXIS, Y_AXIS, LinearScale, make_scale, padded_domain, tick_values
from health_scatter.selection import XField, YField


@pytest.mark.parametrize("fx,fy", list(itertools.product(
    [f.value for f in XField], [f.value for f in YField])))
def test_domain_is_padded_min_and_max_for_every_selection(three_rows, fx, fy) -> None:
    """lower = 0.8 * min and upper = 1.2 * max, for all nine field pairs."""

    xs = make_scale(three_rows, fx, 500, X_AXIS)
    ys = make_scale(three_rows, fy, 300, Y_AXIS)
    for scale, field in ((xs, fx), (ys, fy)):
        values = [row.value(field) for row in three_rows]
        assert scale.domain[0] == pytest.approx(0.8 * min(values))
        assert scale.domain[1] == pytest.approx(1.2 * max(values))


def test_x_range_runs_left_to_right_and_y_is_inverted(two_rows) -> None:
    xs = make_scale(two_rows, "poverty", 640, X_AXIS)
    ys = make_scale(two_rows, "obesity", 480, Y_AXIS)

    assert xs.range == (0.0, 640.0)
    assert ys.range == (480.0, 0.0)
    assert xs(xs.domain[0]) == pytest.approx(0)
    assert xs(xs.domain[1]) == pytest.approx(640)
    assert ys(ys.domain[0]) == pytest.approx(480)
    assert ys(ys.domain[1]) == pytest.approx(0)


def test_make_scale_rejects_unknown_axis(two_rows) -> None:
    with pytest.raises(ValueError):
        make_scale(two_rows, "poverty", 100, "z")


def test_invert_undoes_the_mapping() -> None:
    scale = LinearScale((8.0, 24.0), (300.0, 0.0))
    for value in (8.0, 13.5, 24.0):
        assert scale.invert(scale(value)) == pytest.approx(value)


def test_degenerate_domain_maps_to_range_midpoint() -> None:
    scale = LinearScale((5.0, 5.0), (0.0, 100.0))
    assert scale(5.0) == 50.0


def test_padded_domain_skips_nan() -> None:
    assert padded_domain(np.array([10.0, np.nan, 20.0])) == pytest.approx((8.0, 24.0))


def test_tick_values_use_round_steps() -> None:
    assert tick_values(8, 24) == [8, 10, 12, 14, 16, 18, 20, 22, 24]
    assert tick_values(0, 1, 5) == pytest.approx([0, 0.2, 0.4, 0.6, 0.8, 1.0])
    assert tick_values(32000, 85900) == [35000 + 5000 * i for i in range(11)]


def test_tick_values_edge_cases() -> None:
    assert tick_values(3, 3) == [3.0]
    assert tick_values(24, 8)[0] == 24
    assert tick_values(float("nan"), 1) == []
