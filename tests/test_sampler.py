import numpy as np
import pytest

from sourcefilter.errors import InvalidParameter
from sourcefilter.signal.sampler import TimeGrid, generate_range


def test_quarter_steps_include_end():
    t = generate_range(0.0, 1.0, 0.25)
    np.testing.assert_allclose(t, [0.0, 0.25, 0.5, 0.75, 1.0])


def test_point_past_end_is_dropped():
    t = generate_range(0.0, 1.0, 0.3)
    assert t.size == 4
    np.testing.assert_allclose(t, [0.0, 0.3, 0.6, 0.9])


def test_step_longer_than_interval_keeps_start():
    t = generate_range(2.0, 2.5, 10.0)
    np.testing.assert_array_equal(t, [2.0])


def test_degenerate_interval():
    np.testing.assert_array_equal(generate_range(1.0, 1.0, 0.1), [1.0])


@pytest.mark.parametrize("step", [0.0, -0.1, float("nan"), float("inf")])
def test_bad_step_rejected(step):
    with pytest.raises(InvalidParameter):
        generate_range(0.0, 1.0, step)


def test_reversed_interval_rejected():
    with pytest.raises(InvalidParameter):
        generate_range(1.0, 0.0, 0.1)


def test_long_grid_stays_within_bounds_and_strictly_increasing():
    t = generate_range(0.0, 10.0, 0.003)
    assert t[0] == 0.0
    assert t[-1] <= 10.0
    assert t[-1] + 0.003 > 10.0
    assert np.all(np.diff(t) > 0)
    # index-multiplied points, no accumulated drift
    assert t[-1] == pytest.approx((t.size - 1) * 0.003, rel=0, abs=1e-12)


def test_time_grid_from_interval():
    grid = TimeGrid.from_interval(0.5, 1.0, 0.1)
    assert grid.t0 == 0.5
    assert grid.dt == 0.1
    assert grid.n == grid.t.size
    assert grid.t[-1] <= 1.0


def test_huge_start_with_equal_bounds_is_single_point():
    np.testing.assert_array_equal(generate_range(1e20, 1e20, 1.0), [1e20])


@pytest.mark.parametrize("init,fin,step", [(1e20, 1e20 + 1e5, 1.0), (1.0, 2.0, 1e-17)])
def test_step_below_float_resolution_rejected(init, fin, step):
    with pytest.raises(InvalidParameter):
        generate_range(init, fin, step)


def test_ratio_overflow_rejected():
    with pytest.raises(InvalidParameter):
        generate_range(0.0, 1e300, 1e-300)


def test_too_many_points_rejected():
    with pytest.raises(InvalidParameter, match="max_points"):
        generate_range(0.0, 1e8, 1e-3)
    with pytest.raises(InvalidParameter, match="max_points"):
        TimeGrid.from_interval(0.0, 1.0, 0.1, max_points=5)
    assert TimeGrid.from_interval(0.0, 1.0, 0.25, max_points=5).n == 5
