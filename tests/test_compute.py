"""
test_compute.py
"""
import numpy as np
import pytest
from mandelbrot_dots.compute import DIVERGENCE_THRESHOLD, compute_grid, escape_time


def test_origin_never_escapes():
    for depth in (0, 1, 7, 100):
        assert escape_time(0.0, 0.0, depth, DIVERGENCE_THRESHOLD) == depth


def test_far_point_escapes_immediately():
    assert escape_time(5.0, 5.0, 1, DIVERGENCE_THRESHOLD) == 0


@pytest.mark.parametrize('cx, cy', [(2.1, 0.0), (0.0, -2.5), (-1.5, 1.5), (1.0, 1.0)])
def test_escape_is_detected(cx, cy):
    assert escape_time(cx, cy, 1000, DIVERGENCE_THRESHOLD) < 1000


def test_known_iteration_counts():
    # z = 1 -> 2 -> 5: |z|^2 reaches 4 after one step
    assert escape_time(1.0, 0.0, 50, DIVERGENCE_THRESHOLD) == 1
    # -1 cycles between -1 and 0
    assert escape_time(-1.0, 0.0, 50, DIVERGENCE_THRESHOLD) == 50
    # 0.5 escapes on the fourth step: 0.5, 0.75, 1.0625, 1.62890625, 3.1533...
    assert escape_time(0.5, 0.0, 50, DIVERGENCE_THRESHOLD) == 4


def test_threshold_is_tunable():
    # |c|^2 = 1 is below 4 but not below 0.5
    assert escape_time(1.0, 0.0, 10, 0.5) == 0


def test_compute_grid_matches_scalar_kernel():
    xs = np.linspace(-2.0, 0.5, 7)
    ys = np.linspace(-1.0, 1.0, 5)
    grid = compute_grid(xs, ys, 30, DIVERGENCE_THRESHOLD)
    assert grid.shape == (7, 5)
    for i, x in enumerate(xs):
        for j, y in enumerate(ys):
            assert grid[i, j] == escape_time(x, y, 30, DIVERGENCE_THRESHOLD)
