"""
test_colormaps.py
"""
import numpy as np
import pytest
from mandelbrot_dots.colormaps import BLACK, build_color_ramp, ramp_color


@pytest.mark.parametrize('depth', [1, 2, 10, 255, 1000])
def test_ramp_shape_and_ends(depth):
    ramp = build_color_ramp(depth)
    assert ramp.shape == (depth + 1, 3)
    assert ramp.dtype == np.uint8
    assert ramp_color(ramp, depth) == BLACK
    assert ramp_color(ramp, 0) == (0, 255, 255)


@pytest.mark.parametrize('depth', [3, 16, 100, 777])
def test_ramp_is_monotonic(depth):
    gradient = build_color_ramp(depth)[:depth].astype(np.int64)
    assert np.all(np.diff(gradient[:, 0]) >= 0)
    assert np.all(np.diff(gradient[:, 1]) <= 0)
    assert np.all(gradient[:, 2] == 255)


def test_channels_are_truncated():
    ramp = build_color_ramp(3)
    # 255 / 3 = 85, 255 * 2 / 3 = 170, 255 * (1 - 1/3) = 170.000...
    assert ramp_color(ramp, 1) == (int(255 * (1 / 3)), int(255 * (1 - 1 / 3)), 255)
    ramp = build_color_ramp(7)
    # 255 / 7 = 36.43 -> 36, 255 * 6 / 7 = 218.57 -> 218
    assert ramp_color(ramp, 1) == (36, 218, 255)


def test_zero_depth_ramp_is_single_black_entry():
    ramp = build_color_ramp(0)
    assert ramp.shape == (1, 3)
    assert ramp_color(ramp, 0) == BLACK


def test_negative_depth_is_rejected():
    with pytest.raises(ValueError):
        build_color_ramp(-1)


def test_ramp_is_read_only():
    ramp = build_color_ramp(4)
    with pytest.raises(ValueError):
        ramp[0, 0] = 12
