"""
Color ramp definitions for the Mandelbrot dot view.

A color ramp is a lookup table indexed by iteration count. It is built
once per depth so the repaint only does an array lookup per sample.

Ramp layout for depth N (numpy array of shape (N + 1, 3), uint8 RGB):
- 0 .. N-1: linear gradient from cyan (fast escape) to magenta (slow escape)
- N: black, for points that never escaped
"""

import numpy as np


BLACK = (0, 0, 0)
ESCAPE_BLUE = 255  # Blue channel is constant across the gradient


def build_color_ramp(max_depth):
    """
    Build the color ramp for a given iteration depth.

    Red rises 0 -> 255 and green falls 255 -> 0 as the iteration count
    goes from 0 to max_depth. Channel values are truncated, not rounded.

    Args:
        max_depth: Maximum iteration count (>= 0)

    Returns:
        Read-only numpy array (max_depth + 1, 3) of uint8 RGB values

    Raises:
        ValueError if max_depth is negative
    """
    if max_depth < 0:
        raise ValueError(f"max_depth must be >= 0, got {max_depth}")

    colors = np.zeros((max_depth + 1, 3), dtype=np.uint8)
    for i in range(max_depth):
        t = i * 1.0 / max_depth
        colors[i, 0] = int(255 * t)        # Red
        colors[i, 1] = int(255 * (1 - t))  # Green
        colors[i, 2] = ESCAPE_BLUE         # Blue
    colors[max_depth] = BLACK

    colors.setflags(write=False)
    return colors


def ramp_color(ramp, index):
    """Get row `index` of a ramp (or any N x 3 color table) as a plain (r, g, b) tuple of ints."""
    r, g, b = ramp[index]
    return int(r), int(g), int(b)
