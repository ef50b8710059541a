"""
Escape-time computation functions using Numba JIT compilation.

This module contains the performance-critical kernels:
- Single point escape-time iteration of z² + c
- Whole-grid iteration over precomputed plane coordinates

The iteration starts with z already equal to c, so the first
squaring happens inside the loop body. Both kernels are compiled
without fastmath so results match plain float64 arithmetic exactly.
"""

import numpy as np
from numba import jit, prange


# |z|² bound; magnitude 2 is where z² + c is proven to diverge
DIVERGENCE_THRESHOLD = 4.0


@jit(nopython=True, cache=True)
def escape_time(cx, cy, max_depth, threshold=DIVERGENCE_THRESHOLD):
    """
    Count iterations of z = z² + c until |z|² reaches the threshold.

    Args:
        cx, cy: Real and imaginary parts of c
        max_depth: Iteration budget
        threshold: Squared magnitude bound (default 4.0)

    Returns:
        Iteration count in [0, max_depth]. max_depth means the point
        did not escape within the budget.
    """
    zx = cx
    zy = cy
    iteration = 0

    while iteration < max_depth and zx * zx + zy * zy < threshold:
        tx = zx * zx - zy * zy + cx
        zy = 2 * zx * zy + cy
        zx = tx
        iteration += 1

    return iteration


@jit(nopython=True, parallel=True, cache=True)
def compute_grid(xs, ys, max_depth, threshold=DIVERGENCE_THRESHOLD):
    """
    Compute escape times for every (x, y) pair of two coordinate axes.

    Args:
        xs: 1D array of real parts (one per column index i)
        ys: 1D array of imaginary parts (one per row index j)
        max_depth: Iteration budget
        threshold: Squared magnitude bound

    Returns:
        2D int64 array of shape (len(xs), len(ys)), indexed [i, j].
    """
    result = np.zeros((xs.shape[0], ys.shape[0]), dtype=np.int64)

    for i in prange(xs.shape[0]):
        cx = xs[i]
        for j in range(ys.shape[0]):
            result[i, j] = escape_time(cx, ys[j], max_depth, threshold)

    return result


def warmup_jit():
    """
    Warm up JIT compilation with a tiny grid.

    Call this once at startup so the first real repaint does not
    pay the compilation cost.
    """
    axis = np.zeros(2, dtype=np.float64)
    _ = compute_grid(axis, axis, 2, DIVERGENCE_THRESHOLD)
