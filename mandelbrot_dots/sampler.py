"""
Fractal sampling: turn a region of the complex plane into colored dots.

This is the pure part of the view. Nothing here knows about windows,
surfaces or pygame; the functions take a region, a grid density and a
color ramp and return plain numpy data.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, NamedTuple

import numpy as np

from .colormaps import ramp_color
from .compute import DIVERGENCE_THRESHOLD, compute_grid, escape_time


DEFAULT_SAMPLES_PER_AXIS = 100
DEFAULT_MAX_DEPTH = 32


@dataclass(frozen=True)
class PlaneRegion:
    """Rectangular region of the complex plane (x is real, y is imaginary)."""

    x_min: float
    x_max: float
    y_min: float
    y_max: float

    def __post_init__(self) -> None:
        if not self.x_max > self.x_min:
            raise ValueError(f"x_max ({self.x_max}) must be greater than x_min ({self.x_min})")
        if not self.y_max > self.y_min:
            raise ValueError(f"y_max ({self.y_max}) must be greater than y_min ({self.y_min})")

    @property
    def x_range(self) -> float:
        return self.x_max - self.x_min

    @property
    def y_range(self) -> float:
        return self.y_max - self.y_min

    @classmethod
    def from_bounds(cls, bounds) -> "PlaneRegion":
        """Build a region from an (x_min, x_max, y_min, y_max) sequence."""
        x_min, x_max, y_min, y_max = (float(v) for v in bounds)
        return cls(x_min, x_max, y_min, y_max)


# Classic Mandelbrot overview
DEFAULT_REGION = PlaneRegion(-2.5, 1.0, -1.75, 1.75)


class SamplePoint(NamedTuple):
    plane: complex
    screen: tuple[float, float]
    iterations: int
    color: tuple[int, int, int]


@dataclass(frozen=True, eq=False)
class SampleGrid:
    """
    N x N evaluated samples, stored as flat arrays in i-major order.

    Index k corresponds to grid position (i, j) = divmod(k, N), where
    i walks the real axis and j the imaginary axis.
    """

    samples_per_axis: int
    radius: int
    plane_x: np.ndarray
    plane_y: np.ndarray
    screen_x: np.ndarray
    screen_y: np.ndarray
    iterations: np.ndarray
    colors: np.ndarray

    def __len__(self) -> int:
        return self.iterations.shape[0]

    def __iter__(self) -> Iterator[SamplePoint]:
        for k in range(len(self)):
            yield SamplePoint(
                plane=complex(self.plane_x[k], self.plane_y[k]),
                screen=(float(self.screen_x[k]), float(self.screen_y[k])),
                iterations=int(self.iterations[k]),
                color=ramp_color(self.colors, k),
            )


def escape_iterations(c: complex, max_depth: int, threshold: float = DIVERGENCE_THRESHOLD) -> int:
    """Escape-time iteration count of a single point (z starts at c)."""

    if max_depth < 0:
        raise ValueError(f"max_depth must be >= 0, got {max_depth}")
    c = complex(c)
    return int(escape_time(float(c.real), float(c.imag), int(max_depth), float(threshold)))


def axis_fractions(samples_per_axis: int) -> np.ndarray:
    """Half-open fractions i / N for i in [0, N)."""

    if samples_per_axis <= 0:
        raise ValueError(f"samples_per_axis must be > 0, got {samples_per_axis}")
    return np.arange(samples_per_axis, dtype=np.float64) / np.float64(samples_per_axis)


def sample_grid(
    region: PlaneRegion,
    samples_per_axis: int,
    ramp: np.ndarray,
    width_px: int,
    height_px: int,
    threshold: float = DIVERGENCE_THRESHOLD,
) -> SampleGrid:
    """
    Evaluate an evenly spaced N x N grid over the region.

    The iteration budget is the index of the ramp's last entry, so the
    ramp built for a depth always matches the depth it was built for.
    """

    fractions = axis_fractions(samples_per_axis)
    if len(ramp) == 0:
        raise ValueError("color ramp must have at least one entry")
    max_depth = len(ramp) - 1

    xs = fractions * np.float64(region.x_range) + np.float64(region.x_min)
    ys = fractions * np.float64(region.y_range) + np.float64(region.y_min)
    px = fractions * np.float64(width_px)
    py = fractions * np.float64(height_px)

    counts = compute_grid(xs, ys, max_depth, float(threshold))

    n = samples_per_axis
    iterations = counts.reshape(n * n)
    return SampleGrid(
        samples_per_axis=n,
        radius=int(width_px) // n,
        plane_x=np.repeat(xs, n),
        plane_y=np.tile(ys, n),
        screen_x=np.repeat(px, n),
        screen_y=np.tile(py, n),
        iterations=iterations,
        colors=np.asarray(ramp)[iterations],
    )
