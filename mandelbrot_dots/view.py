"""
Host-independent Mandelbrot dot view.

MandelbrotView owns the view state (plane region, depth, color ramp)
and turns a repaint request into a list of draw commands. A host
(see app.py for the pygame one) executes the commands on its surface.

Usage:
    view = MandelbrotView(background=(30, 30, 30))
    view.reset(32)
    for command in view.request_render(800, 800):
        canvas.execute(command)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, NamedTuple, Optional, Union

import numpy as np

from .colormaps import build_color_ramp
from .compute import DIVERGENCE_THRESHOLD
from .sampler import DEFAULT_REGION, DEFAULT_SAMPLES_PER_AXIS, PlaneRegion, SampleGrid, sample_grid


class FillRect(NamedTuple):
    rect: tuple[int, int, int, int]  # left, top, width, height
    color: tuple[int, int, int]


class DrawCircle(NamedTuple):
    center: tuple[float, float]
    radius: int
    color: tuple[int, int, int]


DrawCommand = Union[FillRect, DrawCircle]


@dataclass(frozen=True, eq=False)
class ViewState:
    """Everything a repaint depends on. Replaced wholesale on reset."""

    region: PlaneRegion
    max_depth: int
    ramp: np.ndarray

    def __eq__(self, other):
        if not isinstance(other, ViewState):
            return NotImplemented
        return (
            self.region == other.region
            and self.max_depth == other.max_depth
            and np.array_equal(self.ramp, other.ramp)
        )


def measure(width, height):
    """
    Size the view should take for a requested width and height.

    The view is square: the larger of the two dimensions wins. A
    request with a zero dimension is returned unchanged.
    """
    if width == 0 or height == 0:
        return width, height
    size = max(width, height)
    return size, size


class MandelbrotView:
    """
    Mandelbrot set drawn as a grid of colored dots.

    Attributes:
        samples_per_axis: Grid density (N for an N x N grid)
        background: RGB fill drawn behind the dots
        threshold: Squared magnitude escape bound
        state: Current ViewState, None until the first reset()
    """

    def __init__(self, samples_per_axis=DEFAULT_SAMPLES_PER_AXIS, background=(0, 0, 0),
                 threshold=DIVERGENCE_THRESHOLD, region=DEFAULT_REGION,
                 on_invalidate: Optional[Callable[[], None]] = None):
        """
        Args:
            samples_per_axis: Number of samples along each axis (> 0)
            background: Background color supplied by the host
            threshold: Divergence threshold (|z|² bound)
            region: Region restored by reset()
            on_invalidate: Called whenever the view needs a repaint
        """
        if samples_per_axis <= 0:
            raise ValueError(f"samples_per_axis must be > 0, got {samples_per_axis}")
        self.samples_per_axis = samples_per_axis
        self.background = tuple(int(v) for v in background)
        self.threshold = threshold
        self.default_region = region
        self.on_invalidate = on_invalidate
        self.state: Optional[ViewState] = None

    @property
    def max_depth(self):
        return None if self.state is None else self.state.max_depth

    def reset(self, max_depth):
        """Restore the default region, rebuild the ramp for max_depth and invalidate."""
        self.state = ViewState(
            region=self.default_region,
            max_depth=max_depth,
            ramp=build_color_ramp(max_depth),
        )
        self.invalidate()

    def invalidate(self):
        if self.on_invalidate is not None:
            self.on_invalidate()

    def sample(self, width_px, height_px) -> SampleGrid:
        """Sample the current state for a surface of the given size."""
        if self.state is None:
            raise RuntimeError("MandelbrotView.reset() must be called before rendering")
        return sample_grid(
            self.state.region, self.samples_per_axis, self.state.ramp,
            width_px, height_px, self.threshold
        )

    def request_render(self, width_px, height_px) -> list[DrawCommand]:
        """
        Produce the draw commands for one full repaint.

        Returns:
            A FillRect covering the surface in the background color,
            followed by one DrawCircle per grid point in grid order.
        """
        grid = self.sample(width_px, height_px)
        commands: list[DrawCommand] = [
            FillRect((0, 0, int(width_px), int(height_px)), self.background)
        ]
        commands.extend(
            DrawCircle(point.screen, grid.radius, point.color) for point in grid
        )
        return commands
