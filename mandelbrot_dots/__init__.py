"""
Mandelbrot Dot View Package

Draws an approximation of the Mandelbrot set as a grid of colored dots,
recomputed on every repaint. Numba does the escape-time iteration,
Pygame hosts the window.

Quick Start:
    from mandelbrot_dots import run
    run()

Or from command line:
    python -m mandelbrot_dots --depth 64

Package Structure:
    - compute.py: JIT-compiled escape-time kernels
    - colormaps.py: Color ramp construction
    - sampler.py: Plane regions and sample grids (pure, no UI)
    - view.py: MandelbrotView, turns a repaint into draw commands
    - settings.py: settings.json loading
    - app.py: Pygame window and event loop

Controls:
    - Up / Down: Double / halve the iteration depth
    - R: Reset to default view
    - S: Save a PNG snapshot
    - ESC: Quit
"""

from .colormaps import build_color_ramp
from .sampler import (
    DEFAULT_MAX_DEPTH,
    DEFAULT_REGION,
    DEFAULT_SAMPLES_PER_AXIS,
    PlaneRegion,
    SampleGrid,
    escape_iterations,
    sample_grid,
)
from .compute import DIVERGENCE_THRESHOLD
from .view import MandelbrotView, ViewState, measure
from .settings import Settings, load_settings
from .app import run, MandelbrotApp

__version__ = "1.0.0"
__all__ = [
    "DEFAULT_MAX_DEPTH",
    "DEFAULT_REGION",
    "DEFAULT_SAMPLES_PER_AXIS",
    "DIVERGENCE_THRESHOLD",
    "MandelbrotApp",
    "MandelbrotView",
    "PlaneRegion",
    "SampleGrid",
    "Settings",
    "ViewState",
    "build_color_ramp",
    "escape_iterations",
    "load_settings",
    "measure",
    "run",
    "sample_grid",
]
