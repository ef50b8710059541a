"""
Main application module for the Mandelbrot dot view.

Contains:
- PygameCanvas: executes the view's draw commands on a pygame Surface
- MandelbrotApp: window setup, event loop and redraw scheduling
- run(): convenience entry point
"""

import os
import time
from datetime import datetime

import pygame

from .compute import warmup_jit
from .settings import load_settings
from .view import DrawCircle, FillRect, MandelbrotView, measure


class PygameCanvas:
    """Draws FillRect / DrawCircle commands onto a pygame Surface."""

    def __init__(self, surface):
        self.surface = surface

    def execute(self, command):
        if isinstance(command, FillRect):
            pygame.draw.rect(self.surface, command.color, pygame.Rect(command.rect))
        elif isinstance(command, DrawCircle):
            pygame.draw.circle(self.surface, command.color, command.center, command.radius)
        else:
            raise TypeError(f"Unknown draw command: {command!r}")

    def draw(self, commands):
        for command in commands:
            self.execute(command)


class MandelbrotApp:
    """
    Main application class for the Mandelbrot dot view.

    Owns the pygame window and a MandelbrotView. The view is only
    repainted after it has been invalidated (startup, reset, depth change).
    """

    MIN_DEPTH = 0
    MAX_DEPTH = 4096

    def __init__(self, settings=None):
        """
        Initialize the application.

        Args:
            settings: Settings instance (default: loaded from settings.json)
        """
        self.settings = settings or load_settings()
        self.width, self.height = measure(*self.settings.window_size)

        self.view = MandelbrotView(
            samples_per_axis=self.settings.samples_per_axis,
            background=self.settings.background_color,
            threshold=self.settings.divergence_threshold,
            region=self.settings.region,
            on_invalidate=self._invalidate,
        )

        # Pygame state (initialized in run())
        self.screen = None
        self.canvas = None
        self.clock = None

        self.needs_redraw = False
        self.last_render_ms = 0.0
        self.running = False

    def _invalidate(self):
        self.needs_redraw = True

    def run(self):
        """Run the application main loop."""
        self._init_pygame()
        pygame.display.set_caption("Compiling (first run only)...")
        warmup_jit()
        self.start_view()

        self.running = True
        while self.running:
            self._handle_events()
            if self.needs_redraw:
                self.render()
            self.clock.tick(30)

    def start_view(self):
        """Reset the view to the configured depth, clamped like change_depth."""
        self.view.reset(self.clamp_depth(self.settings.max_depth))

    def _init_pygame(self):
        """Initialize pygame and create window."""
        pygame.init()
        self.screen = pygame.display.set_mode((self.width, self.height))
        self.canvas = PygameCanvas(self.screen)
        self.clock = pygame.time.Clock()

    def render(self):
        """Repaint the whole view and flip the display."""
        start = time.perf_counter()
        self.canvas.draw(self.view.request_render(self.width, self.height))
        self.last_render_ms = (time.perf_counter() - start) * 1000.0
        self.needs_redraw = False
        pygame.display.flip()
        self._update_caption()

    def _update_caption(self):
        pygame.display.set_caption(
            f"Mandelbrot Set - depth {self.view.max_depth} "
            f"({self.last_render_ms:.0f} ms) - Up/Down depth, R reset, S save"
        )

    def _handle_events(self):
        """Process all pending pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                self._handle_key(event)
            elif event.type == pygame.VIDEOEXPOSE:
                self.needs_redraw = True

    def _handle_key(self, event):
        """Handle keyboard input."""
        if event.key == pygame.K_r:
            self.view.reset(self.view.max_depth)
        elif event.key == pygame.K_UP:
            self.change_depth(max(1, self.view.max_depth * 2))
        elif event.key == pygame.K_DOWN:
            self.change_depth(self.view.max_depth // 2)
        elif event.key == pygame.K_s:
            self.save_snapshot()
        elif event.key == pygame.K_ESCAPE:
            self.running = False

    def clamp_depth(self, depth):
        return min(self.MAX_DEPTH, max(self.MIN_DEPTH, depth))

    def change_depth(self, depth):
        """Reset the view with a new depth, clamped to [MIN_DEPTH, MAX_DEPTH]."""
        depth = self.clamp_depth(depth)
        if depth != self.view.max_depth:
            self.view.reset(depth)

    def save_snapshot(self, directory=None):
        """
        Save the current window contents as a PNG.

        Returns:
            Path of the written file
        """
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filename = os.path.join(directory or os.getcwd(), f"mandelbrot_{timestamp}.png")
        pygame.image.save(self.screen, filename)
        pygame.display.set_caption(f"Saved: {os.path.basename(filename)} - Mandelbrot Set")
        print(f"Snapshot saved to: {filename}")
        return filename


def run(settings=None):
    """
    Run the Mandelbrot dot view.

    Args:
        settings: Settings instance (default: loaded from settings.json)
    """
    app = MandelbrotApp(settings)
    try:
        app.run()
    except KeyboardInterrupt:
        pass
    finally:
        pygame.quit()

