"""
Settings for the Mandelbrot dot view.

Values come from settings.json next to this module (or a path given
on the command line). Missing keys fall back to the built-in defaults;
a missing or unreadable file falls back to the defaults entirely.
"""

import json
import os
from dataclasses import dataclass, field

from .compute import DIVERGENCE_THRESHOLD
from .sampler import DEFAULT_MAX_DEPTH, DEFAULT_REGION, DEFAULT_SAMPLES_PER_AXIS, PlaneRegion


DEFAULT_SETTINGS_PATH = os.path.join(os.path.dirname(__file__), 'settings.json')


@dataclass(frozen=True)
class Settings:
    max_depth: int = DEFAULT_MAX_DEPTH
    samples_per_axis: int = DEFAULT_SAMPLES_PER_AXIS
    background_color: tuple = (33, 33, 33)
    window_size: tuple = (800, 800)
    region: PlaneRegion = field(default=DEFAULT_REGION)
    divergence_threshold: float = DIVERGENCE_THRESHOLD


def _int(value, key):
    # bool is an int subclass; JSON true/false is not a count
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key} must be an integer, got {value!r}")
    return value


def _number(value, key):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{key} must be a number, got {value!r}")
    return float(value)


def _int_pair(value, key):
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ValueError(f"{key} must be a list of 2 integers, got {value!r}")
    pair = _int(value[0], key), _int(value[1], key)
    if pair[0] <= 0 or pair[1] <= 0:
        raise ValueError(f"{key} values must be > 0, got {value!r}")
    return pair


def _rgb(value, key):
    if not isinstance(value, (list, tuple)) or len(value) != 3:
        raise ValueError(f"{key} must be a list of 3 integers, got {value!r}")
    rgb = tuple(_int(v, key) for v in value)
    if any(v < 0 or v > 255 for v in rgb):
        raise ValueError(f"{key} values must be in 0..255, got {value!r}")
    return rgb


def settings_from_dict(data):
    """
    Build Settings from a decoded settings.json mapping.

    Unknown keys are ignored.

    Raises:
        ValueError if a known key has the wrong shape or range
    """
    defaults = Settings()
    max_depth = _int(data.get('max_depth', defaults.max_depth), 'max_depth')
    if max_depth < 0:
        raise ValueError(f"max_depth must be >= 0, got {max_depth}")
    samples = _int(data.get('samples_per_axis', defaults.samples_per_axis), 'samples_per_axis')
    if samples <= 0:
        raise ValueError(f"samples_per_axis must be > 0, got {samples}")
    threshold = _number(data.get('divergence_threshold', defaults.divergence_threshold),
                        'divergence_threshold')
    if threshold <= 0:
        raise ValueError(f"divergence_threshold must be > 0, got {threshold}")

    background = defaults.background_color
    if 'background_color' in data:
        background = _rgb(data['background_color'], 'background_color')

    window_size = defaults.window_size
    if 'window_size' in data:
        window_size = _int_pair(data['window_size'], 'window_size')

    region = defaults.region
    if 'bounds' in data:
        bounds = data['bounds']
        if not isinstance(bounds, (list, tuple)) or len(bounds) != 4:
            raise ValueError(f"bounds must be [x_min, x_max, y_min, y_max], got {bounds!r}")
        region = PlaneRegion.from_bounds([_number(v, 'bounds') for v in bounds])

    return Settings(
        max_depth=max_depth,
        samples_per_axis=samples,
        background_color=background,
        window_size=window_size,
        region=region,
        divergence_threshold=threshold,
    )


def load_settings(path=None):
    """Load settings from a settings.json file."""
    settings_path = path or DEFAULT_SETTINGS_PATH
    try:
        with open(settings_path, 'r') as f:
            data = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError) as e:
        print(f"Warning: Could not load {os.path.basename(settings_path)}: {e}")
        return Settings()
    if not isinstance(data, dict):
        raise ValueError(f"{settings_path} must contain a JSON object")
    return settings_from_dict(data)
