"""
test_settings.py
"""
import json
import pytest
from mandelbrot_dots.sampler import DEFAULT_REGION, PlaneRegion
from mandelbrot_dots.settings import Settings, load_settings, settings_from_dict


def test_bundled_settings_file():
    settings = load_settings()
    assert settings.samples_per_axis == 100
    assert settings.region == DEFAULT_REGION
    assert settings.divergence_threshold == 4.0


def test_missing_file_falls_back_to_defaults(tmp_path, capsys):
    settings = load_settings(str(tmp_path / 'nope.json'))
    assert settings == Settings()
    assert 'Warning' in capsys.readouterr().out


def test_broken_json_falls_back_to_defaults(tmp_path, capsys):
    path = tmp_path / 'settings.json'
    path.write_text('{ not json')
    assert load_settings(str(path)) == Settings()
    assert 'Warning' in capsys.readouterr().out


def test_partial_file_keeps_other_defaults(tmp_path):
    path = tmp_path / 'settings.json'
    path.write_text(json.dumps({'max_depth': 64, 'bounds': [-1, 1, -1, 1], 'extra': True}))
    settings = load_settings(str(path))
    assert settings.max_depth == 64
    assert settings.region == PlaneRegion(-1.0, 1.0, -1.0, 1.0)
    assert settings.samples_per_axis == Settings().samples_per_axis


@pytest.mark.parametrize('data', [
    {'max_depth': -1},
    {'samples_per_axis': 0},
    {'divergence_threshold': 0},
    {'background_color': [1, 2]},
    {'background_color': [1, 2, 300]},
    {'window_size': 800},
    {'bounds': [0, 1, 0]},
    {'bounds': [1, 0, 0, 1]},
    {'bounds': [0, 1, None, 1]},
    {'max_depth': None},
    {'max_depth': True},
    {'max_depth': 1.7},
    {'samples_per_axis': '100'},
    {'samples_per_axis': False},
    {'divergence_threshold': None},
    {'divergence_threshold': '4.0'},
    {'background_color': [1, 2, True]},
    {'window_size': [-5, 0]},
    {'window_size': [800, 0]},
    {'window_size': [800.5, 600]},
])
def test_invalid_values_are_rejected(data):
    with pytest.raises(ValueError):
        settings_from_dict(data)


def test_non_object_file_is_rejected(tmp_path):
    path = tmp_path / 'settings.json'
    path.write_text('[1, 2, 3]')
    with pytest.raises(ValueError):
        load_settings(str(path))


def test_numeric_values_keep_their_types():
    settings = settings_from_dict({'divergence_threshold': 9, 'window_size': [640, 480]})
    assert settings.divergence_threshold == 9.0
    assert isinstance(settings.divergence_threshold, float)
    assert settings.window_size == (640, 480)
