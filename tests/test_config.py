from __future__ import annotations

import json

from morphicon import _config
from morphicon.engine import MorphEngine
from morphicon.modeling import StrokeWidth


def test_defaults_written_on_first_use(isolated_config):
    settings = _config.get_icon_settings()
    assert isolated_config.exists()
    written = json.loads(isolated_config.read_text())
    assert written["stroke"] == "regular"
    assert settings == _config.IconSettings(
        stroke="regular",
        scale=1,
        density=1.0,
        duration_ms=800.0,
        color="#ffffff",
    )


def test_existing_config_is_not_overwritten(isolated_config):
    isolated_config.parent.mkdir(parents=True)
    isolated_config.write_text(json.dumps({"stroke": "3", "scale": 2, "color": " tomato "}))
    settings = _config.get_icon_settings()
    assert settings.stroke == "bold"
    assert settings.scale == 2
    assert settings.color == "tomato"
    assert json.loads(isolated_config.read_text())["stroke"] == "3"


def test_bad_values_fall_back(isolated_config):
    isolated_config.parent.mkdir(parents=True)
    isolated_config.write_text(
        json.dumps({"stroke": "heavy", "scale": -2, "density": "dense", "duration_ms": 0, "color": ""})
    )
    settings = _config.get_icon_settings()
    assert settings.stroke == "regular"
    assert settings.scale == 1
    assert settings.density == 1.0
    assert settings.duration_ms == 800
    assert settings.color == "#ffffff"


def test_malformed_json_uses_defaults(isolated_config):
    isolated_config.parent.mkdir(parents=True)
    isolated_config.write_text("{ not json")
    assert _config.get_icon_settings().stroke == "regular"


def test_normalize_stroke_aliases():
    assert _config.normalize_stroke("THIN") == "thin"
    assert _config.normalize_stroke(2) == "regular"
    assert _config.normalize_stroke("heavy") is None


def test_engine_from_settings(isolated_config):
    isolated_config.parent.mkdir(parents=True)
    isolated_config.write_text(json.dumps({"stroke": "thin", "scale": 2, "duration_ms": 250}))
    engine = MorphEngine.from_settings(_config.get_icon_settings())
    assert engine.stroke is StrokeWidth.THIN
    assert engine.layout.width == 80
    assert engine.timeline.duration_ms == 250


def test_non_finite_numbers_fall_back(isolated_config):
    isolated_config.parent.mkdir(parents=True)
    isolated_config.write_text('{"scale": Infinity, "density": Infinity, "duration_ms": NaN}')
    settings = _config.get_icon_settings()
    assert settings.scale == 1
    assert settings.density == 1.0
    assert settings.duration_ms == 800
    engine = MorphEngine.from_settings(settings)
    assert engine.layout.width == 40
