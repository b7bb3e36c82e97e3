from __future__ import annotations

from pathlib import Path

import pytest

from morphicon import _config
from morphicon.engine import MorphEngine
from morphicon.modeling import IconLayout, StrokeWidth

PROJECT_ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the user config at a temporary directory for every test."""
    config_dir = tmp_path / ".morphicon"
    monkeypatch.setattr(_config, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(_config, "CONFIG_FILE", config_dir / "morphicon.cfg")
    return config_dir / "morphicon.cfg"


@pytest.fixture
def project_root() -> Path:
    return PROJECT_ROOT


@pytest.fixture
def layout() -> IconLayout:
    return IconLayout.create(StrokeWidth.REGULAR)


@pytest.fixture
def engine() -> MorphEngine:
    return MorphEngine(stroke=StrokeWidth.REGULAR, color="#ffffff")
