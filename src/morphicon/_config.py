from __future__ import annotations

import json
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

CONFIG_DIR = Path.home() / ".morphicon"
CONFIG_FILE = CONFIG_DIR / "morphicon.cfg"
DEFAULT_CONFIG = {
    "_comment": "Valid strokes: bold, regular (default), thin. Scale and density multiply the 40 dip canvas.",
    "stroke": "regular",
    "scale": 1,
    "density": 1.0,
    "duration_ms": 800,
    "color": "#ffffff",
}
_STROKE_ALIASES = {
    "bold": "bold",
    "3": "bold",
    "regular": "regular",
    "2": "regular",
    "thin": "thin",
    "1": "thin",
}


@dataclass(frozen=True)
class IconSettings:
    """Resolved icon defaults from morphicon.cfg."""

    stroke: str
    scale: int
    density: float
    duration_ms: float
    color: str


def ensure_user_config() -> None:
    """Ensure ~/.morphicon/morphicon.cfg exists with sane defaults."""

    try:
        CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    except OSError:
        return

    if CONFIG_FILE.exists():
        return

    try:
        CONFIG_FILE.write_text(json.dumps(DEFAULT_CONFIG, indent=2) + "\n")
    except OSError:
        return


def _load_user_config() -> Dict[str, Any]:
    ensure_user_config()
    try:
        loaded = json.loads(CONFIG_FILE.read_text())
    except (OSError, json.JSONDecodeError):
        return DEFAULT_CONFIG.copy()
    if not isinstance(loaded, dict):
        return DEFAULT_CONFIG.copy()
    return loaded


def normalize_stroke(value: object) -> str | None:
    key = str(value).strip().lower()
    return _STROKE_ALIASES.get(key)


def _positive(value: object, fallback: float, cast: type) -> Any:
    try:
        number = cast(value)
    except (TypeError, ValueError, OverflowError):
        return fallback
    if not math.isfinite(number) or number <= 0:
        return fallback
    return number


def get_icon_settings() -> IconSettings:
    """Return the configured stroke, size, timing, and colour defaults."""

    raw_config = _load_user_config()
    stroke = normalize_stroke(raw_config.get("stroke", DEFAULT_CONFIG["stroke"]))
    if stroke is None:
        stroke = DEFAULT_CONFIG["stroke"]

    color = raw_config.get("color", DEFAULT_CONFIG["color"])
    if not isinstance(color, str) or not color.strip():
        color = DEFAULT_CONFIG["color"]

    return IconSettings(
        stroke=stroke,
        scale=_positive(raw_config.get("scale"), DEFAULT_CONFIG["scale"], int),
        density=_positive(raw_config.get("density"), DEFAULT_CONFIG["density"], float),
        duration_ms=_positive(raw_config.get("duration_ms"), DEFAULT_CONFIG["duration_ms"], float),
        color=color.strip(),
    )
