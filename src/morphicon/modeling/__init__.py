"""Icon geometry: shapes, transitions, and the per-stroke solvers."""

from __future__ import annotations

from .shapes import IconShape, Transition, resolve, rest_pose
from .layout import IconLayout, StrokeWidth
from .ratios import remap, stroke_shortening, triangular_ratio
from .geometry import StrokeGeometry
from .solver import IconGeometry, solve
from .transform import resolve_segment

__all__ = [
    "IconShape",
    "Transition",
    "resolve",
    "rest_pose",
    "IconLayout",
    "StrokeWidth",
    "remap",
    "triangular_ratio",
    "stroke_shortening",
    "StrokeGeometry",
    "IconGeometry",
    "solve",
    "resolve_segment",
]
