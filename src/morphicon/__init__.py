"""morphicon: a three-stroke icon that morphs between stack, arrow, cross, check, and hidden."""

from __future__ import annotations

from .engine import MorphEngine
from .modeling import IconLayout, IconShape, StrokeGeometry, StrokeWidth, Transition, resolve, solve
from .validation import InvalidArgument, MorphError, UnsupportedTransition

__all__ = [
    "__version__",
    "MorphEngine",
    "IconShape",
    "Transition",
    "StrokeWidth",
    "IconLayout",
    "StrokeGeometry",
    "resolve",
    "solve",
    "MorphError",
    "UnsupportedTransition",
    "InvalidArgument",
]

__version__ = "0.1.0"
