from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from .layout import IconLayout, StrokeWidth
from .ratios import is_forward, remap, stroke_shortening, triangular_ratio
from .shapes import Transition

Point = Tuple[float, float]

# Reference angles, in degrees.
ARROW_MID_LINE_ANGLE = 180.0
ARROW_TOP_LINE_ANGLE = 135.0
ARROW_BOT_LINE_ANGLE = 225.0
X_TOP_LINE_ANGLE = 44.0
X_BOT_LINE_ANGLE = -44.0
X_ROTATION_ANGLE = 90.0
CHECK_MIDDLE_ANGLE = 135.0
CHECK_BOTTOM_ANGLE = -90.0


@dataclass(frozen=True)
class StrokeGeometry:
    """One stroke's line and the rotations applied before drawing it.

    ``rotation2`` turns the line about ``pivot2`` first, then ``rotation``
    turns the result about ``pivot``. Angles are clockwise in screen space.
    """

    start: Point
    end: Point
    rotation: float = 0.0
    pivot: Point = (0.0, 0.0)
    rotation2: float = 0.0
    pivot2: Point | None = None
    alpha: int = 255

    @property
    def length(self) -> float:
        return math.hypot(self.end[0] - self.start[0], self.end[1] - self.start[1])


@dataclass(frozen=True)
class SolveContext:
    """Inputs shared by the three stroke solvers for a single frame."""

    transition: Transition
    progress: float
    stroke: StrokeWidth
    layout: IconLayout

    @property
    def ratio(self) -> float:
        return triangular_ratio(self.progress)

    @property
    def forward(self) -> bool:
        return is_forward(self.progress)

    def window(self, lo: float, hi: float) -> float:
        return remap(self.ratio, lo, hi)

    def shortening(self, ratio: float) -> float:
        return stroke_shortening(ratio, self.stroke, self.transition, self.layout)


def fade_out(ratio: float) -> int:
    return int((1 - ratio) * 255)


def fade_in(ratio: float) -> int:
    return int(ratio * 255)


def lerp(a: float, b: float, t: float) -> float:
    return (1 - t) * a + t * b
