"""Progress remapping shared by the stroke solvers."""

from __future__ import annotations

from morphicon.validation import InvalidArgument, PROGRESS_MID

from .layout import IconLayout, StrokeWidth
from .shapes import Transition

# Shortening runs from full length down to zero for these.
_SHRINKING = frozenset({Transition.ARROW_CROSS, Transition.CROSS_CHECK})


def remap(ratio: float, lo: float, hi: float) -> float:
    """Map ``ratio`` onto [0, 1] over the window [lo, hi], clamping outside it."""

    if hi <= lo:
        raise InvalidArgument(f"remap window must satisfy lo < hi, got [{lo}, {hi}].")
    if ratio <= lo:
        return 0.0
    if ratio >= hi:
        return 1.0
    return (ratio - lo) / (hi - lo)


def triangular_ratio(progress: float) -> float:
    """Rise 0 -> 1 over progress [0, 1], then fall 1 -> 0 over (1, 2]."""

    return progress if progress <= PROGRESS_MID else 2 - progress


def is_forward(progress: float) -> bool:
    return progress <= PROGRESS_MID


def stroke_shortening(ratio: float, stroke: StrokeWidth, transition: Transition, layout: IconLayout) -> float:
    base = stroke.shortening_dips * layout.dip
    if transition in _SHRINKING:
        return base - base * ratio
    return ratio * base


__all__ = ["remap", "triangular_ratio", "is_forward", "stroke_shortening"]
