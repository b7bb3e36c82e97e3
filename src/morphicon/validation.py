from __future__ import annotations

import math
from typing import Callable


class MorphError(ValueError):
    """Base error for icon morph failures."""


class UnsupportedTransition(MorphError):
    """Raised when two shapes are not linked by a transition."""


class InvalidArgument(MorphError):
    """Raised when a progress offset, duration, or easing is malformed."""


PROGRESS_START = 0.0
PROGRESS_MID = 1.0
PROGRESS_END = 2.0


def validate_offset(offset: float) -> float:
    try:
        value = float(offset)
    except (TypeError, ValueError) as exc:
        raise InvalidArgument("Offset must be a number.") from exc
    if not math.isfinite(value) or value < PROGRESS_START or value > PROGRESS_END:
        raise InvalidArgument(f"Value must be between {PROGRESS_START} and {PROGRESS_END}.")
    return value


def validate_duration(duration_ms: float) -> float:
    try:
        value = float(duration_ms)
    except (TypeError, ValueError) as exc:
        raise InvalidArgument("Duration must be a number of milliseconds.") from exc
    if not math.isfinite(value) or value <= 0:
        raise InvalidArgument("Duration must be positive.")
    return value


def validate_easing(easing: Callable[[float], float]) -> Callable[[float], float]:
    """Check that an easing curve is callable and maps 0 to 0 and 1 to 1."""

    if not callable(easing):
        raise InvalidArgument("Easing must be callable.")
    try:
        lo = float(easing(0.0))
        hi = float(easing(1.0))
    except (TypeError, ValueError, ArithmeticError) as exc:
        raise InvalidArgument("Easing failed to evaluate on [0, 1].") from exc
    if not math.isclose(lo, 0.0, abs_tol=1e-9) or not math.isclose(hi, 1.0, abs_tol=1e-9):
        raise InvalidArgument("Easing must map 0 to 0 and 1 to 1.")
    return easing
