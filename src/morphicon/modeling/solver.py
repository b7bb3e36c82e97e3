from __future__ import annotations

from typing import NamedTuple

from .bottom_stroke import RECIPES as BOTTOM_RECIPES, solve_bottom
from .geometry import SolveContext, StrokeGeometry
from .layout import IconLayout, StrokeWidth
from .middle_stroke import RECIPES as MIDDLE_RECIPES, solve_middle
from .shapes import Transition
from .top_stroke import RECIPES as TOP_RECIPES, solve_top

for _table in (TOP_RECIPES, MIDDLE_RECIPES, BOTTOM_RECIPES):
    _missing = set(Transition) - set(_table)
    if _missing:
        raise RuntimeError(f"Stroke recipes missing for {sorted(t.name for t in _missing)}.")


class IconGeometry(NamedTuple):
    top: StrokeGeometry
    middle: StrokeGeometry
    bottom: StrokeGeometry


def solve(
    transition: Transition,
    progress: float,
    stroke: StrokeWidth = StrokeWidth.REGULAR,
    layout: IconLayout | None = None,
) -> IconGeometry:
    """Compute all three strokes for ``transition`` at ``progress`` in [0, 2].

    Progress is expected to be clamped already; only the staged sub-windows
    inside each recipe clamp.
    """

    if layout is None:
        layout = IconLayout.create(stroke)
    ctx = SolveContext(transition=transition, progress=float(progress), stroke=stroke, layout=layout)
    return IconGeometry(solve_top(ctx), solve_middle(ctx), solve_bottom(ctx))


__all__ = ["IconGeometry", "solve"]
