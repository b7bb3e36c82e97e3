"""Bottom stroke recipes.

The bottom stroke becomes the long arm of the checkmark, so it travels
furthest: its pivot slides between the canvas centre, the cross pivot, and
the check pivot depending on the recipe.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Callable

from .geometry import (
    ARROW_TOP_LINE_ANGLE,
    ARROW_BOT_LINE_ANGLE,
    CHECK_BOTTOM_ANGLE,
    X_BOT_LINE_ANGLE,
    X_ROTATION_ANGLE,
    SolveContext,
    StrokeGeometry,
    lerp,
)
from .shapes import Transition

Recipe = Callable[[SolveContext, StrokeGeometry], StrokeGeometry]

CHECK_LINE_ANGLE = CHECK_BOTTOM_ANGLE + ARROW_TOP_LINE_ANGLE


def base_line(ctx: SolveContext) -> StrokeGeometry:
    lay = ctx.layout
    y = lay.height - lay.top_padding - lay.dip2
    return StrokeGeometry(
        start=(lay.side_padding, y),
        end=(lay.width - lay.side_padding, y),
        pivot2=(lay.center_x + lay.dip3 / 2, y),
    )


def _cross_pivot(ctx: SolveContext) -> tuple[float, float]:
    lay = ctx.layout
    return lay.side_padding + lay.dip4, lay.height - lay.top_padding - lay.dip3


def _stack_arrow(ctx: SolveContext, line: StrokeGeometry) -> StrokeGeometry:
    lay, ratio = ctx.layout, ctx.ratio
    if ctx.forward:
        rotation = ARROW_TOP_LINE_ANGLE * ratio
    else:
        # keep turning the same way to come back round a full 360
        rotation = ARROW_TOP_LINE_ANGLE + (1 - ratio) * ARROW_BOT_LINE_ANGLE
    return replace(
        line,
        rotation=rotation,
        pivot=(lay.center_x, lay.center_y),
        start=(lay.side_padding + lay.dip3 * ratio, line.start[1]),
        end=(lay.width - lay.side_padding - ctx.shortening(ratio), line.end[1]),
    )


def _stack_cross(ctx: SolveContext, line: StrokeGeometry) -> StrokeGeometry:
    ratio = ctx.ratio
    return replace(
        line,
        rotation=X_BOT_LINE_ANGLE * ratio,
        pivot=_cross_pivot(ctx),
        start=(line.start[0] + ctx.layout.dip3 * ratio, line.start[1]),
    )


def _stack_check(ctx: SolveContext, line: StrokeGeometry) -> StrokeGeometry:
    lay, ratio = ctx.layout, ctx.ratio
    return replace(
        line,
        rotation=ratio * CHECK_LINE_ANGLE,
        pivot=(lay.center_x + lay.dip3 * ratio, lay.center_y - lay.dip3 * ratio),
        start=(line.start[0] + lay.dip8 * ratio, line.start[1]),
        end=(line.end[0] - ctx.shortening(ratio), line.end[1]),
    )


def _stack_hidden(ctx: SolveContext, line: StrokeGeometry) -> StrokeGeometry:
    t = ctx.window(0.4, 0.9) if ctx.forward else ctx.window(0.0, 0.6)
    start_x = lerp(line.start[0], line.start[0] / 1.5, t)
    stop_x = lerp(line.end[0], start_x, t)
    return replace(line, start=(start_x, line.start[1]), end=(stop_x, line.end[1]))


def _arrow_cross(ctx: SolveContext, line: StrokeGeometry) -> StrokeGeometry:
    lay, ratio = ctx.layout, ctx.ratio
    return replace(
        line,
        rotation=ARROW_TOP_LINE_ANGLE + (360 + X_BOT_LINE_ANGLE - ARROW_TOP_LINE_ANGLE) * ratio,
        rotation2=-X_ROTATION_ANGLE * ratio,
        pivot=(
            lay.center_x + (lay.side_padding + lay.dip4 - lay.center_x) * ratio,
            lay.center_y + (lay.center_y - lay.top_padding - lay.dip3) * ratio,
        ),
        start=(line.start[0] + lay.dip3, line.start[1]),
        end=(line.end[0] - ctx.shortening(ratio), line.end[1]),
    )


def _arrow_check(ctx: SolveContext, line: StrokeGeometry) -> StrokeGeometry:
    lay, ratio = ctx.layout, ctx.ratio
    return replace(
        line,
        rotation=ARROW_TOP_LINE_ANGLE + ratio * CHECK_BOTTOM_ANGLE,
        pivot=(lay.center_x + lay.dip3 * ratio, lay.center_y - lay.dip3 * ratio),
        start=(line.start[0] + lay.dip3 + (lay.dip4 + lay.dip1) * ratio, line.start[1]),
        end=(line.end[0] - ctx.shortening(1), line.end[1]),
    )


def _arrow_hidden(ctx: SolveContext, line: StrokeGeometry) -> StrokeGeometry:
    lay = ctx.layout
    slide = 0.0 if ctx.forward else ctx.window(0.1, 1.0) * lay.side_padding / 8
    start_y = line.start[1] - slide
    stop_y = line.end[1] - slide
    stop_x = lay.width - lay.side_padding - ctx.shortening(1) - slide
    if ctx.forward:
        t = ctx.window(0.3, 0.8)
    else:
        t = ctx.window(0.1, 0.6)
    start_x = lerp(lay.side_padding - slide + lay.dip3, stop_x + lay.dip2, t)
    if start_x > stop_x:
        start_x = stop_x
    return replace(
        line,
        rotation=ARROW_TOP_LINE_ANGLE,
        pivot=(lay.center_x, lay.center_y),
        start=(start_x, start_y),
        end=(stop_x, stop_y),
    )


def _cross_check(ctx: SolveContext, line: StrokeGeometry) -> StrokeGeometry:
    lay, ratio = ctx.layout, ctx.ratio
    cross_x, cross_y = _cross_pivot(ctx)
    return replace(
        line,
        rotation=X_BOT_LINE_ANGLE + (CHECK_LINE_ANGLE - X_BOT_LINE_ANGLE) * ratio,
        rotation2=-X_ROTATION_ANGLE * (1 - ratio),
        pivot=(
            cross_x + (lay.center_x + lay.dip3 - cross_x) * ratio,
            cross_y + (lay.top_padding + lay.center_y - lay.height) * ratio,
        ),
        start=(line.start[0] + lay.dip8 - (lay.dip4 + lay.dip1) * (1 - ratio), line.start[1]),
        end=(line.end[0] - ctx.shortening(1 - ratio), line.end[1]),
    )


def _cross_hidden(ctx: SolveContext, line: StrokeGeometry) -> StrokeGeometry:
    lay = ctx.layout
    start_x, stop_x = line.start[0], line.end[0]
    if ctx.forward:
        t = ctx.window(0.0, 0.6)
        start_x += lay.dip3
        stop_x = lerp(stop_x, start_x, t)
    else:
        t = ctx.window(0.3, 1.0)
        start_x = lerp(start_x + lay.dip3, stop_x, t)
    return replace(
        line,
        rotation=X_BOT_LINE_ANGLE,
        rotation2=-X_ROTATION_ANGLE,
        pivot=_cross_pivot(ctx),
        start=(start_x, line.start[1]),
        end=(stop_x, line.end[1]),
    )


def _check_hidden(ctx: SolveContext, line: StrokeGeometry) -> StrokeGeometry:
    lay = ctx.layout
    start_x, stop_x = line.start[0], line.end[0]
    if ctx.forward:
        t = ctx.window(0.0, 0.3)
        stop_x -= ctx.shortening(1) + lay.dip2
        start_x = lerp(start_x + lay.dip8, stop_x, t)
    else:
        t = ctx.window(0.7, 1.0)
        start_x += lay.dip8
        stop_x = lerp(stop_x - ctx.shortening(1), start_x, t)
    return replace(
        line,
        rotation=CHECK_LINE_ANGLE,
        pivot=(lay.center_x + lay.dip3, lay.center_y - lay.dip3),
        start=(start_x, line.start[1]),
        end=(stop_x, line.end[1]),
    )


RECIPES: dict[Transition, Recipe] = {
    Transition.STACK_ARROW: _stack_arrow,
    Transition.STACK_CROSS: _stack_cross,
    Transition.STACK_CHECK: _stack_check,
    Transition.STACK_HIDDEN: _stack_hidden,
    Transition.ARROW_CROSS: _arrow_cross,
    Transition.ARROW_CHECK: _arrow_check,
    Transition.ARROW_HIDDEN: _arrow_hidden,
    Transition.CROSS_CHECK: _cross_check,
    Transition.CROSS_HIDDEN: _cross_hidden,
    Transition.CHECK_HIDDEN: _check_hidden,
}


def solve_bottom(ctx: SolveContext) -> StrokeGeometry:
    return RECIPES[ctx.transition](ctx, base_line(ctx))
