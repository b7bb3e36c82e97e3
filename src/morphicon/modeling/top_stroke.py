"""Top stroke recipes.

The top stroke carries most of the arrow and cross rotation. It turns about
the canvas centre (or the cross pivot near its left end) and, for cross
recipes, also flips in place about the middle of the line.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Callable

from .geometry import (
    ARROW_BOT_LINE_ANGLE,
    ARROW_TOP_LINE_ANGLE,
    X_ROTATION_ANGLE,
    X_TOP_LINE_ANGLE,
    SolveContext,
    StrokeGeometry,
    fade_out,
    lerp,
)
from .shapes import Transition

Recipe = Callable[[SolveContext, StrokeGeometry], StrokeGeometry]


def base_line(ctx: SolveContext) -> StrokeGeometry:
    lay = ctx.layout
    y = lay.top_padding + lay.dip2
    return StrokeGeometry(
        start=(lay.side_padding, y),
        end=(lay.width - lay.side_padding, y),
        pivot2=(lay.center_x + lay.dip3 / 2, y),
    )


def _cross_pivot(ctx: SolveContext) -> tuple[float, float]:
    lay = ctx.layout
    return lay.side_padding + lay.dip4, lay.top_padding + lay.dip3


def _stack_arrow(ctx: SolveContext, line: StrokeGeometry) -> StrokeGeometry:
    lay, ratio = ctx.layout, ctx.ratio
    if ctx.forward:
        rotation = ratio * ARROW_BOT_LINE_ANGLE
    else:
        # keep turning the same way to come back round a full 360
        rotation = ARROW_BOT_LINE_ANGLE + (1 - ratio) * ARROW_TOP_LINE_ANGLE
    return replace(
        line,
        rotation=rotation,
        pivot=(lay.center_x, lay.center_y),
        start=(line.start[0] + lay.dip3 * ratio, line.start[1]),
        end=(line.end[0] - ctx.shortening(ratio), line.end[1]),
    )


def _stack_cross(ctx: SolveContext, line: StrokeGeometry) -> StrokeGeometry:
    ratio = ctx.ratio
    return replace(
        line,
        rotation=X_TOP_LINE_ANGLE * ratio,
        pivot=_cross_pivot(ctx),
        start=(line.start[0] + ctx.layout.dip3 * ratio, line.start[1]),
    )


def _stack_check(ctx: SolveContext, line: StrokeGeometry) -> StrokeGeometry:
    return replace(line, alpha=fade_out(ctx.ratio))


def _stack_hidden(ctx: SolveContext, line: StrokeGeometry) -> StrokeGeometry:
    t = ctx.window(0.0, 0.6) if ctx.forward else ctx.window(0.4, 0.9)
    start_x = lerp(line.start[0], line.start[0] / 1.5, t)
    stop_x = lerp(line.end[0], start_x, t)
    return replace(line, start=(start_x, line.start[1]), end=(stop_x, line.end[1]))


def _arrow_cross(ctx: SolveContext, line: StrokeGeometry) -> StrokeGeometry:
    lay, ratio = ctx.layout, ctx.ratio
    cross_x, cross_y = _cross_pivot(ctx)
    return replace(
        line,
        rotation=ARROW_BOT_LINE_ANGLE + (X_TOP_LINE_ANGLE - ARROW_BOT_LINE_ANGLE) * ratio,
        rotation2=X_ROTATION_ANGLE * ratio,
        pivot=(
            lay.center_x + (cross_x - lay.center_x) * ratio,
            lay.center_y + (cross_y - lay.center_y) * ratio,
        ),
        start=(line.start[0] + lay.dip3, line.start[1]),
        end=(line.end[0] - ctx.shortening(ratio), line.end[1]),
    )


def _arrow_check(ctx: SolveContext, line: StrokeGeometry) -> StrokeGeometry:
    lay = ctx.layout
    # hold the arrow pose while fading out
    return replace(
        line,
        alpha=fade_out(ctx.ratio),
        rotation=ARROW_BOT_LINE_ANGLE,
        pivot=(lay.center_x, lay.center_y),
        start=(line.start[0] + lay.dip3, line.start[1]),
        end=(line.end[0] - ctx.shortening(1), line.end[1]),
    )


def _arrow_hidden(ctx: SolveContext, line: StrokeGeometry) -> StrokeGeometry:
    lay = ctx.layout
    slide = 0.0 if ctx.forward else ctx.window(0.1, 1.0) * lay.side_padding / 8
    start_y = line.start[1] + slide
    stop_y = line.end[1] + slide
    stop_x = line.end[0] - (ctx.shortening(1) + slide)
    t = ctx.window(0.0, 0.5 if ctx.forward else 0.4)
    start_x = lerp(line.start[0] - slide + lay.dip3, stop_x + lay.dip2, t)
    if start_x > stop_x:
        start_x = stop_x
    return replace(
        line,
        rotation=ARROW_BOT_LINE_ANGLE,
        pivot=(lay.center_x, lay.center_y),
        start=(start_x, start_y),
        end=(stop_x, stop_y),
    )


def _cross_check(ctx: SolveContext, line: StrokeGeometry) -> StrokeGeometry:
    lay, ratio = ctx.layout, ctx.ratio
    return replace(
        line,
        rotation=X_TOP_LINE_ANGLE,
        rotation2=X_ROTATION_ANGLE,
        pivot=_cross_pivot(ctx),
        start=(line.start[0] + lay.dip3, line.start[1]),
        end=(line.end[0] + lay.dip3 - lay.dip3 * (1 - ratio), line.end[1]),
        alpha=fade_out(ratio),
    )


def _cross_hidden(ctx: SolveContext, line: StrokeGeometry) -> StrokeGeometry:
    lay = ctx.layout
    start_x, stop_x = line.start[0], line.end[0]
    if ctx.forward:
        t = ctx.window(0.4, 0.92)
        start_x += lay.dip3
        stop_x = lerp(stop_x, start_x, t)
    else:
        t = ctx.window(0.0, 0.5)
        start_x = lerp(start_x + lay.dip3, stop_x, t)
    return replace(
        line,
        rotation=X_TOP_LINE_ANGLE,
        rotation2=X_ROTATION_ANGLE,
        pivot=_cross_pivot(ctx),
        start=(start_x, line.start[1]),
        end=(stop_x, line.end[1]),
    )


def _check_hidden(ctx: SolveContext, line: StrokeGeometry) -> StrokeGeometry:
    return replace(line, alpha=0)


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


def solve_top(ctx: SolveContext) -> StrokeGeometry:
    return RECIPES[ctx.transition](ctx, base_line(ctx))
