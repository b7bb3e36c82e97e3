"""Middle stroke recipes.

The middle stroke only ever turns about the canvas centre (nudged right for
the checkmark); it mostly changes length and opacity.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Callable

from .geometry import (
    ARROW_MID_LINE_ANGLE,
    CHECK_MIDDLE_ANGLE,
    SolveContext,
    StrokeGeometry,
    fade_in,
    lerp,
)
from .shapes import Transition

Recipe = Callable[[SolveContext, StrokeGeometry], StrokeGeometry]


def base_line(ctx: SolveContext) -> StrokeGeometry:
    lay = ctx.layout
    y = lay.top_padding + lay.dip3 / 2 * 5
    return StrokeGeometry(
        start=(lay.side_padding, y),
        end=(lay.width - lay.side_padding, y),
        pivot=(lay.center_x, lay.center_y),
    )


def _check_pivot(ctx: SolveContext) -> tuple[float, float]:
    lay = ctx.layout
    return lay.center_x + lay.dip3 + lay.dip_half, lay.center_y


def _stack_arrow(ctx: SolveContext, line: StrokeGeometry) -> StrokeGeometry:
    ratio = ctx.ratio
    if ctx.forward:
        rotation = ratio * ARROW_MID_LINE_ANGLE
    else:
        rotation = ARROW_MID_LINE_ANGLE + (1 - ratio) * ARROW_MID_LINE_ANGLE
    return replace(
        line,
        rotation=rotation,
        end=(line.end[0] - ratio * ctx.shortening(ratio) / 2, line.end[1]),
    )


def _stack_cross(ctx: SolveContext, line: StrokeGeometry) -> StrokeGeometry:
    t = ctx.window(0.0, 0.9)
    stop_x = line.end[0] - t * (line.end[0] - line.start[0])
    return replace(line, end=(stop_x, line.end[1]))


def _stack_check(ctx: SolveContext, line: StrokeGeometry) -> StrokeGeometry:
    lay, ratio = ctx.layout, ctx.ratio
    return replace(
        line,
        rotation=ratio * CHECK_MIDDLE_ANGLE,
        pivot=_check_pivot(ctx),
        start=(line.start[0] + ratio * (lay.dip4 + lay.dip3 / 2), line.start[1]),
        end=(line.end[0] + ratio * lay.dip1, line.end[1]),
    )


def _stack_hidden(ctx: SolveContext, line: StrokeGeometry) -> StrokeGeometry:
    t = ctx.window(0.2, 0.8)
    start_x = lerp(line.start[0], line.start[0] / 1.5, t)
    stop_x = lerp(line.end[0], start_x, t)
    return replace(line, start=(start_x, line.start[1]), end=(stop_x, line.end[1]))


def _arrow_cross(ctx: SolveContext, line: StrokeGeometry) -> StrokeGeometry:
    lay = ctx.layout
    t = ctx.window(0.0, 0.6)
    start_x = line.start[0] + lay.dip2 + t * (line.end[0] - line.start[0] - lay.dip2)
    return replace(line, start=(start_x, line.start[1]))


def _arrow_check(ctx: SolveContext, line: StrokeGeometry) -> StrokeGeometry:
    lay, ratio = ctx.layout, ctx.ratio
    if ctx.forward:
        rotation = ratio * CHECK_MIDDLE_ANGLE
    else:
        rotation = CHECK_MIDDLE_ANGLE - CHECK_MIDDLE_ANGLE * (1 - ratio)
    return replace(
        line,
        rotation=rotation,
        pivot=_check_pivot(ctx),
        start=(line.start[0] + lay.dip3 / 2 + lay.dip4 - (1 - ratio) * lay.dip2, line.start[1]),
        end=(line.end[0] + ratio * lay.dip1, line.end[1]),
    )


def _arrow_hidden(ctx: SolveContext, line: StrokeGeometry) -> StrokeGeometry:
    lay = ctx.layout
    start_x, stop_x = line.start[0], line.end[0]
    if ctx.forward:
        slide_t = ctx.window(0.4, 0.9)
        t = ctx.window(0.5, 0.9)
        start_x = lerp(start_x + ctx.shortening(1) / 2, start_x - lay.side_padding / 6, slide_t)
        stop_x = lerp(stop_x, start_x, t)
    else:
        slide = ctx.window(0.1, 1.0) * lay.side_padding
        t = ctx.window(0.6, 1.0)
        stop_x += slide / 2
        start_x = lerp(start_x + slide / 4 + ctx.shortening(1) / 2, stop_x, t)
    return replace(line, start=(start_x, line.start[1]), end=(stop_x, line.end[1]))


def _cross_check(ctx: SolveContext, line: StrokeGeometry) -> StrokeGeometry:
    lay, ratio = ctx.layout, ctx.ratio
    return replace(
        line,
        alpha=fade_in(ratio),
        rotation=ratio * CHECK_MIDDLE_ANGLE,
        pivot=_check_pivot(ctx),
        start=(line.start[0] + ratio * (lay.dip4 + lay.dip3 / 2), line.start[1]),
        end=(line.end[0] + ratio * lay.dip1, line.end[1]),
    )


def _cross_hidden(ctx: SolveContext, line: StrokeGeometry) -> StrokeGeometry:
    return replace(line, alpha=0)


def _check_hidden(ctx: SolveContext, line: StrokeGeometry) -> StrokeGeometry:
    lay = ctx.layout
    start_x, stop_x = line.start[0], line.end[0]
    if ctx.forward:
        t = ctx.window(0.3, 0.9)
        start_x += lay.dip4 + lay.dip3 / 2
        stop_x = lerp(stop_x + lay.dip1 + lay.dip_half / 2, start_x, t)
    else:
        t = ctx.window(0.0, 0.7)
        stop_x -= 1.5 * lay.dip_half
        start_x = lerp(start_x + lay.dip4 + lay.dip3 / 2, stop_x, t)
    return replace(
        line,
        rotation=CHECK_MIDDLE_ANGLE,
        pivot=_check_pivot(ctx),
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


def solve_middle(ctx: SolveContext) -> StrokeGeometry:
    return RECIPES[ctx.transition](ctx, base_line(ctx))
