from __future__ import annotations

import numpy as np
import pytest

from morphicon.modeling import IconLayout, IconShape, StrokeWidth, Transition, resolve_segment, solve
from morphicon.modeling import bottom_stroke, middle_stroke, top_stroke

from tests.helpers import same_drawing

STROKES = ("top", "middle", "bottom")


def test_every_transition_has_a_recipe_per_stroke():
    for table in (top_stroke.RECIPES, middle_stroke.RECIPES, bottom_stroke.RECIPES):
        assert set(table) == set(Transition)


def test_stack_rest_pose(layout):
    top, middle, bottom = solve(Transition.STACK_ARROW, 0.0, StrokeWidth.REGULAR, layout)
    assert (top.start, top.end) == ((10.0, 14.5), (30.0, 14.5))
    assert (middle.start, middle.end) == ((10.0, 20.0), (30.0, 20.0))
    assert (bottom.start, bottom.end) == ((10.0, 25.5), (30.0, 25.5))
    assert top.rotation == middle.rotation == bottom.rotation == 0.0
    assert top.alpha == middle.alpha == bottom.alpha == 255


def test_arrow_rest_pose(layout):
    top, middle, bottom = solve(Transition.STACK_ARROW, 1.0, StrokeWidth.REGULAR, layout)
    assert top.rotation == 225.0
    assert middle.rotation == 180.0
    assert bottom.rotation == 135.0
    assert top.pivot == bottom.pivot == (20.0, 20.0)
    assert top.start[0] == pytest.approx(13.0)
    assert top.end[0] == pytest.approx(26.5)
    assert middle.end[0] == pytest.approx(28.25)


def test_arrow_points_left(layout):
    top, middle, bottom = solve(Transition.STACK_ARROW, 1.0, StrokeWidth.REGULAR, layout)
    shaft = resolve_segment(middle)
    upper = resolve_segment(top)
    lower = resolve_segment(bottom)
    tip_x = shaft[:, 0].min()
    # the two head strokes meet near the left end of the shaft
    assert abs(upper[:, 0].min() - tip_x) < 2.0
    assert abs(lower[:, 0].min() - tip_x) < 2.0
    # one arm above the shaft, one below
    low, high = sorted([upper[:, 1].mean(), lower[:, 1].mean()])
    assert low < 20.0 < high


def test_cross_rest_pose_hides_middle(layout):
    top, middle, bottom = solve(Transition.STACK_CROSS, 1.0, StrokeWidth.REGULAR, layout)
    assert top.rotation == 44.0
    assert bottom.rotation == -44.0
    assert middle.length == 0.0
    assert top.pivot == (14.0, 15.5)
    assert bottom.pivot == (14.0, 24.5)


def test_check_rest_pose_hides_top(layout):
    top, middle, bottom = solve(Transition.STACK_CHECK, 1.0, StrokeWidth.REGULAR, layout)
    assert top.alpha == 0
    assert middle.rotation == 135.0
    assert middle.pivot == (23.5, 20.0)
    assert bottom.rotation == 45.0
    assert bottom.pivot == (23.0, 17.0)


def test_hidden_pose_draws_nothing():
    for transition in Transition:
        if transition.second is not IconShape.HIDDEN:
            continue
        for line in solve(transition, 1.0):
            assert line.alpha == 0 or line.length < 1e-9


def test_solve_is_pure(layout):
    for transition in Transition:
        for progress in (0.0, 0.37, 1.0, 1.42, 2.0):
            a = solve(transition, progress, StrokeWidth.THIN, layout)
            b = solve(transition, progress, StrokeWidth.THIN, layout)
            assert a == b


@pytest.mark.parametrize("stroke", list(StrokeWidth))
@pytest.mark.parametrize("transition", list(Transition))
def test_continuous_across_midpoint(transition, stroke):
    layout = IconLayout.create(stroke)
    eps = 1e-7
    below = solve(transition, 1.0 - eps, stroke, layout)
    above = solve(transition, 1.0 + eps, stroke, layout)
    for name, a, b in zip(STROKES, below, above):
        assert same_drawing(a, b), f"{transition.name} {name} jumps at progress 1"


@pytest.mark.parametrize("transition", list(Transition))
def test_alpha_in_range(transition):
    for progress in np.linspace(0.0, 2.0, 201):
        for line in solve(transition, float(progress)):
            assert isinstance(line.alpha, int)
            assert 0 <= line.alpha <= 255


def test_full_loop_returns_to_stack(layout):
    start = solve(Transition.STACK_ARROW, 0.0, StrokeWidth.REGULAR, layout)
    loop = solve(Transition.STACK_ARROW, 2.0, StrokeWidth.REGULAR, layout)
    for a, b in zip(start, loop):
        assert a.start == b.start
        assert a.end == b.end
        assert np.allclose(resolve_segment(a), resolve_segment(b), atol=1e-9)
    assert loop.top.rotation == 360.0
    assert loop.middle.rotation == 360.0
    assert loop.bottom.rotation == 360.0


def test_arrow_cross_spins_through_full_turn(layout):
    arrow = solve(Transition.ARROW_CROSS, 0.0, StrokeWidth.REGULAR, layout)
    cross = solve(Transition.ARROW_CROSS, 1.0, StrokeWidth.REGULAR, layout)
    assert arrow.bottom.rotation == 135.0
    assert cross.bottom.rotation == 316.0
    assert cross.top.rotation2 == 90.0
    assert cross.bottom.rotation2 == -90.0


def test_middle_has_single_pivot():
    for transition in Transition:
        geometry = solve(transition, 0.5)
        assert geometry.middle.pivot2 is None
        assert geometry.top.pivot2 is not None
        assert geometry.bottom.pivot2 is not None


def test_arrow_hidden_top_never_inverts(layout):
    for progress in np.linspace(0.0, 2.0, 81):
        top = solve(Transition.ARROW_HIDDEN, float(progress), StrokeWidth.REGULAR, layout).top
        assert top.start[0] <= top.end[0]
