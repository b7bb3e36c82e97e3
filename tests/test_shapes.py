from __future__ import annotations

import itertools

import pytest

from morphicon.modeling import IconShape, Transition, resolve, rest_pose
from morphicon.validation import MorphError, UnsupportedTransition


def test_transition_pairs_follow_shape_order():
    assert len(Transition) == 10
    for transition in Transition:
        assert transition.first.order < transition.second.order


def test_every_distinct_pair_has_one_transition():
    for a, b in itertools.combinations(IconShape, 2):
        matches = [t for t in Transition if {t.first, t.second} == {a, b}]
        assert len(matches) == 1


def test_resolve_forward_and_backward():
    transition, forward = resolve(IconShape.STACK, IconShape.ARROW)
    assert transition is Transition.STACK_ARROW
    assert forward

    transition, forward = resolve(IconShape.ARROW, IconShape.STACK)
    assert transition is Transition.STACK_ARROW
    assert not forward


def test_resolve_stack_check_is_direct():
    transition, forward = resolve(IconShape.STACK, IconShape.CHECK)
    assert transition is Transition.STACK_CHECK
    assert forward


def test_resolve_hidden_is_always_second():
    for shape in IconShape:
        if shape is IconShape.HIDDEN:
            continue
        transition, forward = resolve(IconShape.HIDDEN, shape)
        assert transition.second is IconShape.HIDDEN
        assert not forward


def test_resolve_same_shape_fails():
    with pytest.raises(UnsupportedTransition):
        resolve(IconShape.CROSS, IconShape.CROSS)


def test_resolve_rejects_non_shapes():
    with pytest.raises(UnsupportedTransition):
        resolve(IconShape.STACK, "arrow")


def test_unsupported_transition_is_value_error():
    assert issubclass(UnsupportedTransition, MorphError)
    assert issubclass(UnsupportedTransition, ValueError)


def test_transition_other():
    assert Transition.CROSS_CHECK.other(IconShape.CROSS) is IconShape.CHECK
    assert Transition.CROSS_CHECK.other(IconShape.CHECK) is IconShape.CROSS
    with pytest.raises(UnsupportedTransition):
        Transition.CROSS_CHECK.other(IconShape.STACK)


def test_rest_poses():
    assert rest_pose(IconShape.STACK) == (Transition.STACK_ARROW, 0.0)
    assert rest_pose(IconShape.ARROW) == (Transition.STACK_ARROW, 1.0)
    assert rest_pose(IconShape.CROSS) == (Transition.STACK_CROSS, 1.0)
    assert rest_pose(IconShape.CHECK) == (Transition.STACK_CHECK, 1.0)


def test_hidden_has_no_rest_pose():
    with pytest.raises(UnsupportedTransition):
        rest_pose(IconShape.HIDDEN)
