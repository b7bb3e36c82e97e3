from __future__ import annotations

from enum import Enum

from morphicon.validation import UnsupportedTransition


class IconShape(Enum):
    """Steady-state appearances of the three-stroke icon, in canonical order."""

    STACK = "stack"
    ARROW = "arrow"
    CROSS = "cross"
    CHECK = "check"
    HIDDEN = "hidden"

    @property
    def order(self) -> int:
        return _SHAPE_ORDER.index(self)


_SHAPE_ORDER = tuple(IconShape)


class Transition(Enum):
    """Animatable pair of shapes; the first shape always precedes the second."""

    STACK_ARROW = (IconShape.STACK, IconShape.ARROW)
    STACK_CROSS = (IconShape.STACK, IconShape.CROSS)
    STACK_CHECK = (IconShape.STACK, IconShape.CHECK)
    STACK_HIDDEN = (IconShape.STACK, IconShape.HIDDEN)
    ARROW_CROSS = (IconShape.ARROW, IconShape.CROSS)
    ARROW_CHECK = (IconShape.ARROW, IconShape.CHECK)
    ARROW_HIDDEN = (IconShape.ARROW, IconShape.HIDDEN)
    CROSS_CHECK = (IconShape.CROSS, IconShape.CHECK)
    CROSS_HIDDEN = (IconShape.CROSS, IconShape.HIDDEN)
    CHECK_HIDDEN = (IconShape.CHECK, IconShape.HIDDEN)

    @property
    def first(self) -> IconShape:
        return self.value[0]

    @property
    def second(self) -> IconShape:
        return self.value[1]

    def other(self, shape: IconShape) -> IconShape:
        if shape is self.first:
            return self.second
        if shape is self.second:
            return self.first
        raise UnsupportedTransition(f"{shape} is not part of {self.name}.")

    @classmethod
    def between(cls, a: IconShape, b: IconShape) -> "Transition":
        if not isinstance(a, IconShape) or not isinstance(b, IconShape):
            raise UnsupportedTransition(f"Animating from {a} to {b} is not supported.")
        key = (a, b) if a.order <= b.order else (b, a)
        transition = _BY_PAIR.get(key)
        if transition is None:
            raise UnsupportedTransition(f"Animating from {a.name} to {b.name} is not supported.")
        return transition


_BY_PAIR = {t.value: t for t in Transition}


def resolve(current: IconShape, target: IconShape) -> tuple[Transition, bool]:
    """Return the transition linking two shapes and whether it runs forward.

    Forward means ``current`` is the transition's first shape, so the driver
    animates progress over [0, 1]; otherwise it animates over [1, 2].
    """

    transition = Transition.between(current, target)
    return transition, current is transition.first


# Where jump_to lands for each shape; HIDDEN has no jump pose.
REST_POSES: dict[IconShape, tuple[Transition, float]] = {
    IconShape.STACK: (Transition.STACK_ARROW, 0.0),
    IconShape.ARROW: (Transition.STACK_ARROW, 1.0),
    IconShape.CROSS: (Transition.STACK_CROSS, 1.0),
    IconShape.CHECK: (Transition.STACK_CHECK, 1.0),
}


def rest_pose(shape: IconShape) -> tuple[Transition, float]:
    try:
        return REST_POSES[shape]
    except KeyError:
        raise UnsupportedTransition(f"{shape} has no rest pose reachable by a jump.") from None


__all__ = ["IconShape", "Transition", "resolve", "rest_pose", "REST_POSES"]
