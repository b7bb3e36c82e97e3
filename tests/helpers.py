from __future__ import annotations

import numpy as np

from morphicon.modeling import StrokeGeometry, resolve_segment

COLLAPSED = 1e-3


class RecordingRenderer:
    """Renderer that keeps the call sequence instead of drawing."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []
        self.depth = 0

    def save(self) -> None:
        self.depth += 1
        self.calls.append(("save",))

    def restore(self) -> None:
        self.depth -= 1
        self.calls.append(("restore",))

    def rotate(self, degrees, pivot) -> None:
        self.calls.append(("rotate", degrees, tuple(pivot)))

    def mirror_horizontal(self, width) -> None:
        self.calls.append(("mirror", width))

    def draw_line(self, start, end, style) -> None:
        self.calls.append(("line", tuple(start), tuple(end), style))

    def named(self, name: str) -> list[tuple]:
        return [call for call in self.calls if call[0] == name]


def same_drawing(a: StrokeGeometry, b: StrokeGeometry, atol: float = 1e-3) -> bool:
    """True when two strokes put the same ink on the canvas."""
    if a.alpha == 0 and b.alpha == 0:
        return True
    if a.length < COLLAPSED and b.length < COLLAPSED:
        return True
    if abs(a.alpha - b.alpha) > 1:
        return False
    return bool(np.allclose(resolve_segment(a), resolve_segment(b), atol=atol))
