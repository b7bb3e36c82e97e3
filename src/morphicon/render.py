from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence

import numpy as np
from PIL import Image, ImageDraw

from morphicon._color import RGB, normalize_color
from morphicon.modeling.geometry import Point, StrokeGeometry
from morphicon.modeling.transform import apply_matrix, mirror_matrix, rotation_matrix


@dataclass(frozen=True)
class StrokeStyle:
    """Paint for one line; passed per draw instead of mutating shared state."""

    color: RGB
    width: float
    alpha: int = 255

    def with_alpha(self, alpha: int) -> "StrokeStyle":
        return StrokeStyle(color=self.color, width=self.width, alpha=max(0, min(255, int(alpha))))


class Renderer(Protocol):
    """Drawing surface consumed by :func:`draw_icon`."""

    def save(self) -> None: ...

    def restore(self) -> None: ...

    def rotate(self, degrees: float, pivot: Point) -> None: ...

    def mirror_horizontal(self, width: float) -> None: ...

    def draw_line(self, start: Point, end: Point, style: StrokeStyle) -> None: ...


def draw_icon(
    renderer: Renderer,
    strokes: Sequence[StrokeGeometry],
    style: StrokeStyle,
    width: float,
    rtl: bool = False,
) -> None:
    """Draw the three strokes, each inside its own save/restore scope."""

    if rtl:
        renderer.save()
        renderer.mirror_horizontal(width)

    for geometry in strokes:
        renderer.save()
        renderer.rotate(geometry.rotation, geometry.pivot)
        if geometry.pivot2 is not None:
            renderer.rotate(geometry.rotation2, geometry.pivot2)
        renderer.draw_line(geometry.start, geometry.end, style.with_alpha(geometry.alpha))
        renderer.restore()

    if rtl:
        renderer.restore()


class PillowRenderer:
    """Raster backend drawing onto a transparent RGBA canvas.

    Lines are drawn at ``supersample`` times the target size and scaled down
    on :meth:`to_image` for anti-aliasing.
    """

    def __init__(self, width: int, height: int, supersample: int = 4, background: Sequence[int] | None = None):
        if width <= 0 or height <= 0:
            raise ValueError("Canvas size must be positive.")
        if supersample < 1:
            raise ValueError("supersample must be >= 1.")
        self.width = int(width)
        self.height = int(height)
        self.supersample = int(supersample)
        fill = tuple(background) if background is not None else (0, 0, 0, 0)
        self._canvas = Image.new("RGBA", (self.width * self.supersample, self.height * self.supersample), fill)
        self._matrix = np.eye(3)
        self._stack: list[np.ndarray] = []

    def save(self) -> None:
        self._stack.append(self._matrix.copy())

    def restore(self) -> None:
        if not self._stack:
            raise RuntimeError("restore() called without a matching save().")
        self._matrix = self._stack.pop()

    def rotate(self, degrees: float, pivot: Point) -> None:
        self._matrix = self._matrix @ rotation_matrix(degrees, pivot)

    def mirror_horizontal(self, width: float) -> None:
        self._matrix = self._matrix @ mirror_matrix(width)

    def draw_line(self, start: Point, end: Point, style: StrokeStyle) -> None:
        if style.alpha <= 0:
            return
        pts = apply_matrix(self._matrix, [start, end]) * self.supersample
        layer = Image.new("RGBA", self._canvas.size, (0, 0, 0, 0))
        draw = ImageDraw.Draw(layer)
        line_width = max(int(round(style.width * self.supersample)), 1)
        draw.line(
            [tuple(float(v) for v in pts[0]), tuple(float(v) for v in pts[1])],
            fill=(*style.color, int(style.alpha)),
            width=line_width,
        )
        self._canvas.alpha_composite(layer)

    def to_image(self) -> Image.Image:
        if self.supersample == 1:
            return self._canvas.copy()
        return self._canvas.resize((self.width, self.height), Image.Resampling.LANCZOS)


def make_style(color: Sequence[float] | str, width: float) -> StrokeStyle:
    return StrokeStyle(color=normalize_color(color), width=float(width))


__all__ = ["StrokeStyle", "Renderer", "draw_icon", "PillowRenderer", "make_style"]
