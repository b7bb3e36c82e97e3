from __future__ import annotations

import math
import warnings
from dataclasses import dataclass
from enum import Enum

BASE_CANVAS_DIPS = 40
BASE_ICON_DIPS = 20


class StrokeWidth(Enum):
    """Stroke width categories, in dips."""

    BOLD = 3
    REGULAR = 2
    THIN = 1

    @property
    def shortening_dips(self) -> float:
        """Base amount a stroke end is pulled in, larger for thinner strokes."""
        return _SHORTENING[self]

    @classmethod
    def parse(cls, value: "StrokeWidth | str | int") -> "StrokeWidth":
        if isinstance(value, StrokeWidth):
            return value
        key = str(value).strip().lower()
        for member in cls:
            if key in (member.name.lower(), str(member.value)):
                return member
        raise ValueError(f"Unknown stroke width {value!r}; expected bold, regular, or thin.")


_SHORTENING = {
    StrokeWidth.BOLD: 3.0,
    StrokeWidth.REGULAR: 3.5,
    StrokeWidth.THIN: 4.0,
}


@dataclass(frozen=True)
class IconLayout:
    """Fixed pixel measurements of the icon canvas."""

    dip: float
    width: int
    height: int
    icon_width: float
    stroke_width: float

    @classmethod
    def create(cls, stroke: StrokeWidth = StrokeWidth.REGULAR, scale: int = 1, density: float = 1.0) -> "IconLayout":
        if not math.isfinite(scale) or not math.isfinite(density) or scale <= 0 or density <= 0:
            raise ValueError("scale and density must be positive and finite.")
        dip = float(density) * scale
        if dip < 1.0:
            warnings.warn(
                f"Icon dip size {dip:.3f}px is below one pixel; strokes may vanish.",
                RuntimeWarning,
            )
        return cls(
            dip=dip,
            width=int(BASE_CANVAS_DIPS * dip),
            height=int(BASE_CANVAS_DIPS * dip),
            icon_width=BASE_ICON_DIPS * dip,
            stroke_width=stroke.value * dip,
        )

    @property
    def dip1(self) -> float:
        return self.dip

    @property
    def dip2(self) -> float:
        return self.dip * 2

    @property
    def dip3(self) -> float:
        return self.dip * 3

    @property
    def dip4(self) -> float:
        return self.dip * 4

    @property
    def dip8(self) -> float:
        return self.dip * 8

    @property
    def dip_half(self) -> float:
        return self.dip / 2

    @property
    def side_padding(self) -> float:
        return (self.width - self.icon_width) / 2

    @property
    def top_padding(self) -> float:
        return (self.height - 5 * self.dip3) / 2

    @property
    def center_x(self) -> float:
        # Integer halving keeps odd canvases on the pixel grid.
        return float(self.width // 2)

    @property
    def center_y(self) -> float:
        return float(self.height // 2)


__all__ = ["StrokeWidth", "IconLayout", "BASE_CANVAS_DIPS", "BASE_ICON_DIPS"]
