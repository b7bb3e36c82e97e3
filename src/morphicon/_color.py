from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np
from PIL import ImageColor

RGB = Tuple[int, int, int]


def normalize_color(color: Sequence[float] | str) -> RGB:
    """Resolve a colour name, hex string, or numeric RGB(A) into 0-255 RGB."""

    if isinstance(color, str):
        try:
            rgb = ImageColor.getrgb(color)
        except ValueError as exc:
            raise ValueError(f"Unknown colour {color!r}.") from exc
        return int(rgb[0]), int(rgb[1]), int(rgb[2])

    arr = np.asarray(color, dtype=float).flatten()
    if arr.size not in (3, 4):
        raise ValueError("Color must be RGB or RGBA.")
    if not np.all(np.isfinite(arr)):
        raise ValueError("Color must be finite.")
    if arr.max() <= 1.0:
        arr = arr * 255.0
    arr = np.clip(np.rint(arr[:3]), 0, 255)
    return int(arr[0]), int(arr[1]), int(arr[2])
