from __future__ import annotations

from typing import Sequence

import numpy as np

from .geometry import StrokeGeometry


def translation_matrix(offset: Sequence[float]) -> np.ndarray:
    dx, dy = np.asarray(offset, dtype=float).reshape(2)
    mat = np.eye(3)
    mat[:2, 2] = [dx, dy]
    return mat


def rotation_matrix(angle_deg: float, pivot: Sequence[float] = (0.0, 0.0)) -> np.ndarray:
    """Rotation about ``pivot`` in screen space (y down), clockwise for positive angles."""
    angle_rad = np.deg2rad(angle_deg)
    c = np.cos(angle_rad)
    s = np.sin(angle_rad)
    rot = np.array(
        [
            [c, -s, 0.0],
            [s, c, 0.0],
            [0.0, 0.0, 1.0],
        ],
        dtype=float,
    )
    origin = np.asarray(pivot, dtype=float).reshape(2)
    return translation_matrix(origin) @ rot @ translation_matrix(-origin)


def mirror_matrix(width: float) -> np.ndarray:
    """Flip horizontally so that x maps to ``width - x``."""
    mat = np.eye(3)
    mat[0, 0] = -1.0
    return mat @ translation_matrix((-float(width), 0.0))


def stroke_matrix(geometry: StrokeGeometry) -> np.ndarray:
    mat = rotation_matrix(geometry.rotation, geometry.pivot)
    if geometry.pivot2 is not None:
        mat = mat @ rotation_matrix(geometry.rotation2, geometry.pivot2)
    return mat


def apply_matrix(matrix: np.ndarray, points: Sequence[Sequence[float]]) -> np.ndarray:
    pts = np.asarray(points, dtype=float).reshape(-1, 2)
    homo = np.hstack([pts, np.ones((pts.shape[0], 1), dtype=float)])
    return (matrix @ homo.T).T[:, :2]


def resolve_segment(geometry: StrokeGeometry) -> np.ndarray:
    """Return the drawn endpoints as a (2, 2) array after both rotations."""
    return apply_matrix(stroke_matrix(geometry), [geometry.start, geometry.end])


__all__ = [
    "translation_matrix",
    "rotation_matrix",
    "mirror_matrix",
    "stroke_matrix",
    "apply_matrix",
    "resolve_segment",
]
