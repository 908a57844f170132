"""2D vector arithmetic and 2x2 linear-system helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

import numpy as np

Mat2 = np.ndarray


@dataclass(frozen=True)
class Point:
    """Real-valued 2D point, also used as a free vector."""

    x: float
    y: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def as_tuple(self) -> tuple[float, float]:
        return self.x, self.y

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)


def vec_add(a: Point, b: Point) -> Point:
    return Point(a.x + b.x, a.y + b.y)


def vec_sub(a: Point, b: Point) -> Point:
    return Point(a.x - b.x, a.y - b.y)


def vec_mul(a: Point, scalar: float) -> Point:
    return Point(a.x * scalar, a.y * scalar)


def vec_div(a: Point, scalar: float) -> Point:
    return Point(a.x / scalar, a.y / scalar)


def vec_magnitude(a: Point) -> float:
    return math.hypot(a.x, a.y)


def vec_normalize(a: Point) -> Point:
    """Return ``a`` scaled to unit length. Raises ``ZeroDivisionError`` for the zero vector."""

    return vec_div(a, vec_magnitude(a))


def mat_mul(m: Mat2, scalar: float) -> Mat2:
    return np.asarray(m, dtype=float) * scalar


def mat_mul_vec(m: Mat2, v: Point) -> Point:
    arr = np.asarray(m, dtype=float) @ np.array([v.x, v.y], dtype=float)
    return Point(float(arr[0]), float(arr[1]))


def mat_inverse(m: Mat2) -> Optional[Mat2]:
    """Invert a 2x2 matrix, or return ``None`` when it is exactly singular.

    The determinant is compared against zero without tolerance, so nearly
    parallel directions still produce a (large-valued) inverse.
    """

    m = np.asarray(m, dtype=float)
    if m.shape != (2, 2):
        raise ValueError("matrix must be 2x2")
    det = m[0, 0] * m[1, 1] - m[0, 1] * m[1, 0]
    if det == 0:
        return None
    adjugate = np.array(
        [
            [m[1, 1], -m[0, 1]],
            [-m[1, 0], m[0, 0]],
        ],
        dtype=float,
    )
    return mat_mul(adjugate, 1.0 / det)


__all__ = [
    "Mat2",
    "Point",
    "vec_add",
    "vec_sub",
    "vec_mul",
    "vec_div",
    "vec_magnitude",
    "vec_normalize",
    "mat_mul",
    "mat_mul_vec",
    "mat_inverse",
]
