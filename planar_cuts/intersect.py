"""Pairwise segment intersection via a 2x2 linear solve."""

from __future__ import annotations

from typing import Optional

import numpy as np

from .model import Crossing, DegenerateSegmentError, Segment
from .vector import mat_inverse, mat_mul_vec, vec_add, vec_mul, vec_sub


def intersect(a: Segment, b: Segment) -> Optional[Crossing]:
    """Return where ``a`` and ``b`` cross, or ``None``.

    Solves ``v1 * t1 - v2 * t2 = b.start - a.start`` for the distances
    ``t1``/``t2`` along each segment's unit direction. Parallel directions
    (including colinear overlap) give an exactly singular matrix and are
    reported as no intersection, as are solutions outside either segment.
    """

    length1 = a.length
    length2 = b.length
    if length1 == 0 or length2 == 0:
        raise DegenerateSegmentError(
            f"cannot intersect zero-length segment (ids {a.id}, {b.id})"
        )
    v1 = a.direction
    v2 = b.direction

    m = np.array(
        [
            [v1.x, -v2.x],
            [v1.y, -v2.y],
        ],
        dtype=float,
    )
    m_inv = mat_inverse(m)
    if m_inv is None:
        return None

    solved = mat_mul_vec(m_inv, vec_sub(b.start, a.start))
    t1, t2 = solved.x, solved.y
    if t1 < 0 or t1 > length1 or t2 < 0 or t2 > length2:
        return None

    return Crossing(
        point=vec_add(a.start, vec_mul(v1, t1)),
        segment1_id=a.id,
        segment2_id=b.id,
        t1=t1,
        t2=t2,
    )


__all__ = ["intersect"]
