"""Snap nearly axis-aligned drags to exact horizontal or vertical."""

from __future__ import annotations

import logging
import math
from typing import Optional

from .config import get_engine_config
from .vector import Point, vec_magnitude, vec_sub

logger = logging.getLogger(__name__)


def raw_slope(start: Point, end: Point) -> float:
    """Gradient of ``start -> end``; infinite when both x-coordinates match."""

    dx = end.x - start.x
    if dx == 0:
        return math.inf
    return (end.y - start.y) / dx


def snap_endpoint(start: Point, end: Point, threshold: Optional[float] = None) -> Point:
    """Return the end point after applying the axis snap.

    ``|m| > threshold`` forces the segment vertical and ``|m| < 1/threshold``
    forces it horizontal; both keep the original length and the sign of
    travel along the kept axis. Anything in between is returned unchanged.
    """

    if threshold is None:
        threshold = get_engine_config().snap_threshold
    slope = abs(raw_slope(start, end))
    length = vec_magnitude(vec_sub(end, start))

    if slope > threshold:
        sign = 1.0 if end.y > start.y else -1.0
        snapped = Point(start.x, start.y + sign * length)
        logger.debug("Snapped %s -> %s to vertical %s", start, end, snapped)
        return snapped
    if slope < 1.0 / threshold:
        sign = 1.0 if end.x > start.x else -1.0
        snapped = Point(start.x + sign * length, start.y)
        logger.debug("Snapped %s -> %s to horizontal %s", start, end, snapped)
        return snapped
    return end


__all__ = ["raw_slope", "snap_endpoint"]
