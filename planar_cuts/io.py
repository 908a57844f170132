"""JSON helpers for feeding segments in and dumping arrangement state out."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Tuple

from .model import ArrangementState
from .vector import Point

RawSegment = Tuple[Point, Point]


def _parse_point(value: Any, where: str) -> Point:
    if isinstance(value, dict):
        try:
            return Point(float(value["x"]), float(value["y"]))
        except (KeyError, TypeError, ValueError) as exc:
            raise ValueError(f"{where}: point object needs numeric 'x' and 'y'") from exc
    if isinstance(value, (list, tuple)) and len(value) == 2:
        try:
            return Point(float(value[0]), float(value[1]))
        except (TypeError, ValueError) as exc:
            raise ValueError(f"{where}: point coordinates must be numbers") from exc
    raise ValueError(f"{where}: expected [x, y] or {{'x': .., 'y': ..}}, got {value!r}")


def _parse_segment(entry: Any, index: int) -> RawSegment:
    where = f"segment {index}"
    if isinstance(entry, dict):
        if "start" not in entry or "end" not in entry:
            raise ValueError(f"{where}: object needs 'start' and 'end'")
        return _parse_point(entry["start"], where), _parse_point(entry["end"], where)
    if isinstance(entry, (list, tuple)) and len(entry) == 2:
        return _parse_point(entry[0], where), _parse_point(entry[1], where)
    raise ValueError(f"{where}: expected a pair of points, got {entry!r}")


def parse_segments(text: str) -> List[RawSegment]:
    """Read segment endpoints from a JSON document.

    Accepts a bare list of segments or an object with a ``segments`` list.
    """

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON: {exc}") from exc
    if isinstance(data, dict):
        if "segments" not in data:
            raise ValueError("JSON object must contain a 'segments' list")
        data = data["segments"]
    if not isinstance(data, list):
        raise ValueError("segments must be a JSON list")
    return [_parse_segment(entry, idx) for idx, entry in enumerate(data)]


def _point_dict(p: Point) -> Dict[str, float]:
    return {"x": p.x, "y": p.y}


def state_to_dict(state: ArrangementState) -> Dict[str, List[Dict[str, Any]]]:
    return {
        "segments": [
            {"id": seg.id, "start": _point_dict(seg.start), "end": _point_dict(seg.end)}
            for seg in state.segments
        ],
        "intersections": [
            {
                "id": ix.id,
                "point": _point_dict(ix.point),
                "segment1Id": ix.segment1_id,
                "segment2Id": ix.segment2_id,
                "t1": ix.t1,
                "t2": ix.t2,
            }
            for ix in state.intersections
        ],
        "graph": [{"from": edge.frm, "to": edge.to} for edge in state.graph],
    }


__all__ = ["RawSegment", "parse_segments", "state_to_dict"]
