"""Core data structures for the arrangement engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .vector import Point, vec_div, vec_magnitude, vec_sub

SegmentId = int
IntersectionId = int


class SegmentError(ValueError):
    """Raised when a segment cannot be accepted into the arrangement."""


class DegenerateSegmentError(SegmentError):
    """Raised for zero-length segments (identical start and end)."""


class DragStateError(RuntimeError):
    """Raised when a drag gesture is completed without having started."""


@dataclass(frozen=True)
class Segment:
    """User-drawn straight cut between two fixed points."""

    id: SegmentId
    start: Point
    end: Point

    @property
    def delta(self) -> Point:
        return vec_sub(self.end, self.start)

    @property
    def length(self) -> float:
        return vec_magnitude(self.delta)

    @property
    def direction(self) -> Point:
        """Unit vector from start to end; undefined for zero-length segments."""

        return vec_div(self.delta, self.length)


@dataclass(frozen=True)
class Crossing:
    """Intersection of two segments before it has been given an id."""

    point: Point
    segment1_id: SegmentId
    segment2_id: SegmentId
    t1: float
    t2: float


@dataclass(frozen=True)
class Intersection:
    """Committed crossing; ``t1``/``t2`` are distances from each segment's start."""

    id: IntersectionId
    point: Point
    segment1_id: SegmentId
    segment2_id: SegmentId
    t1: float
    t2: float

    @classmethod
    def from_crossing(cls, ident: IntersectionId, crossing: Crossing) -> "Intersection":
        return cls(
            id=ident,
            point=crossing.point,
            segment1_id=crossing.segment1_id,
            segment2_id=crossing.segment2_id,
            t1=crossing.t1,
            t2=crossing.t2,
        )

    def lies_on(self, segment_id: SegmentId) -> bool:
        return segment_id in (self.segment1_id, self.segment2_id)

    def t_on(self, segment_id: SegmentId) -> float:
        if segment_id == self.segment1_id:
            return self.t1
        if segment_id == self.segment2_id:
            return self.t2
        raise KeyError(f"Intersection {self.id} does not lie on segment {segment_id}")

    def other(self, segment_id: SegmentId) -> SegmentId:
        if segment_id == self.segment1_id:
            return self.segment2_id
        if segment_id == self.segment2_id:
            return self.segment1_id
        raise KeyError(f"Intersection {self.id} does not lie on segment {segment_id}")


@dataclass(frozen=True)
class GraphEdge:
    """Directed record of an undirected adjacency between two intersections."""

    frm: IntersectionId
    to: IntersectionId

    def key(self) -> Tuple[IntersectionId, IntersectionId]:
        """Orientation-free identity used for de-duplication."""

        return (self.frm, self.to) if self.frm <= self.to else (self.to, self.frm)


@dataclass(frozen=True)
class ArrangementState:
    segments: Tuple[Segment, ...] = ()
    intersections: Tuple[Intersection, ...] = ()
    graph: Tuple[GraphEdge, ...] = ()


@dataclass
class InsertionResult:
    segment: Segment
    intersections: List[Intersection]
    edges: List[GraphEdge]
    state: ArrangementState


@dataclass
class CycleSearchResult:
    paths: List[List[IntersectionId]] = field(default_factory=list)
    truncated: bool = False
    steps: int = 0
    reason: Optional[str] = None


class TraversalTruncatedError(RuntimeError):
    """Raised by strict cycle searches that hit a path or step cap."""

    def __init__(self, result: CycleSearchResult, message: str):
        super().__init__(message)
        self.result = result


__all__ = [
    "SegmentId",
    "IntersectionId",
    "SegmentError",
    "DegenerateSegmentError",
    "DragStateError",
    "Segment",
    "Crossing",
    "Intersection",
    "GraphEdge",
    "ArrangementState",
    "InsertionResult",
    "CycleSearchResult",
    "TraversalTruncatedError",
]
