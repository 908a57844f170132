"""Incremental arrangement of line segments and its intersection graph."""

from __future__ import annotations

import logging
import math
from collections import defaultdict
from typing import Dict, List, Optional, Sequence, Tuple

from .arena import Arena
from .intersect import intersect
from .logging_utils import apply_debug_logging
from .model import (
    ArrangementState,
    DegenerateSegmentError,
    GraphEdge,
    InsertionResult,
    Intersection,
    IntersectionId,
    Segment,
    SegmentError,
    SegmentId,
)
from .vector import Point, vec_magnitude, vec_sub

logger = logging.getLogger(__name__)

ChainEntry = Tuple[Intersection, float]


def _chain_key(entry: ChainEntry) -> Tuple[float, IntersectionId]:
    # Coincident crossings are ordered by intersection id.
    intersection, t = entry
    return t, intersection.id


def validate_segment(start: Point, end: Point) -> None:
    """Reject segments that would break the intersection solve."""

    if not (start.is_finite() and end.is_finite()):
        raise SegmentError(f"segment endpoints must be finite, got {start} -> {end}")
    if start == end:
        raise DegenerateSegmentError(f"zero-length segment at ({start.x}, {start.y})")
    if not math.isfinite(vec_magnitude(vec_sub(end, start))):
        raise SegmentError(f"segment length overflows, got {start} -> {end}")


class Arrangement:
    """Owner of the segment, intersection and graph-edge stores.

    All three stores only grow. Each call to :meth:`insert` is the unit of
    mutation: it either rejects its input before touching any store or runs
    to completion, leaving every chain it touched connected in ``graph``.
    """

    def __init__(self) -> None:
        self._segments: Arena[Segment] = Arena()
        self._intersections: Arena[Intersection] = Arena()
        self._edges: Arena[GraphEdge] = Arena()
        self._on_segment: Dict[SegmentId, List[IntersectionId]] = defaultdict(list)

    def __len__(self) -> int:
        return len(self._segments)

    @property
    def segments(self) -> Tuple[Segment, ...]:
        return self._segments.snapshot()

    @property
    def intersections(self) -> Tuple[Intersection, ...]:
        return self._intersections.snapshot()

    @property
    def graph(self) -> Tuple[GraphEdge, ...]:
        return self._edges.snapshot()

    def state(self) -> ArrangementState:
        return ArrangementState(
            segments=self._segments.snapshot(),
            intersections=self._intersections.snapshot(),
            graph=self._edges.snapshot(),
        )

    def segment(self, segment_id: SegmentId) -> Segment:
        return self._segments[segment_id]

    def intersection(self, intersection_id: IntersectionId) -> Intersection:
        return self._intersections[intersection_id]

    def chain(self, segment_id: SegmentId) -> List[ChainEntry]:
        """Intersections on ``segment_id`` sorted by distance from its start."""

        if not 0 <= segment_id < len(self._segments):
            raise KeyError(f"Unknown segment {segment_id}")
        return self._chain_with(segment_id, None)

    def _chain_with(self, segment_id: SegmentId, extra: Optional[Intersection]) -> List[ChainEntry]:
        entries: List[ChainEntry] = []
        for ident in self._on_segment.get(segment_id, ()):
            ix = self._intersections[ident]
            entries.append((ix, ix.t_on(segment_id)))
        if extra is not None:
            entries.append((extra, extra.t_on(segment_id)))
        entries.sort(key=_chain_key)
        return entries

    def insert(self, start: Point, end: Point) -> InsertionResult:
        """Add the segment ``start -> end`` and wire its crossings into the graph."""

        validate_segment(start, end)

        segment = Segment(id=self._segments.next_handle, start=start, end=end)

        pending: List[Intersection] = []
        next_id = self._intersections.next_handle
        for existing in self._segments:
            crossing = intersect(segment, existing)
            if crossing is None:
                continue
            pending.append(Intersection.from_crossing(next_id, crossing))
            next_id += 1

        new_edges: List[GraphEdge] = []

        along_new = sorted(pending, key=lambda ix: (ix.t1, ix.id))
        for prev, nxt in zip(along_new, along_new[1:]):
            new_edges.append(GraphEdge(prev.id, nxt.id))

        for ix in pending:
            new_edges.extend(self._splice(ix))

        self._segments.push(segment)
        self._intersections.extend(pending)
        self._edges.extend(new_edges)
        for ix in pending:
            self._on_segment[ix.segment1_id].append(ix.id)
            self._on_segment[ix.segment2_id].append(ix.id)

        logger.debug(
            "Inserted segment %d with %d crossing(s) and %d edge(s); totals: %d/%d/%d",
            segment.id,
            len(pending),
            len(new_edges),
            len(self._segments),
            len(self._intersections),
            len(self._edges),
        )
        return InsertionResult(segment=segment, intersections=pending, edges=new_edges, state=self.state())

    def _splice(self, ix: Intersection) -> List[GraphEdge]:
        # The edge previously joining predecessor and successor is kept.
        old_segment_id = ix.segment2_id
        sequence = self._chain_with(old_segment_id, ix)
        j = next(pos for pos, (entry, _) in enumerate(sequence) if entry.id == ix.id)

        edges: List[GraphEdge] = []
        if j > 0:
            edges.append(GraphEdge(sequence[j - 1][0].id, ix.id))
        if j < len(sequence) - 1:
            edges.append(GraphEdge(ix.id, sequence[j + 1][0].id))
        return edges

    def extend(self, segments: Sequence[Tuple[Point, Point]]) -> ArrangementState:
        """Insert several segments in order, returning the final state."""

        for start, end in segments:
            self.insert(start, end)
        return self.state()


apply_debug_logging(globals(), logger=logger, skip={"Arrangement.chain", "Arrangement.segment", "Arrangement.intersection", "Arrangement.state"})

__all__ = ["Arrangement", "ChainEntry", "validate_segment"]
