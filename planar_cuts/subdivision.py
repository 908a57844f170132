"""Optional post-processing that reduces the append-only graph to a minimal subdivision.

Insertion keeps the "long" edge between two crossings after a third crossing
lands between them, and may record the same adjacency more than once. The
helpers here derive the minimal edge set from the per-segment chains without
touching the arrangement itself.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Set, Tuple

from .model import ArrangementState, GraphEdge, IntersectionId, SegmentId

logger = logging.getLogger(__name__)

EdgeKey = Tuple[IntersectionId, IntersectionId]


def dedupe_edges(edges: Iterable[GraphEdge]) -> List[GraphEdge]:
    """Drop repeated undirected edges, keeping the first occurrence."""

    seen: Set[EdgeKey] = set()
    kept: List[GraphEdge] = []
    for edge in edges:
        key = edge.key()
        if key in seen:
            continue
        seen.add(key)
        kept.append(edge)
    return kept


def chains(state: ArrangementState) -> Dict[SegmentId, List[IntersectionId]]:
    """Intersection ids on every crossed segment, ordered by ``(t, id)``."""

    entries: Dict[SegmentId, List[Tuple[float, IntersectionId]]] = defaultdict(list)
    for ix in state.intersections:
        entries[ix.segment1_id].append((ix.t1, ix.id))
        entries[ix.segment2_id].append((ix.t2, ix.id))
    return {seg: [ident for _, ident in sorted(items)] for seg, items in entries.items()}


def subdivision_edges(state: ArrangementState) -> List[GraphEdge]:
    """Edges joining consecutive crossings along each segment, each listed once."""

    edges: List[GraphEdge] = []
    by_segment = chains(state)
    for seg in sorted(by_segment):
        ids = by_segment[seg]
        edges.extend(GraphEdge(a, b) for a, b in zip(ids, ids[1:]))
    return dedupe_edges(edges)


def redundant_edges(state: ArrangementState) -> List[GraphEdge]:
    """Graph edges that are not part of the minimal subdivision."""

    minimal = {edge.key() for edge in subdivision_edges(state)}
    extra = [edge for edge in state.graph if edge.key() not in minimal]
    logger.debug("Found %d redundant edge(s) out of %d", len(extra), len(state.graph))
    return extra


def minimal_state(state: ArrangementState) -> ArrangementState:
    """Copy of ``state`` whose graph is the minimal subdivision."""

    return ArrangementState(
        segments=state.segments,
        intersections=state.intersections,
        graph=tuple(subdivision_edges(state)),
    )


__all__ = ["dedupe_edges", "chains", "subdivision_edges", "redundant_edges", "minimal_state"]
