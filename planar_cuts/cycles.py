"""Enumerate closed walks in the intersection graph."""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Tuple

from .config import get_engine_config
from .model import CycleSearchResult, GraphEdge, IntersectionId, TraversalTruncatedError

logger = logging.getLogger(__name__)

Adjacency = Dict[IntersectionId, List[IntersectionId]]


def build_adjacency(edges: Iterable[GraphEdge], *, undirected: bool = False) -> Adjacency:
    """Neighbour lists in first-seen edge order, with repeated edges collapsed."""

    neighbours: Dict[IntersectionId, Dict[IntersectionId, None]] = defaultdict(dict)
    for edge in edges:
        neighbours[edge.frm][edge.to] = None
        if undirected:
            neighbours[edge.to][edge.frm] = None
    return {node: list(targets) for node, targets in neighbours.items()}


def find_cycles(
    edges: Iterable[GraphEdge],
    start: IntersectionId,
    *,
    max_paths: Optional[int] = None,
    max_steps: Optional[int] = None,
    undirected: bool = False,
    allow_revisits: bool = False,
    strict: bool = False,
) -> CycleSearchResult:
    """Depth-first search for walks that leave ``start`` and come back to it.

    Each emitted path lists node ids beginning with ``start`` and ending with
    the node whose edge closes the loop. A path never visits a node twice
    except ``start``, unless ``allow_revisits`` is set, in which case only
    returning to ``start`` ends a path and ``max_steps`` must be given.

    ``max_paths`` caps emitted paths and ``max_steps`` caps node expansions;
    both default to the engine config. Returning to ``start`` costs no step.
    The result is marked ``truncated`` when a loop beyond ``max_paths`` is
    found or when a node still needs expanding after ``max_steps``; with
    ``strict`` set, :class:`TraversalTruncatedError` is raised instead.
    """

    if allow_revisits and max_steps is None:
        raise ValueError("allow_revisits requires an explicit max_steps bound")
    config = get_engine_config()
    if max_paths is None:
        max_paths = config.max_cycle_paths
    if max_steps is None:
        max_steps = config.max_cycle_steps

    adjacency = build_adjacency(edges, undirected=undirected)
    min_length = 3 if undirected else 1
    result = CycleSearchResult()

    stack: List[Tuple[IntersectionId, Tuple[IntersectionId, ...]]] = [(start, ())]
    while stack:
        node, path = stack.pop()
        if path and node == start:
            if len(path) < min_length:
                continue
            if len(result.paths) >= max_paths:
                # Only an actual extra loop counts as truncation.
                result.truncated = True
                result.reason = f"path limit {max_paths} reached"
                break
            result.paths.append(list(path))
            continue

        if result.steps >= max_steps:
            result.truncated = True
            result.reason = f"step limit {max_steps} reached"
            break
        result.steps += 1
        walked = path + (node,)
        for nxt in reversed(adjacency.get(node, [])):
            if nxt != start and not allow_revisits and nxt in walked:
                continue
            stack.append((nxt, walked))

    logger.debug(
        "Cycle search from %d: %d path(s), %d step(s), truncated=%s",
        start,
        len(result.paths),
        result.steps,
        result.truncated,
    )
    if result.truncated:
        logger.warning("Cycle search from %d truncated: %s", start, result.reason)
        if strict:
            raise TraversalTruncatedError(result, f"cycle search from {start} truncated: {result.reason}")
    return result


__all__ = ["Adjacency", "build_adjacency", "find_cycles"]
