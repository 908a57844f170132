"""Boundary between an interactive shell and the arrangement engine.

The shell reports drag gestures in model coordinates and reads back a
:class:`FrameSnapshot` after every operation to redraw.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .arrangement import Arrangement
from .model import DegenerateSegmentError, DragStateError, InsertionResult
from .snap import snap_endpoint
from .vector import Point

logger = logging.getLogger(__name__)

Line = Tuple[Point, Point]


@dataclass(frozen=True)
class FrameSnapshot:
    cuts: Tuple[Line, ...]
    markers: Tuple[Point, ...] = ()
    edge_lines: Tuple[Line, ...] = ()
    preview: Optional[Line] = None


class DragSession:
    """Turns press/release gestures into segment insertions."""

    def __init__(self, arrangement: Optional[Arrangement] = None, *, debug: bool = False) -> None:
        self.arrangement = arrangement if arrangement is not None else Arrangement()
        self.debug = debug
        self._pending_start: Optional[Point] = None

    @property
    def dragging(self) -> bool:
        return self._pending_start is not None

    def begin_drag(self, point: Point) -> None:
        self._pending_start = point

    def cancel_drag(self) -> None:
        self._pending_start = None

    def end_drag(self, point: Point, *, snap: bool = False) -> Optional[InsertionResult]:
        """Finish the gesture and insert the drawn segment.

        Returns ``None`` when the gesture collapsed to a single point.
        """

        if self._pending_start is None:
            raise DragStateError("end_drag called without a preceding begin_drag")
        start = self._pending_start
        self._pending_start = None

        end = snap_endpoint(start, point) if snap else point
        try:
            result = self.arrangement.insert(start, end)
        except DegenerateSegmentError as exc:
            logger.info("Ignoring drag: %s", exc)
            return None
        logger.info(
            "Segment %d added: %d new intersection(s), %d new edge(s)",
            result.segment.id,
            len(result.intersections),
            len(result.edges),
        )
        return result

    def preview(self, cursor: Point) -> Optional[Line]:
        if self._pending_start is None:
            return None
        return self._pending_start, cursor

    def frame(self, cursor: Optional[Point] = None) -> FrameSnapshot:
        """Everything the shell draws for one frame."""

        state = self.arrangement.state()
        cuts = tuple((seg.start, seg.end) for seg in state.segments)
        preview = self.preview(cursor) if cursor is not None else None
        if not self.debug:
            return FrameSnapshot(cuts=cuts, preview=preview)

        markers = tuple(ix.point for ix in state.intersections)
        edge_lines: List[Line] = []
        for edge in state.graph:
            edge_lines.append(
                (state.intersections[edge.frm].point, state.intersections[edge.to].point)
            )
        return FrameSnapshot(cuts=cuts, markers=markers, edge_lines=tuple(edge_lines), preview=preview)


__all__ = ["DragSession", "FrameSnapshot", "Line"]
