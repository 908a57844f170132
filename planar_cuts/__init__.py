from .vector import (
    Point,
    vec_add,
    vec_sub,
    vec_mul,
    vec_div,
    vec_magnitude,
    vec_normalize,
    mat_mul,
    mat_mul_vec,
    mat_inverse,
)
from .model import (
    ArrangementState,
    Crossing,
    CycleSearchResult,
    DegenerateSegmentError,
    DragStateError,
    GraphEdge,
    InsertionResult,
    Intersection,
    Segment,
    SegmentError,
    TraversalTruncatedError,
)
from .arena import Arena
from .config import EngineConfig, get_engine_config, set_engine_config
from .intersect import intersect
from .arrangement import Arrangement, validate_segment
from .snap import raw_slope, snap_endpoint
from .cycles import build_adjacency, find_cycles
from .subdivision import chains, dedupe_edges, minimal_state, redundant_edges, subdivision_edges
from .session import DragSession, FrameSnapshot
from .io import parse_segments, state_to_dict

__all__ = [
    'Point',
    'vec_add',
    'vec_sub',
    'vec_mul',
    'vec_div',
    'vec_magnitude',
    'vec_normalize',
    'mat_mul',
    'mat_mul_vec',
    'mat_inverse',
    'ArrangementState',
    'Crossing',
    'CycleSearchResult',
    'DegenerateSegmentError',
    'DragStateError',
    'GraphEdge',
    'InsertionResult',
    'Intersection',
    'Segment',
    'SegmentError',
    'TraversalTruncatedError',
    'Arena',
    'EngineConfig',
    'get_engine_config',
    'set_engine_config',
    'intersect',
    'Arrangement',
    'validate_segment',
    'raw_slope',
    'snap_endpoint',
    'build_adjacency',
    'find_cycles',
    'chains',
    'dedupe_edges',
    'minimal_state',
    'redundant_edges',
    'subdivision_edges',
    'DragSession',
    'FrameSnapshot',
    'parse_segments',
    'state_to_dict',
]
