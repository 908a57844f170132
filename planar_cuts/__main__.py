import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from planar_cuts import (
    Arrangement,
    EngineConfig,
    SegmentError,
    find_cycles,
    get_engine_config,
    minimal_state,
    parse_segments,
    redundant_edges,
    set_engine_config,
    snap_endpoint,
    state_to_dict,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Build a planar arrangement from line segments")
    parser.add_argument("path", help="Path to a JSON file listing segments")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--snap",
        action="store_true",
        help="Snap nearly horizontal/vertical segments before inserting them",
    )
    parser.add_argument(
        "--snap-threshold",
        type=float,
        help="Slope above which segments snap vertical (default from config: 50)",
    )
    parser.add_argument(
        "--minimal",
        action="store_true",
        help="Write the de-duplicated minimal subdivision instead of the raw graph",
    )
    parser.add_argument(
        "--cycles-from",
        type=int,
        help="Enumerate closed loops starting from this intersection id",
    )
    parser.add_argument(
        "--undirected",
        action="store_true",
        help="Follow graph edges in both directions during cycle search",
    )
    parser.add_argument("--max-paths", type=int, help="Cap on emitted cycle paths")
    parser.add_argument("--max-steps", type=int, help="Cap on cycle search node expansions")
    parser.add_argument("--output", help="Write the resulting state as JSON to this path")
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    if args.snap_threshold is not None:
        config: EngineConfig = get_engine_config()
        config.snap_threshold = args.snap_threshold
        set_engine_config(config)

    text = Path(args.path).read_text(encoding="utf-8")
    logger.info("Reading segments from %s", args.path)
    raw_segments = parse_segments(text)

    arrangement = Arrangement()
    for idx, (start, end) in enumerate(raw_segments):
        if args.snap:
            end = snap_endpoint(start, end)
        try:
            arrangement.insert(start, end)
        except SegmentError as exc:
            logger.warning("Skipping input segment %d: %s", idx, exc)

    state = arrangement.state()
    logger.info(
        "Arrangement built: %d segment(s), %d intersection(s), %d edge(s)",
        len(state.segments),
        len(state.intersections),
        len(state.graph),
    )

    print(f"Segments: {len(state.segments)}")
    for seg in state.segments:
        print(f"  [{seg.id}] ({seg.start.x:.6f}, {seg.start.y:.6f}) -> ({seg.end.x:.6f}, {seg.end.y:.6f})")
    print(f"Intersections: {len(state.intersections)}")
    for ix in state.intersections:
        print(
            f"  [{ix.id}] ({ix.point.x:.6f}, {ix.point.y:.6f}) "
            f"segments {ix.segment1_id}/{ix.segment2_id} t=({ix.t1:.6f}, {ix.t2:.6f})"
        )
    print(f"Graph edges: {len(state.graph)} ({len(redundant_edges(state))} redundant)")
    for edge in state.graph:
        print(f"  {edge.frm} -> {edge.to}")

    if args.cycles_from is not None:
        result = find_cycles(
            state.graph,
            args.cycles_from,
            max_paths=args.max_paths,
            max_steps=args.max_steps,
            undirected=args.undirected,
        )
        print(f"Cycles from {args.cycles_from}: {len(result.paths)}")
        for path in result.paths:
            print("  " + " -> ".join(str(node) for node in path))
        if result.truncated:
            print(f"  (truncated: {result.reason})")

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        payload = state_to_dict(minimal_state(state) if args.minimal else state)
        logger.info("Writing arrangement state to %s", output_path)
        output_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        print(f"State written to {output_path}")


if __name__ == "__main__":
    main(sys.argv[1:])
