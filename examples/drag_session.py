"""Example: simulate snapped drag gestures and search for loops."""

from planar_cuts import DragSession, Point, find_cycles

GESTURES = [
    ((0.0, 0.0), (100.0, 1.0)),
    ((20.0, -10.0), (21.0, 90.0)),
    ((80.0, -10.0), (79.0, 90.0)),
    ((0.0, 60.0), (100.0, 61.5)),
]


def main() -> None:
    session = DragSession(debug=True)
    for start, end in GESTURES:
        session.begin_drag(Point(*start))
        result = session.end_drag(Point(*end), snap=True)
        seg = result.segment
        print(f"segment {seg.id}: ({seg.start.x:.3f}, {seg.start.y:.3f}) -> ({seg.end.x:.3f}, {seg.end.y:.3f})")

    frame = session.frame()
    print("Markers:", [(p.x, p.y) for p in frame.markers])

    search = find_cycles(session.arrangement.graph, 0, undirected=True, max_paths=20)
    for path in search.paths:
        print("loop:", path)
    if search.truncated:
        print("search truncated:", search.reason)


if __name__ == "__main__":
    main()
