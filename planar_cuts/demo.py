from . import DragSession, Point, find_cycles, redundant_edges

DEMO = [
    ((0.0, 0.0), (10.0, 0.0)),
    ((2.0, -1.0), (2.0, 11.0)),
    ((8.0, -1.0), (8.0, 11.0)),
    ((0.0, 10.0), (10.0, 10.0)),
    ((5.0, -1.0), (5.0, 11.0)),
]


def run():
    session = DragSession(debug=True)
    for (x0, y0), (x1, y1) in DEMO:
        session.begin_drag(Point(x0, y0))
        session.end_drag(Point(x1, y1))

    state = session.arrangement.state()
    print(f"Segments: {len(state.segments)}")
    for ix in state.intersections:
        print(f"  intersection {ix.id} at ({ix.point.x:g}, {ix.point.y:g})")
    print(f"Edges: {[(e.frm, e.to) for e in state.graph]}")
    print(f"Redundant edges: {[(e.frm, e.to) for e in redundant_edges(state)]}")

    result = find_cycles(state.graph, 0, undirected=True)
    print("Loops through intersection 0:")
    for path in result.paths:
        print("  " + " -> ".join(str(node) for node in path))
    return state, result


if __name__ == "__main__":
    run()
