"""Example: cut a grid, then compare the raw graph with the minimal subdivision."""

from planar_cuts import Arrangement, Point, redundant_edges, subdivision_edges

HORIZONTALS = [((0.0, y), (12.0, y)) for y in (1.0, 4.0, 7.0)]
VERTICALS = [((x, 0.0), (x, 8.0)) for x in (6.0, 2.0, 10.0)]


def main() -> None:
    arrangement = Arrangement()
    for (x0, y0), (x1, y1) in HORIZONTALS + VERTICALS:
        arrangement.insert(Point(x0, y0), Point(x1, y1))

    state = arrangement.state()
    print("Intersections:", len(state.intersections))
    print("Raw edges:", len(state.graph))
    print("Minimal edges:", len(subdivision_edges(state)))
    for edge in redundant_edges(state):
        print(f"  long edge {edge.frm} -> {edge.to}")


if __name__ == "__main__":
    main()
