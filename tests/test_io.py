import json

import pytest

from planar_cuts import Arrangement, Point, parse_segments, state_to_dict


def test_parse_bare_list():
    segments = parse_segments("[[[0, 0], [10, 0]], [[2, -1], [2, 1]]]")

    assert segments == [(Point(0, 0), Point(10, 0)), (Point(2, -1), Point(2, 1))]


def test_parse_object_with_point_dicts():
    text = json.dumps(
        {"segments": [{"start": {"x": 1, "y": 2}, "end": {"x": 3.5, "y": 4}}]}
    )

    assert parse_segments(text) == [(Point(1, 2), Point(3.5, 4))]


@pytest.mark.parametrize(
    "text, message",
    [
        ("not json", "invalid JSON"),
        ('{"cuts": []}', "'segments'"),
        ('{"segments": 3}', "must be a JSON list"),
        ("[[[0, 0]]]", "segment 0"),
        ('[[[0, 0], ["a", 1]]]', "numbers"),
        ('[{"start": {"x": 1}, "end": {"x": 1, "y": 2}}]', "'x' and 'y'"),
        ('[{"start": [0, 0]}]', "'start' and 'end'"),
    ],
)
def test_parse_rejects_malformed_input(text, message):
    with pytest.raises(ValueError) as excinfo:
        parse_segments(text)

    assert message in str(excinfo.value)


def test_state_to_dict_round_trips_through_json():
    arr = Arrangement()
    arr.insert(Point(0, 0), Point(10, 0))
    arr.insert(Point(2, -1), Point(2, 1))
    arr.insert(Point(6, -1), Point(6, 1))

    payload = json.loads(json.dumps(state_to_dict(arr.state())))

    assert payload["segments"][1] == {"id": 1, "start": {"x": 2.0, "y": -1.0}, "end": {"x": 2.0, "y": 1.0}}
    assert payload["intersections"][0]["segment1Id"] == 1
    assert payload["intersections"][0]["segment2Id"] == 0
    assert payload["intersections"][0]["point"] == {"x": 2.0, "y": 0.0}
    assert payload["graph"] == [{"from": 0, "to": 1}]
