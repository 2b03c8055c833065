"""Unit tests for the geographic projection and projection dispatch."""

import pytest

from voteroute.core.types import Coordinates, GraphStyle, PropagationRecord
from voteroute.projections import (
    FlowEdge,
    GeoRoute,
    TreeNode,
    emit_geo,
    payload_to_data,
    project,
)
from voteroute.projections.geo import is_valid_point


def at(lat, long):
    return Coordinates(lat=lat, long=long)


@pytest.fixture
def records():
    return [
        PropagationRecord(level=0, node_guid="o", node_name="Origin", coordinates=at(10, 20)),
        PropagationRecord(level=1, parent_guid="o", node_guid="a", coordinates=at(11, 21)),
        PropagationRecord(level=2, parent_guid="a", node_guid="b", coordinates=at(12, 22)),
    ]


class TestIsValidPoint:
    @pytest.mark.parametrize("long", [-90.0, 0.0, 45.5, 90.0])
    def test_inside_bound(self, long):
        assert is_valid_point(at(0, long))

    @pytest.mark.parametrize("long", [-90.5, 95.0, 179.0])
    def test_outside_bound(self, long):
        assert not is_valid_point(at(0, long))

    def test_bound_checks_long_only(self):
        assert is_valid_point(at(120, 10))

    def test_missing_point(self):
        assert not is_valid_point(None)

    def test_custom_bound(self):
        assert is_valid_point(at(0, 150), bound=180)


class TestEmitGeo:
    def test_markers_and_segments(self, records):
        route = emit_geo(records)

        assert [(m.guid, m.hop) for m in route.markers] == [("o", 0), ("a", 1), ("b", 2)]
        assert [(s.start, s.end, s.hop) for s in route.segments] == [
            (at(10, 20), at(11, 21), 1),
            (at(11, 21), at(12, 22), 2),
        ]
        assert route.center == at(10, 20)

    def test_out_of_range_point_is_skipped(self, records):
        records[1] = records[1].model_copy(update={"coordinates": at(11, 95)})

        route = emit_geo(records)

        assert [m.guid for m in route.markers] == ["o", "b"]
        # b's parent was never placed, so nothing connects to it.
        assert len(route.segments) == 0

    def test_missing_coordinates_skipped(self, records):
        records[2] = records[2].model_copy(update={"coordinates": None})

        route = emit_geo(records)

        assert [m.guid for m in route.markers] == ["o", "a"]

    def test_repeated_long_drawn_once(self, records):
        records.append(PropagationRecord(level=2, parent_guid="o", node_guid="c",
                                         coordinates=at(50, 21)))

        route = emit_geo(records)

        assert [m.guid for m in route.markers] == ["o", "a", "b"]

    def test_empty(self):
        route = emit_geo([])
        assert route.markers == []
        assert route.center is None


class TestProject:
    def test_dispatch(self, records):
        assert all(isinstance(n, TreeNode) for n in project(records, GraphStyle.TREE))
        assert all(isinstance(e, FlowEdge) for e in project(records, GraphStyle.FLOW))
        assert isinstance(project(records, GraphStyle.GEO), GeoRoute)

    def test_geo_bound_is_passed_through(self, records):
        records[1] = records[1].model_copy(update={"coordinates": at(11, 95)})

        route = project(records, GraphStyle.GEO, geo_bound=180)

        assert len(route.markers) == 3

    def test_payload_to_data(self, records):
        tree = payload_to_data(project(records, GraphStyle.TREE))
        geo = payload_to_data(project(records, GraphStyle.GEO))

        assert tree[0]["id"] == "o"
        assert geo["markers"][0]["point"] == {"lat": 10.0, "long": 20.0}
