"""Unit tests for building a route from a telemetry snapshot."""

import pytest

from voteroute.config import Settings
from voteroute.core.exceptions import InvalidInput
from voteroute.core.types import Coordinates, GraphStyle
from voteroute.projections import GeoRoute
from voteroute.telemetry.route import RouteRequest, build_route, parse_source_host
from voteroute.telemetry.snapshot import TelemetrySnapshot


@pytest.fixture
def snapshot(snapshot_data):
    return TelemetrySnapshot.model_validate(snapshot_data)


def request(**fields):
    fields.setdefault("round", 10)
    fields.setdefault("auth", "AUTH")
    fields.setdefault("source_host", "src:relay-src.net")
    return RouteRequest(**fields)


class TestParseSourceHost:
    def test_guid_and_relay(self):
        host = parse_source_host("abc:relay-1.net")
        assert (host.guid, host.relay, host.raw) == ("abc", "relay-1.net", "abc:relay-1.net")

    def test_bare_guid(self):
        host = parse_source_host("abc")
        assert (host.guid, host.relay) == ("abc", "")

    def test_relay_with_colon_kept_whole(self):
        assert parse_source_host("abc:relay:4160").relay == "relay:4160"

    @pytest.mark.parametrize("value", ["", None])
    def test_empty(self, value):
        assert parse_source_host(value) is None


class TestBuildRoute:
    def test_full_route(self, snapshot):
        result = build_route(snapshot, request())

        assert result.is_ok()
        route = result.unwrap()
        assert [(r.node_guid, r.level, r.parent_guid) for r in route.records] == [
            ("src", 0, None),
            ("r1", 1, "src"),
            ("r2", 2, "r1"),
            ("r3", 3, "r2"),
        ]

    def test_root_comes_from_vote_and_host(self, snapshot):
        root = build_route(snapshot, request()).unwrap().records[0]

        assert root.node_name == "Source"
        assert root.relay_name == "relay-src.net"
        assert root.coordinates == Coordinates(lat=40.0, long=-70.0)
        assert root.seen

    def test_relay_names_and_seen_flags(self, snapshot):
        records = build_route(snapshot, request()).unwrap().records

        assert [r.relay_name for r in records[1:]] == ["relay-1.net", "relay-2.net", "relay-3.net"]
        assert [r.seen for r in records[1:]] == [True, True, False]

    def test_window_ends_at_vote(self, snapshot):
        route = build_route(snapshot, request()).unwrap()

        assert route.window_end == route.vote.timestamp
        assert (route.window_end - route.window_start).total_seconds() == 3600

    def test_lookback_from_settings(self, snapshot):
        settings = Settings(lookback_minutes=120)

        records = build_route(snapshot, request(), settings).unwrap().records

        assert [r.node_guid for r in records] == ["src", "r1", "r2", "r3", "r4"]

    def test_host_without_connections_gives_root_only(self, snapshot):
        route = build_route(snapshot, request(source_host="ghost:relay-x")).unwrap()

        assert len(route.records) == 1
        assert route.records[0].node_guid == "ghost"
        assert route.records[0].node_name == "ghost:relay-x"

    def test_missing_source_host(self, snapshot):
        result = build_route(snapshot, request(source_host=""))

        assert result.is_err()
        assert isinstance(result.error, InvalidInput)
        assert "origin node unknown" in str(result.error)

    def test_missing_vote(self, snapshot):
        result = build_route(snapshot, request(round=99))

        assert result.is_err()
        assert "round 99" in str(result.error)

    def test_vote_from_other_sender(self, snapshot):
        route = build_route(snapshot, request(auth="OTHER")).unwrap()

        assert route.vote.sender == "OTHER"
        assert [r.seen for r in route.records[1:]] == [False, True, False]

    def test_geo_payload(self, snapshot):
        route = build_route(snapshot, request(graph_style=GraphStyle.GEO)).unwrap()

        assert isinstance(route.payload, GeoRoute)
        assert len(route.payload.markers) == 4
        assert len(route.payload.segments) == 3

    def test_geo_bound_from_settings(self, snapshot):
        settings = Settings(geo_coordinate_bound=71.5)

        route = build_route(snapshot, request(graph_style=GraphStyle.GEO), settings).unwrap()

        assert [m.guid for m in route.payload.markers] == ["src", "r1"]
