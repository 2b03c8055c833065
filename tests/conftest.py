"""Shared fixtures for the voteroute test suite."""

import json

import pytest

from voteroute.core.types import ConnectionEdge


def make_edge(guid: str, other_guid: str = "", **fields) -> ConnectionEdge:
    """Connection edge with names derived from the guids."""
    fields.setdefault("name", guid.upper())
    fields.setdefault("other_name", other_guid.upper())
    return ConnectionEdge(guid=guid, other_guid=other_guid, **fields)


@pytest.fixture
def snapshot_data():
    """
    One round of telemetry around a vote cast at 12:00 UTC.

    src --(voter link)--> r1 --> r2        (in window)
                              r2 --> r3    (11:30 before the vote, in window)
                              r3 --> r4    (10:30, outside the 1h window)
    """
    return {
        "votes": [
            {"round": 10, "step": 1, "sender": "AUTH", "timestamp": "2024-01-01T11:59:00"},
            {"round": 10, "step": 2, "sender": "OTHER", "timestamp": "2024-01-01T11:58:00",
             "lat": 1.0, "long": 2.0},
            {"round": 10, "step": 2, "sender": "AUTH", "timestamp": "2024-01-01T12:00:00",
             "lat": 40.0, "long": -70.0, "sender_telemetry_id": "tel-src"},
        ],
        "connections": [
            {"guid": "src", "name": "Source", "other_guid": "r1", "other_name": "Relay1",
             "other_lat": 41.0, "other_long": -71.0, "timestamp": "2024-01-01T11:55:00"},
        ],
        "relay_connections": [
            {"guid": "r1", "name": "Relay1", "other_guid": "r2", "other_name": "Relay2",
             "relay": "relay-1.net", "other_relay": "relay-2.net",
             "lat": 41.0, "long": -71.0, "other_lat": 42.0, "other_long": -72.0,
             "timestamp": "2024-01-01T11:50:00"},
            {"guid": "r2", "name": "Relay2", "other_guid": "r3", "other_name": "Relay3",
             "relay": "relay-2.net", "other_relay": "relay-3.net",
             "lat": 42.0, "long": -72.0, "other_lat": 43.0, "other_long": -73.0,
             "timestamp": "2024-01-01T11:30:00"},
            {"guid": "r3", "name": "Relay3", "other_guid": "r4", "other_name": "Relay4",
             "relay": "relay-3.net", "other_relay": "relay-4.net",
             "timestamp": "2024-01-01T10:30:00"},
        ],
        "authenticators": [
            {"relay": "relay-1.net", "round": 10, "auth": "AUTH"},
            {"relay": "relay-2.net", "round": 10, "auth": "OTHER"},
            {"relay": "relay-2.net", "round": 10, "auth": "AUTH"},
            {"relay": "relay-9.net", "round": 11, "auth": "AUTH"},
        ],
    }


@pytest.fixture
def snapshot_file(tmp_path, snapshot_data):
    path = tmp_path / "telemetry.json"
    path.write_text(json.dumps(snapshot_data))
    return path


@pytest.fixture
def edge():
    """Factory for connection edges: edge("n1", "n2", relay="r1")."""
    return make_edge
