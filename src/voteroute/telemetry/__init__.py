"""
Telemetry boundary for voteroute.

Provides the in-memory snapshot that stands in for the telemetry store,
and the route builder that turns a dashboard request into a projection.
"""

from .route import (
    RouteRequest, RouteResult, SourceHost, build_route, parse_source_host,
)
from .snapshot import AuthenticatorSighting, TelemetrySnapshot, Vote, load_snapshot

__all__ = [
    "AuthenticatorSighting", "TelemetrySnapshot", "Vote", "load_snapshot",
    "RouteRequest", "RouteResult", "SourceHost", "build_route", "parse_source_host",
]
