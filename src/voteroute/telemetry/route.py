"""
Route building.

Turns a dashboard request (round, authenticator, source host, graph style)
into a reconstructed and projected vote route:

1. Find the first certification vote of the round (from the requested
   authenticator when the source host is known).
2. Take the relay connections observed in the lookback window ending at
   that vote.
3. Build the origin from the source host `guid:relayName` and the host's
   own connection rows in the window.
4. Reconstruct and project.

A request that cannot be anchored to an origin yields Err(InvalidInput),
which callers show as an empty view.
"""

import logging
from datetime import datetime
from typing import Any, List

from pydantic import BaseModel

from ..config import Settings
from ..core.exceptions import InvalidInput
from ..core.reconstruct import reconstruct
from ..core.result import Err, Ok, Result
from ..core.types import GraphStyle, OriginObservation, PropagationRecord
from ..projections import project
from .snapshot import TelemetrySnapshot, Vote

logger = logging.getLogger(__name__)


class SourceHost(BaseModel):
    guid: str
    relay: str = ""
    raw: str


class RouteRequest(BaseModel):
    round: int
    auth: str | None = None
    source_host: str = ""
    graph_style: GraphStyle = GraphStyle.TREE


class RouteResult(BaseModel):
    request: RouteRequest
    vote: Vote
    window_start: datetime
    window_end: datetime
    records: List[PropagationRecord]
    payload: Any = None


def parse_source_host(source_host: str | None) -> SourceHost | None:
    """
    Split a `guid:relayName` source host.

    The guid is everything before the first colon; a value without a colon
    is taken as a bare guid.
    """
    if not source_host:
        return None
    guid, _, relay = source_host.partition(":")
    return SourceHost(guid=guid, relay=relay, raw=source_host)


def _build_origin(snapshot: TelemetrySnapshot, host: SourceHost, vote: Vote,
                  start: datetime, end: datetime) -> OriginObservation:
    links = snapshot.voter_connections_between(host.guid, start, end)
    if not links:
        logger.debug(f"No connections for {host.guid} in window, using stub origin")
        return OriginObservation.stub(
            host.guid, host.raw,
            relay=host.relay, coordinates=vote.coordinates, timestamp=vote.timestamp,
        )
    return OriginObservation(
        guid=host.guid,
        name=links[0].name or host.raw,
        relay=host.relay,
        coordinates=vote.coordinates,
        timestamp=vote.timestamp,
        links=links,
    )


def build_route(snapshot: TelemetrySnapshot, request: RouteRequest,
                settings: Settings | None = None) -> Result[RouteResult, InvalidInput]:
    settings = settings or Settings()
    host = parse_source_host(request.source_host)

    sender = request.auth if host is not None else None
    vote = snapshot.first_vote(request.round, settings.vote_step, sender=sender)
    if vote is None:
        who = f" from {request.auth}" if sender else ""
        return Err(InvalidInput(f"No step {settings.vote_step} vote{who} in round {request.round}"))

    if host is None:
        return Err(InvalidInput(
            f"Round {request.round} vote has no source host; origin node unknown"
        ))

    end = vote.timestamp
    start = end - settings.lookback
    edges = snapshot.relay_connections_between(start, end)
    origin = _build_origin(snapshot, host, vote, start, end)
    seen = snapshot.seen_relays(request.round, request.auth)
    logger.debug(
        f"Round {request.round}: {len(edges)} relay connections in "
        f"[{start.isoformat()}, {end.isoformat()}], {len(seen)} seen relays"
    )

    records = reconstruct(edges, origin, seen)
    payload = project(records, request.graph_style, geo_bound=settings.geo_coordinate_bound)
    return Ok(RouteResult(
        request=request,
        vote=vote,
        window_start=start,
        window_end=end,
        records=records,
        payload=payload,
    ))
