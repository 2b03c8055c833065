"""
Geographic projection.

Turns propagation records into hop-labelled map markers and the polyline
segments joining each placed node to the point of its parent.

Two filters apply on top of reconstruction:

- A point is only placed when its `long` value lies within
  +/- GEO_COORDINATE_BOUND (90 by default). Telemetry feeds the stored
  `long` value to the map as the first, latitude-like, LatLng component,
  and the bound is kept exactly as the dashboard has always applied it.
- A point is only placed once per `long` value, so a location reached
  again over another path is not drawn a second time.
"""

import logging
from typing import Dict, List, Sequence, Set

from pydantic import BaseModel, Field

from ..config import GEO_COORDINATE_BOUND
from ..core.types import Coordinates, PropagationRecord

logger = logging.getLogger(__name__)


class GeoMarker(BaseModel):
    point: Coordinates
    hop: int
    guid: str
    name: str = ""


class GeoSegment(BaseModel):
    start: Coordinates
    end: Coordinates
    hop: int


class GeoRoute(BaseModel):
    markers: List[GeoMarker] = Field(default_factory=list)
    segments: List[GeoSegment] = Field(default_factory=list)

    @property
    def center(self) -> Coordinates | None:
        """Where a map should open: the first placed point."""
        return self.markers[0].point if self.markers else None


def is_valid_point(point: Coordinates | None, bound: float = GEO_COORDINATE_BOUND) -> bool:
    return point is not None and -bound <= point.long <= bound


def emit_geo(records: Sequence[PropagationRecord],
             bound: float = GEO_COORDINATE_BOUND) -> GeoRoute:
    route = GeoRoute()
    placed: Dict[str, Coordinates] = {}
    placed_longs: Set[float] = set()

    for record in records:
        point = record.coordinates
        if not is_valid_point(point, bound):
            if point is not None:
                logger.debug(f"Skipping {record.node_guid}: long {point.long} outside +/-{bound}")
            continue
        if point.long in placed_longs:
            continue

        placed_longs.add(point.long)
        route.markers.append(GeoMarker(
            point=point, hop=record.level, guid=record.node_guid, name=record.node_name,
        ))

        parent_point = placed.get(record.parent_guid) if record.parent_guid else None
        if parent_point is not None:
            route.segments.append(GeoSegment(start=parent_point, end=point, hop=record.level))

        placed[record.node_guid] = point

    return route
