"""
Core type definitions for voteroute.

Telemetry rows arrive noisy: coordinates may be missing or stored as empty
strings, relay names may be blank, and the same physical link can show up
twice with the endpoints swapped. The models here accept all of that and
leave interpretation to the reconstruction step.
"""

from datetime import datetime, timezone
from enum import IntEnum
from typing import Any, List

from pydantic import BaseModel, ConfigDict, field_validator


class GraphStyle(IntEnum):
    """Visual projections a reconstructed route can be emitted as."""
    TREE = 0
    FLOW = 1
    GEO = 2

    @classmethod
    def parse(cls, value: Any) -> "GraphStyle":
        """Accept the numeric selector (0/1/2) or the projection name."""
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        if text.isdigit():
            return cls(int(text))
        try:
            return cls[text.upper()]
        except KeyError:
            raise ValueError(f"Unknown graph style: {value!r}") from None


class Coordinates(BaseModel):
    """A geographic point as stored in telemetry."""
    lat: float
    long: float

    model_config = ConfigDict(frozen=True)


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


def as_utc(value: datetime | None) -> datetime | None:
    """Treat naive telemetry timestamps as UTC so windows compare cleanly."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class ConnectionEdge(BaseModel):
    """
    One observation that two nodes were connected.

    The row has an origin side (`guid`, `name`, `relay`) and a peer side
    (`other_*`). An empty `other_guid` means no destination is known yet.
    """
    guid: str
    name: str = ""
    other_guid: str = ""
    other_name: str = ""
    relay: str = ""
    other_relay: str = ""
    lat: float | None = None
    long: float | None = None
    other_lat: float | None = None
    other_long: float | None = None
    timestamp: datetime | None = None

    model_config = ConfigDict(extra="ignore")

    @field_validator("lat", "long", "other_lat", "other_long", mode="before")
    @classmethod
    def _coerce_coordinate(cls, value: Any) -> Any:
        return _blank_to_none(value)

    @field_validator("name", "other_guid", "other_name", "relay", "other_relay", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("timestamp")
    @classmethod
    def _normalize_timestamp(cls, value: datetime | None) -> datetime | None:
        return as_utc(value)

    @property
    def coordinates(self) -> Coordinates | None:
        if self.lat is None or self.long is None:
            return None
        return Coordinates(lat=self.lat, long=self.long)

    @property
    def other_coordinates(self) -> Coordinates | None:
        if self.other_lat is None or self.other_long is None:
            return None
        return Coordinates(lat=self.other_lat, long=self.other_long)

    def has_peer(self) -> bool:
        return self.other_guid != ""


class OriginObservation(BaseModel):
    """
    The vote observation a route is traced from.

    `links` are the origin host's own connection rows. Leave it as None to
    derive them from the candidate edges instead.
    """
    guid: str
    name: str = ""
    relay: str = ""
    coordinates: Coordinates | None = None
    timestamp: datetime | None = None
    links: List[ConnectionEdge] | None = None

    @classmethod
    def stub(cls, guid: str, name: str = "", **fields: Any) -> "OriginObservation":
        """Build an origin whose only link has no known peer."""
        stub_link = ConnectionEdge(guid=guid, name=name)
        return cls(guid=guid, name=name, links=[stub_link], **fields)


class PropagationRecord(BaseModel):
    """
    One placement of a node in the reconstructed vote route.

    A guid reached over several paths has one record per path, so
    `parent_index` (the position of the parent's record in the route) is
    what identifies which placement of the parent this hop hangs under.
    """
    level: int
    parent_guid: str | None = None
    parent_index: int | None = None
    node_guid: str
    node_name: str = ""
    relay_name: str = ""
    coordinates: Coordinates | None = None
    seen: bool = False

    @property
    def is_root(self) -> bool:
        return self.parent_guid is None
