"""
Telemetry snapshot.

An in-memory stand-in for the telemetry store the dashboard queries. It
holds the four row kinds a route needs and answers the handful of range and
equality lookups the route builder makes. Row order is the store order and
is preserved by every lookup, since reconstruction tie-breaks on it.

Expected JSON format:
{
    "votes": [{"round": 1, "step": 2, "sender": "...", "timestamp": "...", ...}],
    "connections": [{"guid": "...", "other_guid": "...", "timestamp": "...", ...}],
    "relay_connections": [{"guid": "...", "other_guid": "...", ...}],
    "authenticators": [{"relay": "...", "round": 1, "auth": "..."}]
}
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Set

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..core.exceptions import SnapshotNotFoundError
from ..core.types import ConnectionEdge, Coordinates, as_utc

logger = logging.getLogger(__name__)


class Vote(BaseModel):
    """A vote observed by telemetry."""
    round: int
    step: int
    sender: str = ""
    timestamp: datetime
    lat: float | None = None
    long: float | None = None
    sender_telemetry_id: str = ""

    model_config = ConfigDict(extra="ignore")

    @field_validator("lat", "long", mode="before")
    @classmethod
    def _coerce_coordinate(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("timestamp")
    @classmethod
    def _normalize_timestamp(cls, value: datetime) -> datetime:
        return as_utc(value)

    @property
    def coordinates(self) -> Coordinates | None:
        if self.lat is None or self.long is None:
            return None
        return Coordinates(lat=self.lat, long=self.long)


class AuthenticatorSighting(BaseModel):
    """Relay `relay` saw authenticator `auth` in round `round`'s certificate."""
    relay: str
    round: int
    auth: str

    model_config = ConfigDict(extra="ignore")


def _in_window(row: ConnectionEdge, start: datetime, end: datetime) -> bool:
    return row.timestamp is not None and start <= row.timestamp <= end


class TelemetrySnapshot(BaseModel):
    votes: List[Vote] = Field(default_factory=list)
    connections: List[ConnectionEdge] = Field(default_factory=list)
    relay_connections: List[ConnectionEdge] = Field(default_factory=list)
    authenticators: List[AuthenticatorSighting] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")

    # =========================================================================
    # Lookups
    # =========================================================================

    def first_vote(self, round_number: int, step: int, sender: str | None = None) -> Vote | None:
        """First vote of a round at `step`, optionally from one sender."""
        for vote in self.votes:
            if vote.round != round_number or vote.step != step:
                continue
            if sender is not None and vote.sender != sender:
                continue
            return vote
        return None

    def relay_connections_between(self, start: datetime, end: datetime) -> List[ConnectionEdge]:
        return [row for row in self.relay_connections if _in_window(row, start, end)]

    def voter_connections_between(self, guid: str, start: datetime,
                                  end: datetime) -> List[ConnectionEdge]:
        return [
            row for row in self.connections
            if row.guid == guid and _in_window(row, start, end)
        ]

    def seen_relays(self, round_number: int, auth: str | None) -> Set[str]:
        """Relay names whose certificate for the round lists `auth`."""
        return {
            s.relay for s in self.authenticators
            if s.round == round_number and s.auth == auth and s.relay
        }

    def sightings_for_round(self, round_number: int) -> List[AuthenticatorSighting]:
        return [s for s in self.authenticators if s.round == round_number]

    def stats(self) -> Dict[str, int]:
        return {
            "votes": len(self.votes),
            "connections": len(self.connections),
            "relay_connections": len(self.relay_connections),
            "authenticators": len(self.authenticators),
        }


# =========================================================================
# Loading
# =========================================================================

def load_snapshot(snapshot_file: str | Path) -> TelemetrySnapshot:
    """
    Load a TelemetrySnapshot from a JSON file.

    Raises:
        SnapshotNotFoundError: If the file is missing, unreadable, not JSON,
            or does not match the snapshot layout.
    """
    path = Path(snapshot_file)
    if path.is_dir():
        path = path / "telemetry.json"

    if not path.exists():
        raise SnapshotNotFoundError(str(path))

    try:
        data = json.loads(path.read_text())
        snapshot = TelemetrySnapshot.model_validate(data)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as e:
        raise SnapshotNotFoundError(str(path), reason=f"invalid ({e.__class__.__name__})") from e

    logger.debug(f"Loaded snapshot {path}: {snapshot.stats()}")
    return snapshot
