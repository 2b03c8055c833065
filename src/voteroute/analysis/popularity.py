"""
Authenticator popularity.

Per-round aggregates over the certificate sightings reported by relays:

- distribution: how many of the reporting relays listed each
  authenticator. A share of 1.0 means every relay saw it.
- relay counts: how many authenticators each relay's certificate listed.
- summary: distinct relays and distinct authenticators in the round.
"""

from collections import Counter
from typing import Iterable, List

from pydantic import BaseModel

from ..telemetry.snapshot import AuthenticatorSighting


class AuthenticatorShare(BaseModel):
    auth: str
    relays: int
    share: float


class RelayAuthCount(BaseModel):
    relay: str
    auth_count: int


class RoundSummary(BaseModel):
    round: int
    relay_count: int
    auth_count: int


def _in_round(sightings: Iterable[AuthenticatorSighting],
              round_number: int) -> List[AuthenticatorSighting]:
    return [s for s in sightings if s.round == round_number]


def relays_for_round(sightings: Iterable[AuthenticatorSighting], round_number: int) -> List[str]:
    return sorted({s.relay for s in _in_round(sightings, round_number)})


def authenticator_distribution(sightings: Iterable[AuthenticatorSighting],
                               round_number: int) -> List[AuthenticatorShare]:
    """
    Share of reporting relays that saw each authenticator.

    Returns:
        Shares ordered by share descending, then authenticator ascending.
        Empty when no relay reported for the round.
    """
    in_round = _in_round(sightings, round_number)
    relay_count = len({s.relay for s in in_round})
    if relay_count == 0:
        return []

    counts = Counter(s.auth for s in in_round)
    shares = [
        AuthenticatorShare(auth=auth, relays=count, share=count / relay_count)
        for auth, count in counts.items()
    ]
    shares.sort(key=lambda s: (-s.share, s.auth))
    return shares


def relay_authenticator_counts(sightings: Iterable[AuthenticatorSighting],
                               round_number: int) -> List[RelayAuthCount]:
    """Number of sightings each relay reported for the round, by relay name."""
    counts = Counter(s.relay for s in _in_round(sightings, round_number))
    return [RelayAuthCount(relay=relay, auth_count=counts[relay]) for relay in sorted(counts)]


def round_summary(sightings: Iterable[AuthenticatorSighting], round_number: int) -> RoundSummary:
    in_round = _in_round(sightings, round_number)
    return RoundSummary(
        round=round_number,
        relay_count=len({s.relay for s in in_round}),
        auth_count=len({s.auth for s in in_round}),
    )
