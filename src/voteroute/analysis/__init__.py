"""
Analysis modules for voteroute.

- popularity: Per-round authenticator distribution, per-relay counts and
  round summary
"""

from .popularity import (
    AuthenticatorShare,
    RelayAuthCount,
    RoundSummary,
    authenticator_distribution,
    relay_authenticator_counts,
    relays_for_round,
    round_summary,
)

__all__ = [
    "AuthenticatorShare", "RelayAuthCount", "RoundSummary",
    "authenticator_distribution", "relay_authenticator_counts",
    "relays_for_round", "round_summary",
]
