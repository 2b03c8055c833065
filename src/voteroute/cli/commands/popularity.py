"""
Popularity Command - How widely each authenticator was seen in a round.
"""

from typing import List, Optional

import click
from pydantic import BaseModel
from rich.console import Console

from ...analysis.popularity import (
    AuthenticatorShare,
    RelayAuthCount,
    RoundSummary,
    authenticator_distribution,
    relay_authenticator_counts,
    relays_for_round,
    round_summary,
)
from ...core.exceptions import VoteRouteError
from ...telemetry.snapshot import load_snapshot
from ..formatting import format_popularity
from ..renderers import JsonRenderer
from ..utils import echo_warning, load_snapshot_or_report, prepare_settings

console = Console()


# --- API Models ---
class PopularityResponse(BaseModel):
    summary: RoundSummary
    relays: List[str]
    authenticators: List[AuthenticatorShare]
    relay_counts: List[RelayAuthCount]


@click.command()
@click.argument("snapshot_file", type=click.Path())
@click.option("-r", "--round", "round_number", required=True, type=int,
              help="Round number to summarize")
@click.option("-c", "--config", "config_path", default=None,
              help="Path to config YAML (default: .voteroute/config.yaml)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging")
def popularity(snapshot_file: str, round_number: int, config_path: Optional[str],
               as_json: bool, verbose: bool) -> None:
    """
    Show the share of relays whose certificate listed each authenticator,
    and how many authenticators each relay reported.
    """
    prepare_settings(config_path, verbose)

    if not as_json:
        snapshot = load_snapshot_or_report(snapshot_file)
        if snapshot is None:
            return
        sightings = snapshot.sightings_for_round(round_number)
        shares = authenticator_distribution(sightings, round_number)
        if not shares:
            echo_warning(f"No data: no authenticator sightings for round {round_number}")
            return
        console.print(format_popularity(
            round_summary(sightings, round_number),
            shares,
            relay_authenticator_counts(sightings, round_number),
        ))
        return

    renderer = JsonRenderer("popularity")
    error_to_report = None
    response_data = None

    with renderer.capture():
        try:
            snapshot = load_snapshot(snapshot_file)
            sightings = snapshot.sightings_for_round(round_number)
            response_data = PopularityResponse(
                summary=round_summary(sightings, round_number),
                relays=relays_for_round(sightings, round_number),
                authenticators=authenticator_distribution(sightings, round_number),
                relay_counts=relay_authenticator_counts(sightings, round_number),
            )
        except VoteRouteError as e:
            error_to_report = e

    if error_to_report:
        renderer.render_error(error_to_report)
    else:
        renderer.render_success(response_data)
