"""
Route Command - Reconstruct how a vote propagated through the relay mesh.

Shows the route as a tree, a flow edge list or a geographic route.
"""

import logging
from datetime import datetime
from typing import Any, List, Optional

import click
from pydantic import BaseModel
from rich.console import Console

from ...core.exceptions import VoteRouteError
from ...core.types import GraphStyle, PropagationRecord
from ...projections import payload_to_data
from ...telemetry.route import RouteRequest, build_route
from ...telemetry.snapshot import load_snapshot
from ..formatting import format_route
from ..renderers import JsonRenderer
from ..utils import echo_warning, load_snapshot_or_report, prepare_settings

logger = logging.getLogger(__name__)

console = Console()

STYLE_CHOICES = ["tree", "flow", "geo", "0", "1", "2"]


# --- API Models ---
class RouteResponse(BaseModel):
    round: int
    auth: Optional[str] = None
    graph_style: str
    window_start: datetime
    window_end: datetime
    records: List[PropagationRecord]
    payload: Any = None


@click.command()
@click.argument("snapshot_file", type=click.Path())
@click.option("-r", "--round", "round_number", required=True, type=int,
              help="Round number to trace")
@click.option("-a", "--auth", default=None, help="Authenticator (vote sender) address")
@click.option("-s", "--source-host", default="",
              help="Host the vote came from, as guid:relayName")
@click.option("--style", "graph_style", default="tree",
              type=click.Choice(STYLE_CHOICES, case_sensitive=False),
              help="Projection: tree (0), flow (1) or geo (2)")
@click.option("-c", "--config", "config_path", default=None,
              help="Path to config YAML (default: .voteroute/config.yaml)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging")
def route(snapshot_file: str, round_number: int, auth: Optional[str], source_host: str,
          graph_style: str, config_path: Optional[str], as_json: bool, verbose: bool) -> None:
    """
    Reconstruct the propagation route of a round's vote.

    \b
    Examples:
      voteroute route telemetry.json -r 1200 -a AUTH -s 4f2a:relay-3
      voteroute route telemetry.json -r 1200 -a AUTH -s 4f2a:relay-3 --style geo
    """
    settings = prepare_settings(config_path, verbose)
    request = RouteRequest(
        round=round_number,
        auth=auth,
        source_host=source_host,
        graph_style=GraphStyle.parse(graph_style),
    )

    if not as_json:
        _run_human_mode(snapshot_file, request, settings)
        return

    renderer = JsonRenderer("route")
    error_to_report = None
    response_data = None

    with renderer.capture():
        try:
            snapshot = load_snapshot(snapshot_file)
            result = build_route(snapshot, request, settings)
            if result.is_err():
                raise result.error
            route_result = result.unwrap()
            response_data = RouteResponse(
                round=request.round,
                auth=request.auth,
                graph_style=request.graph_style.name.lower(),
                window_start=route_result.window_start,
                window_end=route_result.window_end,
                records=route_result.records,
                payload=payload_to_data(route_result.payload),
            )
        except VoteRouteError as e:
            error_to_report = e

    if error_to_report:
        renderer.render_error(error_to_report)
    else:
        renderer.render_success(response_data)


def _run_human_mode(snapshot_file: str, request: RouteRequest, settings) -> None:
    snapshot = load_snapshot_or_report(snapshot_file)
    if snapshot is None:
        return

    result = build_route(snapshot, request, settings)
    if result.is_err():
        logger.info(f"No route for round {request.round}: {result.error}")
        echo_warning(f"No data: {result.error}")
        return

    console.print(format_route(result.unwrap()))
