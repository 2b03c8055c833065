"""
Terminal rendering for route projections.

Each function returns a rich renderable; commands print them through a
shared Console.
"""

from typing import List, Sequence

from rich.console import Group
from rich.markup import escape
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from ..analysis.popularity import AuthenticatorShare, RelayAuthCount, RoundSummary
from ..projections import FlowEdge, GeoRoute, TreeNode
from ..telemetry.route import RouteResult


def _short(guid: str, width: int = 12) -> str:
    return guid if len(guid) <= width else f"{guid[:width]}…"


def _node_label(node: TreeNode) -> str:
    label = f"[bold]{escape(node.name or node.id)}[/bold] [dim]{escape(_short(node.id))}[/dim]"
    if node.relay:
        label += f" [cyan]{escape(node.relay)}[/cyan]"
    if node.seen:
        label += " [green]✔ seen[/green]"
    return label


def format_tree(nodes: Sequence[TreeNode]) -> Tree:
    """
    Render org-chart rows as a rich Tree.

    The same guid can occur once per path, so a node hangs under the branch
    at its `parent_index` (the row position of the placement that reached
    it), not under whichever row shares the parent's guid.
    """
    if not nodes:
        return Tree("[dim]No route[/dim]")

    tree = Tree(f"🗳️  {_node_label(nodes[0])}")
    branches: List[Tree] = [tree]

    for node in nodes[1:]:
        parent_index = node.parent_index
        if parent_index is None or parent_index >= len(branches):
            parent = tree
        else:
            parent = branches[parent_index]
        branches.append(parent.add(_node_label(node)))

    return tree


def format_flow(edges: Sequence[FlowEdge]) -> Table:
    table = Table(title="Vote Flow", show_lines=False)
    table.add_column("Hop", justify="right")
    table.add_column("From")
    table.add_column("To")
    table.add_column("Relay")
    table.add_column("Weight", justify="right")

    for edge in edges:
        table.add_row(
            str(edge.level), escape(_short(edge.source)), escape(_short(edge.target)),
            escape(edge.target_relay), str(edge.weight),
        )
    return table


def format_geo(route: GeoRoute) -> Group:
    markers = Table(title="Markers")
    markers.add_column("Hop", justify="right")
    markers.add_column("Node")
    markers.add_column("Lat", justify="right")
    markers.add_column("Long", justify="right")
    for marker in route.markers:
        markers.add_row(
            str(marker.hop), escape(marker.name or _short(marker.guid)),
            f"{marker.point.lat:.4f}", f"{marker.point.long:.4f}",
        )

    segments = Table(title="Segments")
    segments.add_column("Hop", justify="right")
    segments.add_column("From")
    segments.add_column("To")
    for segment in route.segments:
        segments.add_row(
            str(segment.hop),
            f"{segment.start.lat:.4f}, {segment.start.long:.4f}",
            f"{segment.end.lat:.4f}, {segment.end.long:.4f}",
        )

    center = route.center
    if center is None:
        return Group(markers, segments)
    caption = Text(f"Map center {center.lat:.4f}, {center.long:.4f}", style="dim")
    return Group(caption, markers, segments)


def format_route(result: RouteResult):
    """Header plus the renderable matching the request's graph style."""
    request = result.request
    header = Text.assemble(
        ("Vote Route", "bold"),
        f"  round {request.round}",
        f"  auth {request.auth}" if request.auth else "",
        f"\nwindow {result.window_start.isoformat()} → {result.window_end.isoformat()}",
        f"\n{len(result.records)} placement(s)",
    )

    payload = result.payload
    if isinstance(payload, GeoRoute):
        body = format_geo(payload)
    elif payload and isinstance(payload[0], FlowEdge):
        body = format_flow(payload)
    elif payload and isinstance(payload[0], TreeNode):
        body = format_tree(payload)
    else:
        body = Text("No hops reconstructed", style="dim")

    return Group(header, Text(""), body)


def format_popularity(summary: RoundSummary, shares: Sequence[AuthenticatorShare],
                      relay_counts: Sequence[RelayAuthCount]) -> Group:
    header = Text.assemble(
        (f"Round {summary.round}", "bold"),
        f"  {summary.relay_count} relays, {summary.auth_count} authenticators",
    )

    distribution = Table(title="Authenticators")
    distribution.add_column("Authenticator")
    distribution.add_column("Relays", justify="right")
    distribution.add_column("Share", justify="right")
    for share in shares:
        distribution.add_row(escape(share.auth), str(share.relays), f"{share.share:.1%}")

    relays = Table(title="Relays")
    relays.add_column("Relay")
    relays.add_column("Authenticators", justify="right")
    for count in relay_counts:
        relays.add_row(escape(count.relay), str(count.auth_count))

    return Group(header, distribution, relays)
