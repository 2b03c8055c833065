"""
Projection emitters.

Each emitter is a thin adapter from reconstruction output to the data
shape one chart type draws:
- tree: org-chart rows with parent pointers
- flow: weighted edge list for flow diagrams
- geo: map markers and polyline segments
"""

from typing import Any, Sequence

from ..config import GEO_COORDINATE_BOUND
from ..core.types import GraphStyle, PropagationRecord
from .flow import FlowEdge, emit_flow
from .geo import GeoMarker, GeoRoute, GeoSegment, emit_geo
from .tree import TreeNode, emit_tree


def project(records: Sequence[PropagationRecord], style: GraphStyle,
            geo_bound: float = GEO_COORDINATE_BOUND) -> Any:
    """Dispatch to the emitter for `style`."""
    if style == GraphStyle.TREE:
        return emit_tree(records)
    if style == GraphStyle.FLOW:
        return emit_flow(records)
    if style == GraphStyle.GEO:
        return emit_geo(records, bound=geo_bound)
    raise ValueError(f"Unsupported graph style: {style!r}")


def payload_to_data(payload: Any) -> Any:
    """Plain JSON-ready form of any projection payload."""
    if isinstance(payload, GeoRoute):
        return payload.model_dump(mode="json")
    if isinstance(payload, list):
        return [item.model_dump(mode="json") for item in payload]
    return payload


__all__ = [
    "project", "payload_to_data",
    "TreeNode", "emit_tree",
    "FlowEdge", "emit_flow",
    "GeoMarker", "GeoSegment", "GeoRoute", "emit_geo",
]
