"""
voteroute - Vote propagation path reconstruction.

Rebuilds how a consensus vote spread hop by hop through the relay mesh,
from the connection telemetry observed around it, and emits the route as
a tree, a flow diagram or a geographic route.

Key Components:
- core: Telemetry models and the path reconstructor
- projections: Tree, flow and geo emitters
- telemetry: Snapshot loading and request-level route building
- analysis: Authenticator popularity per round

Usage:
    from voteroute import ConnectionEdge, OriginObservation, reconstruct

    records = reconstruct(edges, OriginObservation(guid="n1"), seen_relays)
"""

__version__ = "0.1.0"

from .core.exceptions import InvalidInput, VoteRouteError
from .core.reconstruct import reconstruct
from .core.types import (
    ConnectionEdge, Coordinates, GraphStyle, OriginObservation, PropagationRecord,
)

__all__ = [
    "__version__",
    "ConnectionEdge",
    "Coordinates",
    "GraphStyle",
    "OriginObservation",
    "PropagationRecord",
    "reconstruct",
    "InvalidInput",
    "VoteRouteError",
]
