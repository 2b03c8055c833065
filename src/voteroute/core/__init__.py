"""
Core modules for voteroute.

This package contains the fundamental building blocks:
- types: Telemetry and output models (ConnectionEdge, PropagationRecord, ...)
- pool: Consumable, order-preserving edge pool
- reconstruct: Vote propagation path reconstruction
- result: Ok/Err result type for request-level operations
"""

from .exceptions import (
    InvalidInput, SnapshotNotFoundError, UnresolvedReference, VoteRouteError,
)
from .pool import EdgePool
from .reconstruct import PathReconstructor, reconstruct, resolve_relay_names
from .result import Err, Ok, Result
from .types import (
    ConnectionEdge, Coordinates, GraphStyle, OriginObservation, PropagationRecord,
)

__all__ = [
    # Types
    "ConnectionEdge", "Coordinates", "GraphStyle",
    "OriginObservation", "PropagationRecord",
    # Reconstruction
    "EdgePool", "PathReconstructor", "reconstruct", "resolve_relay_names",
    # Errors
    "VoteRouteError", "InvalidInput", "UnresolvedReference",
    "SnapshotNotFoundError", "Ok", "Err", "Result",
]
