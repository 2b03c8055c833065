"""
Exception hierarchy for voteroute.

Reconstruction favours a degraded picture over a failure, so only a
missing origin is fatal. `UnresolvedReference` exists to describe lookups
that degraded to an empty annotation in the logs; it is never raised out
of the core.
"""


class VoteRouteError(Exception):
    """Base class for all voteroute errors."""


class InvalidInput(VoteRouteError):
    """No origin observation could be resolved for the requested route."""

    def __init__(self, message: str = "No origin observation for route"):
        super().__init__(message)
        self.message = message


class UnresolvedReference(VoteRouteError):
    """A node or relay name could not be matched against the edge pool."""

    def __init__(self, guid: str, side: str):
        super().__init__(f"No relay name resolvable for {side} node {guid!r}")
        self.guid = guid
        self.side = side


class SnapshotNotFoundError(VoteRouteError):
    """The telemetry snapshot file is missing or unreadable."""

    def __init__(self, path: str, reason: str = "not found"):
        super().__init__(f"Telemetry snapshot {reason}: {path}")
        self.path = path
        self.reason = reason
