"""CLI command modules for voteroute."""

from . import popularity, route

__all__ = ["popularity", "route"]
