"""Command line interface for voteroute."""
