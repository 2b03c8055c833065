"""
CLI Utilities - Shared helper functions for command line operations.

This module provides common functionality used across the CLI commands,
including formatted printing, logging setup and snapshot loading.
"""

import logging
from pathlib import Path
from typing import Optional

import click

from ..config import Settings, load_settings
from ..core.exceptions import SnapshotNotFoundError
from ..telemetry.snapshot import TelemetrySnapshot, load_snapshot


def echo_error(message: str) -> None:
    """
    Print an error message with a red cross.

    Args:
        message (str): The error message to display.
    """
    click.echo(click.style(f"❌ {message}", fg="red"), err=True)


def echo_warning(message: str) -> None:
    """
    Print a warning message with a yellow alert symbol.

    Args:
        message (str): The warning message to display.
    """
    click.echo(click.style(f"⚠️  {message}", fg="yellow"))


def prepare_settings(config_path: Optional[str], verbose: bool) -> Settings:
    """
    Load settings and configure logging for a command run.

    `--verbose` always wins over the configured log level.
    """
    settings = load_settings(Path(config_path) if config_path else None)
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level.upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="[%X]",
    )
    logging.getLogger("voteroute").setLevel(level)
    return settings


def load_snapshot_or_report(snapshot_file: str) -> Optional[TelemetrySnapshot]:
    """
    Load a telemetry snapshot, printing a helpful error on failure.

    Args:
        snapshot_file (str): Path to a snapshot JSON file, or a directory
            containing telemetry.json.

    Returns:
        Optional[TelemetrySnapshot]: The snapshot, or None if loading failed.
    """
    try:
        return load_snapshot(snapshot_file)
    except SnapshotNotFoundError as e:
        echo_error(str(e))
        click.echo("Export the round's telemetry to JSON first (votes, connections, "
                   "relay_connections, authenticators).", err=True)
        return None
