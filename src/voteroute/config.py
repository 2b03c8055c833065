"""
Global Configuration and Defaults.

This module centralizes the constants the route builder and the emitters
fall back to, and loads per-deployment overrides from a YAML file.
"""

import logging
from datetime import timedelta
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(".voteroute/config.yaml")

# --- Route Window ---
# Agreement step whose votes are traced (certification votes)
VOTE_STEP = 2

# Connection snapshots older than this before the vote are ignored
LOOKBACK_WINDOW = timedelta(hours=1)

# --- Geo Projection ---
# Range check applied to the stored `long` value before a point is placed
GEO_COORDINATE_BOUND = 90.0

DEFAULT_LOG_LEVEL = "WARNING"


class Settings(BaseModel):
    """Effective settings for one CLI invocation."""
    vote_step: int = VOTE_STEP
    lookback_minutes: int = int(LOOKBACK_WINDOW.total_seconds() // 60)
    geo_coordinate_bound: float = GEO_COORDINATE_BOUND
    log_level: str = DEFAULT_LOG_LEVEL

    model_config = ConfigDict(extra="ignore")

    @property
    def lookback(self) -> timedelta:
        return timedelta(minutes=self.lookback_minutes)


def load_settings(config_path: Path | None = None) -> Settings:
    """
    Load settings from YAML, falling back to defaults.

    A missing file is normal. An unreadable or invalid file is logged and
    ignored so a broken config never blocks a read-only view.
    """
    path = config_path or DEFAULT_CONFIG_PATH
    if not path.exists():
        return Settings()

    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError("top-level YAML value must be a mapping")
        return Settings.model_validate(data)
    except (OSError, yaml.YAMLError, ValueError, ValidationError) as e:
        logger.warning(f"Ignoring config {path}: {e}")
        return Settings()
