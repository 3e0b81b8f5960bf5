"""
Runtime settings.

Values come from environment variables, optionally loaded from the
project's .env file.
"""

import os
import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv
from pydantic import BaseModel

project_root = Path(__file__).parent.parent


class Settings(BaseModel):
    """Engine settings."""
    log_level: str = "INFO"
    stall_hours: float = 48  # No check-in for this long = stalled
    blocked_alert_hours: float = 24  # Blocked and untouched for this long
    alert_dedup_hours: float = 12  # Same alert type per member at most once per window
    roster_path: Optional[str] = None  # JSON roster file


def load_settings() -> Settings:
    """Read settings from the environment."""
    load_dotenv(project_root / ".env")

    return Settings(
        log_level=os.getenv("TEAMOPS_LOG_LEVEL", "INFO").upper(),
        stall_hours=float(os.getenv("TEAMOPS_STALL_HOURS", "48")),
        blocked_alert_hours=float(os.getenv("TEAMOPS_BLOCKED_ALERT_HOURS", "24")),
        alert_dedup_hours=float(os.getenv("TEAMOPS_ALERT_DEDUP_HOURS", "12")),
        roster_path=os.getenv("TEAMOPS_ROSTER_PATH") or None,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached settings for the running process."""
    return load_settings()


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Set up root logging for scripts and hosts embedding the engine."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
