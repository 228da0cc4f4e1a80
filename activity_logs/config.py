"""
Activity log source configuration.

Settings come from environment variables, falling back to defaults that
match a local development backend:

- ACTIVITY_LOG_SOURCE_URL: endpoint returning the JSON list of log records
- ACTIVITY_LOG_TIMEOUT: request timeout in seconds
- ENV: "dev" / "development" / "local" enables dev mode
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_SOURCE_URL = "http://localhost:5071/activity-logs"
DEFAULT_TIMEOUT = 10.0


@dataclass
class SourceSettings:
    """Where and how to fetch the raw activity log list."""
    url: str
    timeout: float
    source: str  # "environment" or "default"


_cached_settings: Optional[SourceSettings] = None


def _read_timeout() -> float:
    raw = os.getenv("ACTIVITY_LOG_TIMEOUT")
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        logger.warning("Ignoring invalid ACTIVITY_LOG_TIMEOUT=%r, using %s", raw, DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT
    if timeout <= 0:
        logger.warning("ACTIVITY_LOG_TIMEOUT must be positive, using %s", DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT
    return timeout


def get_source_settings(*, force_reload: bool = False) -> SourceSettings:
    """
    Get the current source configuration.

    Args:
        force_reload: If True, bypass the cache and re-read the environment

    Returns:
        SourceSettings for the activity log endpoint
    """
    global _cached_settings

    if _cached_settings is not None and not force_reload:
        return _cached_settings

    url = os.getenv("ACTIVITY_LOG_SOURCE_URL", "").strip()
    has_env = bool(url) or bool(os.getenv("ACTIVITY_LOG_TIMEOUT"))

    _cached_settings = SourceSettings(
        url=url or DEFAULT_SOURCE_URL,
        timeout=_read_timeout(),
        source="environment" if has_env else "default",
    )
    return _cached_settings


def clear_settings_cache() -> None:
    """Clear the cached settings. Call after changing the environment."""
    global _cached_settings
    _cached_settings = None


def is_dev_mode() -> bool:
    """Check if running in development mode. Does NOT mutate environment."""
    env_value = os.getenv("ENV", "prod").lower()
    return env_value in ("dev", "development", "local")
