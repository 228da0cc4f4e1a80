"""
MODULE: activity_logs/source.py
PURPOSE: Retrieve the raw activity log list from the backing service.

The service returns a JSON array of log records. Any failure (transport
error, non-2xx status, bad JSON, wrong shape) is logged and treated as an
empty list: the explorer shows no data rather than partial data.
"""

import logging
from typing import Any, List, Optional

import httpx

from .config import SourceSettings, get_source_settings
from .types import LogRecord

logger = logging.getLogger(__name__)


def parse_records(payload: Any) -> List[LogRecord]:
    """
    Convert a decoded JSON payload into LogRecords.

    Args:
        payload: Expected to be a list of dicts

    Returns:
        Records in payload order. Non-dict items are skipped; a non-list
        payload yields an empty list.
    """
    if not isinstance(payload, list):
        logger.error("Activity log payload is not a list (got %s)", type(payload).__name__)
        return []

    records = []
    for position, item in enumerate(payload):
        if not isinstance(item, dict):
            logger.warning("Skipping activity log item %d: not an object", position)
            continue
        records.append(LogRecord.from_dict(item))
    return records


async def fetch_activity_logs(
    settings: Optional[SourceSettings] = None,
    *,
    client: Optional[httpx.AsyncClient] = None,
) -> List[LogRecord]:
    """
    GET the configured endpoint and parse the records.

    Args:
        settings: Source settings (defaults to get_source_settings())
        client: Optional shared client; a short-lived one is created otherwise

    Returns:
        Parsed records, or [] on any retrieval failure
    """
    settings = settings or get_source_settings()

    try:
        if client is not None:
            response = await client.get(settings.url, timeout=settings.timeout)
        else:
            async with httpx.AsyncClient(timeout=settings.timeout) as owned:
                response = await owned.get(settings.url)
        response.raise_for_status()
        payload = response.json()
    except httpx.HTTPStatusError as exc:
        logger.error(
            "Activity log source %s returned HTTP %s",
            settings.url, exc.response.status_code,
        )
        return []
    except httpx.HTTPError as exc:
        logger.error("Failed to fetch activity logs from %s: %s", settings.url, exc)
        return []
    except ValueError as exc:
        logger.error("Activity log source %s returned invalid JSON: %s", settings.url, exc)
        return []

    records = parse_records(payload)
    logger.info("Fetched %d activity log records from %s", len(records), settings.url)
    return records
