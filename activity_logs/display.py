"""
MODULE: activity_logs/display.py
PURPOSE: Display values for a single log record.

Provides:
- Local-time timestamp formatting (malformed input passes through as "Invalid Date")
- Status badge tone from the HTTP-ish status code
- Always-visible summary fields and expandable detail fields

Every optional field has a display fallback so rendering never fails on a
sparse record.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from .types import LogRecord

NOT_AVAILABLE = "N/A"
NO_MESSAGE = "No message"
INVALID_DATE = "Invalid Date"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# Status codes shown with a success badge; anything else present is a warning
SUCCESS_STATUS_CODES = {"OK", "Created"}


def format_timestamp(value: Optional[str]) -> str:
    """
    Render an ISO 8601 timestamp in the local timezone.

    Naive timestamps are shown as-is. Unparsable input is not an error:
    it renders as "Invalid Date".

    Example:
        >>> format_timestamp("2024-01-28T10:30:00")
        '2024-01-28 10:30:00'
    """
    if not value:
        return INVALID_DATE
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return INVALID_DATE
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone()
    return parsed.strftime(TIMESTAMP_FORMAT)


def status_tone(status_code: Optional[str]) -> Optional[str]:
    """Badge tone for a status code, or None when there is no badge."""
    if not status_code:
        return None
    return "success" if status_code in SUCCESS_STATUS_CODES else "warning"


def action_label(action: str) -> str:
    """Capitalize the first letter only ("write" -> "Write", "listKeys" -> "ListKeys")."""
    return action[:1].upper() + action[1:]


def _or_na(value: Optional[str]) -> str:
    return value or NOT_AVAILABLE


def record_summary(record: LogRecord) -> Dict[str, Any]:
    """Fields shown for every record, expanded or not."""
    props = record.properties
    return {
        "time": format_timestamp(record.timestamp),
        "status": _or_na(props.status_value),
        "status_code": props.status_code,
        "status_tone": status_tone(props.status_code),
        "ip_address": record.client_address,
        "message": props.message or NO_MESSAGE,
        "resource": _or_na(props.resource),
    }


def record_details(record: LogRecord) -> Dict[str, Any]:
    """Fields shown only after "View More"."""
    props = record.properties
    return {
        "caller": _or_na(record.caller),
        "event_id": _or_na(props.event_id),
        "hierarchy": _or_na(props.hierarchy),
        "subscription_id": _or_na(props.subscription_id),
        "http_request": _or_na(props.http_request),
        "resource_provider": _or_na(props.resource_provider_value),
        "submitted_at": (
            format_timestamp(props.submission_timestamp)
            if props.submission_timestamp
            else NOT_AVAILABLE
        ),
    }
