"""
MODULE: activity_logs/types.py
PURPOSE: Core data types for the activity log explorer.

Contains:
- LogProperties: Sparse per-record detail fields
- LogRecord: One activity-log entry as delivered by the data source
- GroupedView: category -> action -> records mapping
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Mapping, Optional


# Wire names accepted for each property. The first name is the one written
# back by to_dict(); the rest are spellings the data source also uses.
PROPERTY_ALIASES: Dict[str, tuple] = {
    "event_category": ("eventCategory",),
    "message": ("message",),
    "status_value": ("statusValue", "activityStatusValue"),
    "resource": ("resource",),
    "status_code": ("statusCode",),
    "http_request": ("httpRequest",),
    "hierarchy": ("hierarchy",),
    "event_id": ("eventId", "eventDataId"),
    "subscription_id": ("subscriptionId",),
    "resource_provider_value": ("resourceProviderValue",),
    "submission_timestamp": ("submissionTimestamp", "eventSubmissionTimestamp"),
}


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return str(value)


def _pick(raw: Mapping[str, Any], *names: str) -> Optional[str]:
    """Return the first present value among the given wire names."""
    for name in names:
        if name in raw and raw[name] is not None:
            return _as_text(raw[name])
    return None


@dataclass(frozen=True)
class LogProperties:
    """Optional detail fields of a log record. Any of them may be None."""
    event_category: Optional[str] = None
    message: Optional[str] = None
    status_value: Optional[str] = None
    resource: Optional[str] = None
    status_code: Optional[str] = None
    http_request: Optional[str] = None
    hierarchy: Optional[str] = None
    event_id: Optional[str] = None
    subscription_id: Optional[str] = None
    resource_provider_value: Optional[str] = None
    submission_timestamp: Optional[str] = None

    @classmethod
    def from_dict(cls, raw: Any) -> "LogProperties":
        if not isinstance(raw, Mapping):
            return cls()
        values = {
            attr: _pick(raw, *names)
            for attr, names in PROPERTY_ALIASES.items()
        }
        return cls(**values)

    def to_dict(self) -> dict:
        out = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is not None:
                out[PROPERTY_ALIASES[f.name][0]] = value
        return out


@dataclass(frozen=True)
class LogRecord:
    """A single activity-log entry.

    Records are immutable and carry no identity of their own; they are
    addressed by their position inside a (category, action) bucket.

    Attributes:
        timestamp: ISO 8601 string, passed through unvalidated
        client_address: Free-form client IP / address
        caller: Identity that performed the operation
        properties: Sparse detail fields
    """
    timestamp: str = ""
    client_address: str = ""
    caller: str = ""
    properties: LogProperties = field(default_factory=LogProperties)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "LogRecord":
        """Build a record from a wire dict. Missing keys never raise."""
        return cls(
            timestamp=_pick(raw, "timestamp", "timeGenerated") or "",
            client_address=_pick(raw, "clientAddress", "clientIpAddress") or "",
            caller=_pick(raw, "caller") or "",
            properties=LogProperties.from_dict(raw.get("properties")),
        )

    def to_dict(self) -> dict:
        return {
            "timestamp": self.timestamp,
            "clientAddress": self.client_address,
            "caller": self.caller,
            "properties": self.properties.to_dict(),
        }


GroupedView = Dict[str, Dict[str, List[LogRecord]]]
