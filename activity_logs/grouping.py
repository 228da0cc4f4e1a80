"""
MODULE: activity_logs/grouping.py
PURPOSE: Partition a flat list of log records into category -> action buckets.

Category comes from properties.event_category, action from the last
"/"-separated segment of properties.message. Records missing either field
land in the fallback buckets instead of being dropped.

DESIGN NOTES:
- Pure function of the input snapshot; recomputed on every read, never cached
- Buckets are created lazily in first-occurrence order
- Records keep their input order inside a bucket
"""

from typing import Dict, Iterable, List

from .types import GroupedView, LogRecord

UNCATEGORIZED = "Uncategorized"
OTHER_ACTION = "other"
MESSAGE_SEPARATOR = "/"


def category_of(record: LogRecord) -> str:
    """Return the top-level grouping key for a record."""
    return record.properties.event_category or UNCATEGORIZED


def action_of(record: LogRecord) -> str:
    """Return the second-level grouping key for a record.

    Example:
        >>> action_of(LogRecord.from_dict({"properties": {"message": "Microsoft.Compute/virtualMachines/write"}}))
        'write'
    """
    message = record.properties.message
    if not message:
        return OTHER_ACTION
    # "a/" and "/" end in an empty segment, which counts as absent
    return message.split(MESSAGE_SEPARATOR)[-1] or OTHER_ACTION


def group_records(records: Iterable[LogRecord]) -> GroupedView:
    """
    Group records by category, then by action.

    Args:
        records: Ordered snapshot of log records (may be empty)

    Returns:
        Nested dict {category: {action: [records...]}}. Every input record
        appears exactly once.
    """
    grouped: GroupedView = {}
    for record in records:
        actions = grouped.setdefault(category_of(record), {})
        actions.setdefault(action_of(record), []).append(record)
    return grouped


def category_count(actions: Dict[str, List[LogRecord]]) -> int:
    """Number of records across all actions of one category."""
    return sum(len(bucket) for bucket in actions.values())


def count_records(view: GroupedView) -> int:
    return sum(category_count(actions) for actions in view.values())
