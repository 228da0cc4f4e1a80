"""
MODULE: activity_logs/__init__.py
PURPOSE: Activity log explorer - drill-down grouping and expansion tracking.

Provides:
- Grouping of flat activity-log records into category -> action buckets
- Independent expand/collapse state for group nodes and record rows
- A view model combining both for rendering
- Retrieval of the raw record list from the log service

DESIGN DECISIONS:
- Grouped view is a pure function of the latest snapshot (never cached)
- Nodes are addressed by positional path strings, not record identity
- Collapsing a node does not clear its descendants' state
- Expansion state is per session and never persisted
"""

from .types import LogRecord, LogProperties, GroupedView
from .grouping import (
    group_records,
    category_of,
    action_of,
    count_records,
    UNCATEGORIZED,
    OTHER_ACTION,
)
from .paths import category_path, action_path, record_path
from .expansion import ExpansionState
from .tree import build_tree, CategoryNode, ActionNode, RecordNode
from .session import ActivityLogSession, SessionStore, SESSIONS

__all__ = [
    # Types
    "LogRecord",
    "LogProperties",
    "GroupedView",
    # Grouping
    "group_records",
    "category_of",
    "action_of",
    "count_records",
    "UNCATEGORIZED",
    "OTHER_ACTION",
    # Paths
    "category_path",
    "action_path",
    "record_path",
    # Expansion state
    "ExpansionState",
    # View model
    "build_tree",
    "CategoryNode",
    "ActionNode",
    "RecordNode",
    # Sessions
    "ActivityLogSession",
    "SessionStore",
    "SESSIONS",
]
