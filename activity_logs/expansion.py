"""
MODULE: activity_logs/expansion.py
PURPOSE: Track which hierarchy nodes are expanded.

Two independent sets of path identifiers:
- expanded_groups: category and action nodes (one shared namespace)
- expanded_records: per-record "View More" disclosure

Every path starts collapsed. Toggling never cascades: collapsing a category
leaves its actions' and records' state untouched, so expanding it again
restores what was open before.
"""

from typing import Dict, List, Set


class ExpansionState:
    """Ephemeral expand/collapse state for one viewing session."""

    def __init__(self) -> None:
        self.expanded_groups: Set[str] = set()
        self.expanded_records: Set[str] = set()

    def toggle_group(self, path: str) -> bool:
        """Flip a category/action node. Returns the new expanded flag."""
        return _toggle(self.expanded_groups, path)

    def toggle_record(self, path: str) -> bool:
        """Flip a record node. Returns the new expanded flag."""
        return _toggle(self.expanded_records, path)

    def is_group_expanded(self, path: str) -> bool:
        return path in self.expanded_groups

    def is_record_expanded(self, path: str) -> bool:
        return path in self.expanded_records

    def reset(self) -> None:
        """Collapse everything (explicit re-initialization only)."""
        self.expanded_groups.clear()
        self.expanded_records.clear()

    def snapshot(self) -> Dict[str, List[str]]:
        return {
            "expanded_groups": sorted(self.expanded_groups),
            "expanded_records": sorted(self.expanded_records),
        }


def _toggle(paths: Set[str], path: str) -> bool:
    if path in paths:
        paths.remove(path)
        return False
    paths.add(path)
    return True
