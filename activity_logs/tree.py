"""
MODULE: activity_logs/tree.py
PURPOSE: Build the drill-down view model from a grouped view and expansion state.

Children of a collapsed node are left out of the model; their own expansion
state is untouched and reappears once the ancestor is expanded again.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .display import action_label, record_details, record_summary
from .expansion import ExpansionState
from .grouping import category_count
from .paths import action_path, category_path, record_path
from .types import GroupedView


@dataclass
class RecordNode:
    """One log record row.

    Attributes:
        path: Record path identifier (for toggle_record)
        index: Position inside its action bucket
        summary: Always-visible fields
        expanded: Whether "View More" is open
        details: Extra fields, only present when expanded
    """
    path: str
    index: int
    summary: Dict[str, Any]
    expanded: bool = False
    details: Optional[Dict[str, Any]] = None

    def to_dict(self) -> dict:
        return {
            "path": self.path,
            "index": self.index,
            "summary": self.summary,
            "expanded": self.expanded,
            "details": self.details,
        }


@dataclass
class ActionNode:
    path: str
    name: str
    label: str
    count: int
    expanded: bool = False
    records: List[RecordNode] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "path": self.path,
            "name": self.name,
            "label": self.label,
            "count": self.count,
            "expanded": self.expanded,
            "records": [r.to_dict() for r in self.records],
        }


@dataclass
class CategoryNode:
    path: str
    name: str
    count: int
    expanded: bool = False
    actions: List[ActionNode] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "path": self.path,
            "name": self.name,
            "count": self.count,
            "expanded": self.expanded,
            "actions": [a.to_dict() for a in self.actions],
        }


def build_tree(view: GroupedView, state: ExpansionState) -> List[CategoryNode]:
    """
    Walk the grouped view in order and decide disclosure at each level.

    Args:
        view: Output of group_records()
        state: Expansion state of the current session (read only)

    Returns:
        Category nodes in first-occurrence order
    """
    categories: List[CategoryNode] = []

    for category, actions in view.items():
        cat_path = category_path(category)
        node = CategoryNode(
            path=cat_path,
            name=category,
            count=category_count(actions),
            expanded=state.is_group_expanded(cat_path),
        )
        if node.expanded:
            node.actions = [
                _build_action(category, action, records, state)
                for action, records in actions.items()
            ]
        categories.append(node)

    return categories


def _build_action(category, action, records, state: ExpansionState) -> ActionNode:
    path = action_path(category, action)
    node = ActionNode(
        path=path,
        name=action,
        label=action_label(action),
        count=len(records),
        expanded=state.is_group_expanded(path),
    )
    if not node.expanded:
        return node

    for index, record in enumerate(records):
        rec_path = record_path(category, action, index)
        expanded = state.is_record_expanded(rec_path)
        node.records.append(RecordNode(
            path=rec_path,
            index=index,
            summary=record_summary(record),
            expanded=expanded,
            details=record_details(record) if expanded else None,
        ))
    return node
