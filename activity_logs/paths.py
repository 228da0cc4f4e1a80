"""
Path identifiers for nodes of the category -> action -> record hierarchy.

Paths are plain strings built only from the category name, the action name
and the record's position within its bucket, so re-rendering the same data
yields the same keys. A record that moves to another bucket gets a new path.

Names are percent-encoded before joining, so a category literally named
"A|action:b" cannot collide with the action node ("A", "b").
"""

from urllib.parse import quote

CATEGORY_PREFIX = "category:"
ACTION_PREFIX = "action:"
RECORD_PREFIX = "record:"
PATH_SEPARATOR = "|"


def _escape(name: str) -> str:
    return quote(name, safe="")


def category_path(category: str) -> str:
    return f"{CATEGORY_PREFIX}{_escape(category)}"


def action_path(category: str, action: str) -> str:
    return f"{category_path(category)}{PATH_SEPARATOR}{ACTION_PREFIX}{_escape(action)}"


def record_path(category: str, action: str, index: int) -> str:
    return f"{action_path(category, action)}{PATH_SEPARATOR}{RECORD_PREFIX}{index}"
