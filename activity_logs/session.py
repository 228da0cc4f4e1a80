"""
MODULE: activity_logs/session.py
PURPOSE: Per-viewer session holding the latest record snapshot and expansion state.

DESIGN:
- The snapshot is replaced atomically; the grouped view is derived from it on
  every read rather than stored
- Expansion state survives data refreshes; only reset() clears it
- Each load gets a generation token. A load that finishes after a newer one
  has started is discarded instead of overwriting fresher data
"""

import logging
import uuid
from typing import Awaitable, Callable, Dict, Iterable, List, Optional, Tuple

from .expansion import ExpansionState
from .grouping import count_records, group_records
from .tree import CategoryNode, build_tree
from .types import GroupedView, LogRecord

logger = logging.getLogger(__name__)

Fetcher = Callable[[], Awaitable[List[LogRecord]]]


class ActivityLogSession:
    """Records snapshot + expansion state for one viewer."""

    def __init__(self, session_id: Optional[str] = None) -> None:
        self.session_id = session_id or f"als_{uuid.uuid4().hex[:12]}"
        self.state = ExpansionState()
        self._records: Tuple[LogRecord, ...] = ()
        self._generation = 0

    @property
    def records(self) -> Tuple[LogRecord, ...]:
        return self._records

    @property
    def view(self) -> GroupedView:
        return group_records(self._records)

    def begin_load(self) -> int:
        """Start a load and return its token. Supersedes any load in flight."""
        self._generation += 1
        return self._generation

    def apply_load(self, token: int, records: Iterable[LogRecord]) -> bool:
        """
        Install a finished load's snapshot if it is still the latest.

        Returns:
            True if applied, False if a newer load was started meanwhile
        """
        if token != self._generation:
            logger.info(
                "Discarding stale activity log load %d for session %s (latest is %d)",
                token, self.session_id, self._generation,
            )
            return False
        self._records = tuple(records)
        return True

    def replace_records(self, records: Iterable[LogRecord]) -> None:
        self.apply_load(self.begin_load(), records)

    async def refresh(self, fetch: Fetcher) -> bool:
        """Fetch a new snapshot and apply it unless superseded while awaiting."""
        token = self.begin_load()
        records = await fetch()
        return self.apply_load(token, records)

    def reset(self) -> None:
        self.state.reset()

    def tree(self) -> List[CategoryNode]:
        return build_tree(self.view, self.state)

    def to_dict(self) -> dict:
        view = self.view
        return {
            "session_id": self.session_id,
            "total": count_records(view),
            "tree": [node.to_dict() for node in build_tree(view, self.state)],
            "state": self.state.snapshot(),
        }


class SessionStore:
    """In-memory session registry. Nothing is persisted."""

    def __init__(self) -> None:
        self._sessions: Dict[str, ActivityLogSession] = {}

    def create(self) -> ActivityLogSession:
        session = ActivityLogSession()
        self._sessions[session.session_id] = session
        logger.info("Created activity log session %s", session.session_id)
        return session

    def get(self, session_id: str) -> Optional[ActivityLogSession]:
        return self._sessions.get(session_id)

    def drop(self, session_id: str) -> bool:
        removed = self._sessions.pop(session_id, None)
        if removed is not None:
            logger.info("Dropped activity log session %s", session_id)
        return removed is not None

    def clear(self) -> None:
        self._sessions.clear()

    def __len__(self) -> int:
        return len(self._sessions)


# Process-wide store used by the API routes
SESSIONS = SessionStore()
