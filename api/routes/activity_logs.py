"""
MODULE: api/routes/activity_logs.py
PURPOSE: Activity log explorer API endpoints.

ENDPOINTS:
    POST   /api/activity-logs/sessions                          - Create session and load logs
    GET    /api/activity-logs/sessions/{session_id}             - Current tree + expansion state
    POST   /api/activity-logs/sessions/{session_id}/refresh     - Reload logs from the source
    POST   /api/activity-logs/sessions/{session_id}/records     - Replace logs with posted records
    POST   /api/activity-logs/sessions/{session_id}/groups/toggle  - Toggle a category/action node
    POST   /api/activity-logs/sessions/{session_id}/records/toggle - Toggle a record's details
    POST   /api/activity-logs/sessions/{session_id}/reset       - Collapse everything
    DELETE /api/activity-logs/sessions/{session_id}             - Drop the session
    POST   /api/activity-logs/group                             - Stateless grouping of posted records

DESIGN:
- Sessions are in-memory only; expansion state is lost on restart
- A failed fetch leaves the session with an empty record list, not an error
"""

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from activity_logs.grouping import category_count, count_records, group_records
from activity_logs.session import SESSIONS, ActivityLogSession
from activity_logs.source import fetch_activity_logs, parse_records

logger = logging.getLogger(__name__)

router = APIRouter(tags=["activity-logs"])


# --- Request Models ---

class TogglePathRequest(BaseModel):
    """Path identifier of the node to toggle."""
    path: str = Field(..., min_length=1)


class RecordsRequest(BaseModel):
    """Raw log records in the data source's JSON shape."""
    records: List[Dict[str, Any]] = Field(default_factory=list)


# --- Helper Functions ---

def _get_session(session_id: str) -> ActivityLogSession:
    session = SESSIONS.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


# --- Route Handlers ---

@router.post("/api/activity-logs/sessions")
async def create_session():
    """
    Create a viewing session and load the current activity logs.

    Example response:
    {
        "session_id": "als_1a2b3c4d5e6f",
        "total": 3,
        "tree": [
            {"path": "category:Administrative", "name": "Administrative",
             "count": 2, "expanded": false, "actions": []}
        ],
        "state": {"expanded_groups": [], "expanded_records": []}
    }
    """
    session = SESSIONS.create()
    try:
        await session.refresh(fetch_activity_logs)
        return session.to_dict()
    except Exception as exc:
        logger.exception("Failed to create activity log session: %s", exc)
        SESSIONS.drop(session.session_id)
        raise HTTPException(status_code=500, detail="Failed to create session")


@router.get("/api/activity-logs/sessions/{session_id}")
async def get_session(session_id: str):
    """Current tree for the session, reflecting its expansion state."""
    return _get_session(session_id).to_dict()


@router.post("/api/activity-logs/sessions/{session_id}/refresh")
async def refresh_session(session_id: str):
    """Reload records from the source. Expansion state is kept."""
    session = _get_session(session_id)
    try:
        applied = await session.refresh(fetch_activity_logs)
    except Exception as exc:
        logger.exception("Failed to refresh activity log session %s: %s", session_id, exc)
        raise HTTPException(status_code=500, detail="Failed to refresh session")

    data = session.to_dict()
    data["applied"] = applied
    return data


@router.post("/api/activity-logs/sessions/{session_id}/records")
async def replace_records(session_id: str, request: RecordsRequest):
    """Replace the session's snapshot with the posted records."""
    session = _get_session(session_id)
    session.replace_records(parse_records(request.records))
    return session.to_dict()


@router.post("/api/activity-logs/sessions/{session_id}/groups/toggle")
async def toggle_group(session_id: str, request: TogglePathRequest):
    session = _get_session(session_id)
    expanded = session.state.toggle_group(request.path)
    return {"path": request.path, "expanded": expanded}


@router.post("/api/activity-logs/sessions/{session_id}/records/toggle")
async def toggle_record(session_id: str, request: TogglePathRequest):
    session = _get_session(session_id)
    expanded = session.state.toggle_record(request.path)
    return {"path": request.path, "expanded": expanded}


@router.post("/api/activity-logs/sessions/{session_id}/reset")
async def reset_session(session_id: str):
    """Collapse every node of the session (records are kept)."""
    session = _get_session(session_id)
    session.reset()
    return session.to_dict()


@router.delete("/api/activity-logs/sessions/{session_id}")
async def delete_session(session_id: str):
    if not SESSIONS.drop(session_id):
        raise HTTPException(status_code=404, detail="Session not found")
    return {"deleted": True, "session_id": session_id}


@router.post("/api/activity-logs/group")
async def group_posted_records(request: RecordsRequest):
    """
    Group posted records without creating a session.

    Example response:
    {
        "total": 3,
        "categories": {"Administrative": {"count": 2, "actions": {"write": [...]}}}
    }
    """
    view = group_records(parse_records(request.records))
    return {
        "total": count_records(view),
        "categories": {
            category: {
                "count": category_count(actions),
                "actions": {
                    action: [record.to_dict() for record in records]
                    for action, records in actions.items()
                },
            }
            for category, actions in view.items()
        },
    }
