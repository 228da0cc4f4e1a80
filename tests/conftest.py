"""Pytest configuration for activity log explorer tests."""

import sys
from pathlib import Path

import pytest

# Ensure project root is on PYTHONPATH
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from activity_logs.config import clear_settings_cache
from activity_logs.session import SESSIONS


@pytest.fixture(autouse=True)
def _isolate_globals():
    """Fresh session store and settings cache for every test."""
    SESSIONS.clear()
    clear_settings_cache()
    yield
    SESSIONS.clear()
    clear_settings_cache()


@pytest.fixture
def raw_logs():
    """Three records as the log service returns them."""
    return [
        {
            "timeGenerated": "2024-01-28T10:30:00",
            "clientIpAddress": "10.0.0.1",
            "caller": "alice@example.com",
            "properties": {
                "eventCategory": "Administrative",
                "message": "Microsoft.Compute/virtualMachines/write",
                "activityStatusValue": "Succeeded",
                "statusCode": "OK",
                "resource": "vm-01",
                "eventDataId": "evt-1",
            },
        },
        {
            "timeGenerated": "2024-01-28T10:31:00",
            "clientIpAddress": "10.0.0.2",
            "caller": "bob@example.com",
            "properties": {
                "eventCategory": "Administrative",
                "message": "Microsoft.Storage/storageAccounts/write",
                "statusCode": "Conflict",
            },
        },
        {
            "timeGenerated": "2024-01-28T10:32:00",
            "clientIpAddress": "10.0.0.3",
            "caller": "carol@example.com",
            "properties": {},
        },
    ]
