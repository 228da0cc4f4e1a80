"""API route modules."""

from .activity_logs import router as activity_logs_router

__all__ = ["activity_logs_router"]
