"""
FastAPI application entrypoint for the activity log explorer.

This module provides a clean FastAPI app instance with NO import-time side
effects beyond logging setup. Sessions are created on demand by the API.

For local runs: uvicorn app:app --reload
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import os
import logging

from activity_logs.config import get_source_settings, is_dev_mode

# Configure logging (this is acceptable at import time - just sets up handlers)
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifecycle manager: report the configured source on startup."""
    settings = get_source_settings(force_reload=True)
    logger.info(
        "[Backend] Activity log source: %s (timeout=%ss, from %s)",
        settings.url, settings.timeout, settings.source,
    )

    yield

    from activity_logs.session import SESSIONS
    logger.info("[Backend] Shutting down, discarding %d session(s)", len(SESSIONS))
    SESSIONS.clear()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Safe to call multiple times (e.g., for testing).
    """
    is_dev = is_dev_mode()

    app = FastAPI(title="Activity Log Explorer", lifespan=lifespan)

    # Import routers (lazy import to avoid circular dependencies)
    from api.routes import activity_logs_router

    app.include_router(activity_logs_router)

    _configure_cors(app)
    _add_root_endpoint(app, is_dev)

    return app


def _configure_cors(app: FastAPI) -> None:
    """Configure CORS middleware based on environment."""
    raw_origins = os.getenv("ALLOWED_ORIGINS")

    if raw_origins:
        allowed_origins = [o.strip() for o in raw_origins.split(",") if o.strip()]
        # Remove "*" if present (causes crash with allow_credentials=True)
        if "*" in allowed_origins:
            allowed_origins = [o for o in allowed_origins if o != "*"]

        app.add_middleware(
            CORSMiddleware,
            allow_origins=allowed_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    else:
        # Dev default: any localhost port
        app.add_middleware(
            CORSMiddleware,
            allow_origin_regex=r"^https?://(localhost|127\.0\.0\.1|0\.0\.0\.0)(:\d+)?$",
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )


def _add_root_endpoint(app: FastAPI, is_dev: bool) -> None:
    """Add root health check endpoint."""

    @app.get("/")
    async def root():
        """Root health check endpoint.

        In dev mode, includes the source URL and open session count.
        """
        if is_dev:
            from activity_logs.session import SESSIONS

            return {
                "status": "Activity Log Explorer Running",
                "source_url": get_source_settings().url,
                "active_sessions": len(SESSIONS),
            }
        return {"status": "ok"}


# Create the default app instance
# This is what gets imported by uvicorn (e.g., uvicorn app:app)
app = create_app()
