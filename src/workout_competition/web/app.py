"""FastAPI application for workout-competition."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from .. import __version__
from ..config import configure_logging
from ..db.engine import get_db_path, init_db
from .routers import auth, dashboard, leaderboard, workouts

log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler - runs on startup and shutdown."""
    # Startup: Initialize database
    db_path = app.state.db_path
    if not db_path.exists():
        await init_db(db_path)
    log.info("Serving workouts from %s", db_path)
    yield


def create_app(db_path: Path | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    configure_logging()

    app = FastAPI(
        title="workout-competition",
        description="Log workouts and compete on percentage improvement",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.db_path = db_path or get_db_path()

    # Include routers
    app.include_router(auth.router)
    app.include_router(workouts.router)
    app.include_router(leaderboard.router)
    app.include_router(dashboard.router)

    @app.get("/")
    async def root():
        """Root redirect to the dashboard."""
        return RedirectResponse(url="/dashboard", status_code=302)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app
