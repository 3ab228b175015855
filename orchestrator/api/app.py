"""FastAPI application factory."""

import logging
from typing import Dict

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..config import settings
from ..version import __version__
from .routers import filesystem, organize

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    app = FastAPI(
        title="Orchestrator API",
        description="Rule-based workspace organizer",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    app.include_router(filesystem.router)
    app.include_router(organize.router)

    @app.get("/api/health")
    def health_check() -> Dict[str, str]:
        return {"status": "ok", "version": __version__}

    logger.debug("Orchestrator API created")
    return app


# Create app instance for uvicorn
app = create_app()
