"""
FastAPI application factory and API package.

Run with:
    uvicorn archgen.api:app --reload --port 8000

Or via main.py:
    python -m archgen --serve
"""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from archgen.config import get_settings
from archgen.api.routes import architecture_router, compose_router, health_router

logger = logging.getLogger(__name__)

FRONTEND_DIR = Path(__file__).resolve().parent.parent.parent / "frontend"


def create_app(frontend_dir: Path = FRONTEND_DIR) -> FastAPI:
    """Application factory — create and configure the FastAPI instance."""
    settings = get_settings()

    application = FastAPI(
        title="ArchitectureGen API",
        description="Generates architecture documents and diagrams from system requirements",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # CORS — allow the frontend (adjust origins in production)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(health_router, tags=["Health"])
    application.include_router(architecture_router, prefix="/api/architecture", tags=["Architecture"])
    application.include_router(compose_router, prefix="/api/compose", tags=["Compose"])

    # Serve the requirements form
    if frontend_dir.exists():
        application.mount("/static", StaticFiles(directory=str(frontend_dir)), name="static")

        @application.get("/", include_in_schema=False)
        async def serve_frontend():
            return FileResponse(str(frontend_dir / "index.html"))

    logger.info(f"{settings.app_name} API ready (frontend: {frontend_dir.exists()})")
    return application


# Module-level instance for `uvicorn archgen.api:app`
app = create_app()
