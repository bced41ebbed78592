# src/pothole_watch/main.py
"""Main entry point for the Pothole Watch application."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from pothole_watch.api.v1 import (
    auth_router,
    comments_router,
    reports_router,
    votes_router,
)
from pothole_watch.api.v1.dependencies import get_bootstrap_accounts, get_session_codec
from pothole_watch.api.v1.errors import register_exception_handlers
from pothole_watch.core.logging_config import configure_logging
from pothole_watch.core.settings import settings

configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Pothole Watch API",
    description="Citizen pothole reporting, voting and repair tracking",
    version=settings.app_version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Add GZip middleware for compression
app.add_middleware(GZipMiddleware)

register_exception_handlers(app)

# Include API routers
app.include_router(auth_router, prefix="/api/v1")
app.include_router(reports_router, prefix="/api/v1")
app.include_router(votes_router, prefix="/api/v1")
app.include_router(comments_router, prefix="/api/v1")


@app.on_event("startup")
async def on_startup() -> None:
    # Parse configuration eagerly so a bad secret or bootstrap list stops startup.
    get_session_codec()
    bootstrap = get_bootstrap_accounts()
    logger.info(
        "%s %s starting (%d bootstrap accounts, environment=%s)",
        settings.app_name,
        settings.app_version,
        len(bootstrap),
        settings.environment,
    )


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with basic information about the API."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": "Citizen pothole reporting API",
        "docs": "/docs",
        "redoc": "/redoc",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("pothole_watch.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
