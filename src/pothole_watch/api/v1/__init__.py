# src/pothole_watch/api/v1/__init__.py
"""Version 1 API endpoints."""

from .endpoints import (
    auth_router,
    comments_router,
    reports_router,
    votes_router,
)

__all__ = [
    "auth_router",
    "comments_router",
    "reports_router",
    "votes_router",
]
