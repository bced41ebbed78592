# src/pothole_watch/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .auth import router as auth_router
from .comments import router as comments_router
from .reports import router as reports_router
from .votes import router as votes_router

__all__ = [
    "auth_router",
    "comments_router",
    "reports_router",
    "votes_router",
]
