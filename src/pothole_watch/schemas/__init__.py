# src/pothole_watch/schemas/__init__.py
"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .auth import AuthResponse, LoginRequest, MeResponse, SessionUserResponse, SignupRequest
from .comment import CommentCreate, CommentResponse
from .report import (
    LeaderboardEntry,
    ReportCreate,
    ReportListResponse,
    ReportResponse,
    StatusUpdate,
)
from .vote import VoteCreate

__all__ = [
    "AuthResponse", "LoginRequest", "MeResponse", "SessionUserResponse", "SignupRequest",
    "CommentCreate", "CommentResponse",
    "LeaderboardEntry", "ReportCreate", "ReportListResponse", "ReportResponse", "StatusUpdate",
    "VoteCreate",
]
