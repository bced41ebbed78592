# src/pothole_watch/models/__init__.py
"""SQLAlchemy models for the Pothole Watch application."""

from .comment import ReportComment
from .report import Report
from .user import AppUser
from .vote import ReportVote

__all__ = [
    "AppUser",
    "Report",
    "ReportComment",
    "ReportVote",
]
