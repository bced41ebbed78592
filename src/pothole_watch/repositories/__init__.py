"""Data access wrappers around SQLAlchemy sessions."""

from .report_repo import ReportRepository
from .user_repo import CredentialStore

__all__ = ["CredentialStore", "ReportRepository"]
