# src/pothole_watch/services/__init__.py
"""Domain services for authentication, voting and report management."""

from .auth_service import AuthService
from .vote_ledger import VoteLedger, new_voter_id

__all__ = ["AuthService", "VoteLedger", "new_voter_id"]
