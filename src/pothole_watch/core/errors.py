"""Application error taxonomy.

Every error carries the HTTP status it maps to. Handlers registered in
``pothole_watch.main`` render them as ``{"error": message}`` bodies.
"""

from __future__ import annotations

from fastapi import status


class AppError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    """Bad input shape or length."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class Unauthorized(AppError):
    """Missing, invalid or expired session."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Authentication required"


class Forbidden(AppError):
    """Authenticated, but the role does not allow the action."""

    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden"


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class ConflictError(AppError):
    """Uniqueness violation: duplicate username or duplicate vote."""

    status_code = status.HTTP_409_CONFLICT
    default_message = "Conflict"


class DuplicateVote(ConflictError):
    default_message = "You already voted on this report."


class DependencyError(AppError):
    """The store is unreachable or misconfigured.

    The message is logged but never sent to the client.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"


class ConfigurationError(RuntimeError):
    """Raised at startup when environment configuration is unusable."""
