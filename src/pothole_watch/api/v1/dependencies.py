"""Shared API dependencies for authentication and common functionality."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from pothole_watch.core.bootstrap import BootstrapAccounts
from pothole_watch.core.session_tokens import SessionTokenCodec, SessionUser
from pothole_watch.core.settings import settings
from pothole_watch.db.session import get_db
from pothole_watch.repositories.user_repo import CredentialStore
from pothole_watch.services.auth_service import AuthService

from .cookies import read_session_token

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


@lru_cache(maxsize=1)
def get_bootstrap_accounts() -> BootstrapAccounts:
    """Return the process-wide bootstrap accounts, parsed on first use."""
    return BootstrapAccounts.from_json(settings.bootstrap_users_json)


@lru_cache(maxsize=1)
def get_session_codec() -> SessionTokenCodec:
    """Return the session token codec keyed with the configured secret."""
    return SessionTokenCodec(settings.session_secret, ttl_seconds=settings.session_ttl_seconds)


BootstrapDep = Annotated[BootstrapAccounts, Depends(get_bootstrap_accounts)]
CodecDep = Annotated[SessionTokenCodec, Depends(get_session_codec)]


def get_auth_service(db: SessionDep, bootstrap: BootstrapDep, codec: CodecDep) -> AuthService:
    """Build a request-scoped auth service."""
    return AuthService(CredentialStore(db), bootstrap, codec)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]


def get_session_token(request: Request) -> str | None:
    """Return the raw session cookie value, if present."""
    return read_session_token(request)


SessionTokenDep = Annotated[str | None, Depends(get_session_token)]


def get_optional_user(token: SessionTokenDep, codec: CodecDep) -> SessionUser | None:
    """Return the signed-in user, or None for anonymous requests."""
    return codec.decode(token)


def get_current_user(token: SessionTokenDep, auth: AuthServiceDep) -> SessionUser:
    """Get the current authenticated user from the session cookie.

    Raises:
        Unauthorized: If the cookie is missing, forged or expired.
    """
    return auth.require_authenticated(token)


def get_superadmin(token: SessionTokenDep, auth: AuthServiceDep) -> SessionUser:
    """Get the current user and insist on the superadmin role.

    Raises:
        Unauthorized: If there is no valid session.
        Forbidden: If the user is not a superadmin.
    """
    return auth.require_superadmin(token)


OptionalUserDep = Annotated[SessionUser | None, Depends(get_optional_user)]
CurrentUserDep = Annotated[SessionUser, Depends(get_current_user)]
SuperAdminDep = Annotated[SessionUser, Depends(get_superadmin)]
