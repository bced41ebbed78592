"""Registration, login and authorization checks."""

from __future__ import annotations

import logging

from pothole_watch.core.bootstrap import BootstrapAccounts
from pothole_watch.core.errors import ConflictError, Forbidden, Unauthorized, ValidationError
from pothole_watch.core.passwords import (
    DUMMY_HASH,
    hash_password,
    safe_equal_text,
    verify_password,
)
from pothole_watch.core.session_tokens import SessionTokenCodec, SessionUser
from pothole_watch.repositories.user_repo import CredentialStore

logger = logging.getLogger(__name__)

MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 6


class AuthService:
    """Orchestrates the credential store, bootstrap accounts and session codec.

    Instances are request-scoped: nothing read from the store is kept past
    the request that created the service.
    """

    def __init__(
        self,
        store: CredentialStore,
        bootstrap: BootstrapAccounts,
        codec: SessionTokenCodec,
    ) -> None:
        self.store = store
        self.bootstrap = bootstrap
        self.codec = codec

    def register(
        self,
        username: str,
        password: str,
        display_name: str | None = None,
    ) -> SessionUser:
        """Create a ``user``-role account and return its public profile.

        Raises:
            ValidationError: If the username or password is too short.
            ConflictError: If the username is already taken.
        """
        username = username.strip()
        if len(username) < MIN_USERNAME_LENGTH:
            raise ValidationError(
                f"Username must be at least {MIN_USERNAME_LENGTH} characters"
            )
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )

        if username in self.bootstrap or self.store.find_by_username(username) is not None:
            raise ConflictError("Username is already taken")

        display_name = (display_name or "").strip() or None
        row = self.store.create(
            username=username,
            password_hash=hash_password(password),
            role="user",
            display_name=display_name,
        )
        logger.info("Registered user %s", row.username)
        return SessionUser(
            username=row.username,
            role="superadmin" if row.role == "superadmin" else "user",
            display_name=row.display_name,
        )

    def login(self, username: str, password: str) -> SessionUser | None:
        """Verify credentials; None on any mismatch.

        Bootstrap accounts are checked first with a plain constant-time
        comparison, then the store with hashed verification. An unknown
        username costs the same Argon2 derivation as a known one.
        """
        username = username.strip()

        account = self.bootstrap.find(username)
        if account is not None:
            if not safe_equal_text(account.password, password):
                logger.info("Failed login for %s", username)
                return None
            return SessionUser(
                username=account.username,
                role=account.role,
                display_name=account.display_name,
            )

        row = self.store.find_by_username(username)
        if row is None:
            verify_password(password, DUMMY_HASH)
            logger.info("Failed login for %s", username)
            return None
        if not verify_password(password, row.password_hash):
            logger.info("Failed login for %s", username)
            return None

        return SessionUser(
            username=row.username,
            role="superadmin" if row.role == "superadmin" else "user",
            display_name=row.display_name,
        )

    def issue_token(self, user: SessionUser) -> str:
        return self.codec.encode(user)

    def session_from_token(self, token: str | None) -> SessionUser | None:
        """Return the user of a valid session token, else None."""
        return self.codec.decode(token)

    def require_authenticated(self, token: str | None) -> SessionUser:
        """Return the session user or raise ``Unauthorized``."""
        user = self.session_from_token(token)
        if user is None:
            raise Unauthorized("Authentication required")
        return user

    def require_superadmin(self, token: str | None) -> SessionUser:
        """Return the session user if they are a superadmin.

        Raises:
            Unauthorized: If there is no valid session.
            Forbidden: If the user is signed in with another role.
        """
        user = self.require_authenticated(token)
        if not user.is_superadmin:
            raise Forbidden("Only superadmin can update status")
        return user
