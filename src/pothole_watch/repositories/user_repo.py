"""Persistent credential store backed by the ``app_user`` table."""
from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from pothole_watch.core.errors import ConflictError, DependencyError
from pothole_watch.models.user import AppUser

__all__ = ["CredentialStore"]

logger = logging.getLogger(__name__)


class CredentialStore:
    """Thin wrapper around database access for login accounts."""

    def __init__(self, session: Session) -> None:
        """Initialize the store with a request-scoped SQLAlchemy session."""
        self.session = session

    def find_by_username(self, username: str) -> AppUser | None:
        """Return the account with exactly this username, if any.

        Raises:
            DependencyError: If the database cannot be queried.
        """
        try:
            return self.session.execute(
                select(AppUser).where(AppUser.username == username)
            ).scalars().first()
        except SQLAlchemyError as err:
            logger.error("Unable to read auth users: %s", err)
            raise DependencyError("Unable to read auth users") from err

    def create(
        self,
        *,
        username: str,
        password_hash: str,
        role: str = "user",
        display_name: str | None = None,
    ) -> AppUser:
        """Insert a new account and return the persisted row.

        Raises:
            ConflictError: If another account took the username concurrently.
            DependencyError: If the insert fails for any other reason.
        """
        user = AppUser(
            username=username,
            password_hash=password_hash,
            role=role,
            display_name=display_name,
        )
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError as err:
            self.session.rollback()
            raise ConflictError("Username is already taken") from err
        except SQLAlchemyError as err:
            self.session.rollback()
            logger.error("Signup insert failed: %s", err)
            raise DependencyError("Signup failed") from err
        self.session.refresh(user)
        return user
