# src/pothole_watch/models/user.py
"""SQLAlchemy model for database-backed login accounts."""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from pothole_watch.db.session import Base
from pothole_watch.db.time import utcnow


class AppUser(Base):
    """Registered account.

    Usernames are unique and compared case-sensitively. Only the salted
    Argon2id hash of the password is stored.
    """

    __tablename__ = "app_user"
    __table_args__ = (
        CheckConstraint("role IN ('user', 'superadmin')", name="ck_app_user_role"),
    )

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )
    username: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(Text, nullable=False)
    role: Mapped[str] = mapped_column(String(16), nullable=False, default="user")
    display_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
