# src/pothole_watch/models/comment.py
"""Comments left by signed-in users on reports."""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from pothole_watch.db.session import Base
from pothole_watch.db.time import utcnow


class ReportComment(Base):
    __tablename__ = "report_comment"
    __table_args__ = (Index("ix_report_comment_report_id", "report_id"),)

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )
    report_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("report.id", ondelete="CASCADE"),
        nullable=False,
    )
    # Display name (or username) of the author at the time of posting.
    author: Mapped[str | None] = mapped_column(Text, nullable=True)
    body: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
