# src/pothole_watch/models/report.py
"""SQLAlchemy model for pothole reports."""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Float, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from pothole_watch.db.session import Base
from pothole_watch.db.time import utcnow

REPORT_SEVERITIES = ("low", "medium", "high", "critical")
REPORT_STATUSES = ("reported", "scheduled", "in_progress", "fixed")


class Report(Base):
    """Geotagged pothole report submitted by a citizen.

    ``upvotes`` and ``downvotes`` are aggregate counters kept in step with
    ``report_vote`` rows; they are only ever changed by atomic SQL
    increments, never by read-modify-write.
    """

    __tablename__ = "report"
    __table_args__ = (
        CheckConstraint(
            "status IN ('reported', 'scheduled', 'in_progress', 'fixed')",
            name="ck_report_status",
        ),
        CheckConstraint(
            "severity IN ('low', 'medium', 'high', 'critical')",
            name="ck_report_severity",
        ),
    )

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    latitude: Mapped[float] = mapped_column(Float, nullable=False)
    longitude: Mapped[float] = mapped_column(Float, nullable=False)

    # Administrative location; ward falls back to "<municipality>-<ward number>".
    district: Mapped[str | None] = mapped_column(Text, nullable=True)
    municipality: Mapped[str | None] = mapped_column(Text, nullable=True)
    ward_number: Mapped[str | None] = mapped_column(Text, nullable=True)
    ward: Mapped[str | None] = mapped_column(Text, nullable=True)

    department: Mapped[str] = mapped_column(Text, nullable=False)
    severity: Mapped[str] = mapped_column(String(16), nullable=False, default="medium")
    pothole_confidence: Mapped[float | None] = mapped_column(Float, nullable=True)
    status: Mapped[str] = mapped_column(String(16), nullable=False, default="reported")

    upvotes: Mapped[int] = mapped_column(default=0, nullable=False)
    downvotes: Mapped[int] = mapped_column(default=0, nullable=False)

    reporter_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    report_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
    fixed_time: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    image_url: Mapped[str | None] = mapped_column(Text, nullable=True)

    @property
    def net_votes(self) -> int:
        """Return upvotes minus downvotes."""
        return self.upvotes - self.downvotes
