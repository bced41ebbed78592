# src/pothole_watch/models/vote.py
"""Models capturing anonymous votes on reports."""

from sqlalchemy import (
    CheckConstraint,
    ForeignKey,
    Index,
    SmallInteger,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column

from pothole_watch.db.session import Base


class ReportVote(Base):
    """Single vote by an anonymous voter identity on a report.

    Votes are never updated or deleted; there is no retraction.
    """

    __tablename__ = "report_vote"
    __table_args__ = (
        CheckConstraint("value IN (1, -1)", name="ck_report_vote_value"),
        # One vote per voter per report, enforced by the database.
        UniqueConstraint("report_id", "voter_id", name="uq_report_vote_report_voter"),
        Index("ix_report_vote_report_id", "report_id"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    report_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("report.id", ondelete="CASCADE"),
        nullable=False,
    )
    voter_id: Mapped[str] = mapped_column(String(64), nullable=False)

    # 1 = upvote, -1 = downvote.
    value: Mapped[int] = mapped_column(SmallInteger, nullable=False)
