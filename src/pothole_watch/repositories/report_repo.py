"""Data access helpers for working with reports, votes and comments."""
from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from pothole_watch.models.comment import ReportComment
from pothole_watch.models.report import Report
from pothole_watch.models.vote import ReportVote

__all__ = ["ReportRepository"]


class ReportRepository:
    """Thin wrapper around database access for report entities.

    Methods flush but never commit; transaction boundaries belong to the
    calling service.
    """

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def get_by_id(self, report_id: str) -> Report | None:
        """Return a report by identifier."""
        return self.session.get(Report, report_id)

    def exists(self, report_id: str) -> bool:
        """Return True if a report with this identifier exists."""
        found = self.session.execute(
            select(Report.id).where(Report.id == report_id)
        ).first()
        return found is not None

    def list_newest_first(self) -> list[Report]:
        """Return every report ordered by descending report time."""
        result = self.session.execute(select(Report).order_by(Report.report_time.desc()))
        return list(result.scalars())

    def create(self, **fields: Any) -> Report:
        """Insert a new report and return the pending ORM instance."""
        report = Report(**fields)
        self.session.add(report)
        self.session.flush()
        return report

    def insert_vote(self, *, report_id: str, voter_id: str, value: int) -> ReportVote:
        """Insert a vote row; the unique constraint rejects a second vote.

        Raises:
            sqlalchemy.exc.IntegrityError: On a duplicate ``(report_id, voter_id)``.
        """
        vote = ReportVote(report_id=report_id, voter_id=voter_id, value=value)
        self.session.add(vote)
        self.session.flush()
        return vote

    def increment_counter(self, report_id: str, value: int) -> int:
        """Atomically add one to the up or down counter of a report.

        Issues ``SET col = col + 1`` so concurrent voters never lose updates.

        Returns:
            Number of rows matched (0 if the report vanished).
        """
        column = Report.upvotes if value == 1 else Report.downvotes
        result = self.session.execute(
            update(Report)
            .where(Report.id == report_id)
            .values({column: column + 1})
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    def set_status(self, report_id: str, status: str, fixed_time: datetime | None) -> int:
        """Write status and fixed time in a single-row update."""
        result = self.session.execute(
            update(Report)
            .where(Report.id == report_id)
            .values(status=status, fixed_time=fixed_time)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    def list_comments(self, report_id: str) -> list[ReportComment]:
        """Return comments for a report, newest first."""
        result = self.session.execute(
            select(ReportComment)
            .where(ReportComment.report_id == report_id)
            .order_by(ReportComment.created_at.desc())
        )
        return list(result.scalars())

    def add_comment(self, *, report_id: str, author: str | None, body: str) -> ReportComment:
        """Insert a comment and return the pending ORM instance."""
        comment = ReportComment(report_id=report_id, author=author, body=body)
        self.session.add(comment)
        self.session.flush()
        return comment
