"""Report lifecycle: submission, listing, status changes, comments, leaderboard."""
from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from pothole_watch.core.errors import DependencyError, NotFound, ValidationError
from pothole_watch.core.settings import settings
from pothole_watch.db.time import ensure_utc, utcnow
from pothole_watch.models.comment import ReportComment
from pothole_watch.models.report import REPORT_STATUSES, Report
from pothole_watch.repositories.report_repo import ReportRepository
from pothole_watch.schemas.report import LeaderboardEntry, ReportCreate

__all__ = [
    "add_comment",
    "build_leaderboard",
    "create_report",
    "get_report",
    "list_comments",
    "list_reports",
    "update_status",
]

logger = logging.getLogger(__name__)


def _derive_ward(data: ReportCreate) -> str | None:
    if data.ward:
        return data.ward
    if data.municipality and data.ward_number:
        return f"{data.municipality}-{data.ward_number}"
    return None


def list_reports(db: Session) -> Sequence[Report]:
    """Return all reports, newest first."""
    try:
        return ReportRepository(db).list_newest_first()
    except SQLAlchemyError as err:
        logger.error("Failed to fetch reports: %s", err)
        raise DependencyError("Unable to fetch reports") from err


def get_report(db: Session, report_id: str) -> Report:
    """Return a single report or raise ``NotFound``."""
    report = ReportRepository(db).get_by_id(report_id)
    if report is None:
        raise NotFound("Report not found")
    return report


def create_report(db: Session, data: ReportCreate) -> Report:
    """Persist a new report in the ``reported`` state with zeroed counters."""
    repo = ReportRepository(db)
    try:
        report = repo.create(
            title=data.title.strip() or "Unnamed pothole",
            description=data.description,
            latitude=data.latitude,
            longitude=data.longitude,
            district=data.district,
            municipality=data.municipality,
            ward_number=data.ward_number,
            ward=_derive_ward(data),
            department=data.department or settings.default_department,
            severity=data.severity,
            pothole_confidence=data.pothole_confidence,
            status="reported",
            upvotes=0,
            downvotes=0,
            reporter_name=data.reporter_name,
            report_time=utcnow(),
            fixed_time=None,
            image_url=data.image_url,
        )
        db.commit()
    except SQLAlchemyError as err:
        db.rollback()
        logger.error("Failed to insert report: %s", err)
        raise DependencyError("Unable to create report") from err
    db.refresh(report)
    logger.info("Created report %s", report.id)
    return report


def update_status(
    db: Session,
    report_id: str,
    status: str,
    fixed_time: datetime | None = None,
) -> Report:
    """Move a report to ``status``.

    ``fixed_time`` is kept only for the ``fixed`` status and defaults to
    now; any other status clears it.
    """
    if status not in REPORT_STATUSES:
        raise ValidationError("Invalid status")
    stamped = (ensure_utc(fixed_time) if fixed_time else utcnow()) if status == "fixed" else None

    repo = ReportRepository(db)
    try:
        matched = repo.set_status(report_id, status, stamped)
        if not matched:
            db.rollback()
            raise NotFound("Report not found")
        db.commit()
    except SQLAlchemyError as err:
        db.rollback()
        logger.error("Failed to update status of report %s: %s", report_id, err)
        raise DependencyError("Unable to update report status") from err

    report = get_report(db, report_id)
    db.refresh(report)
    logger.info("Report %s moved to %s", report_id, status)
    return report


def list_comments(db: Session, report_id: str) -> Sequence[ReportComment]:
    """Return comments for an existing report, newest first."""
    repo = ReportRepository(db)
    if not repo.exists(report_id):
        raise NotFound("Report not found")
    return repo.list_comments(report_id)


def add_comment(db: Session, report_id: str, author: str | None, body: str) -> ReportComment:
    """Attach a comment to a report."""
    body = body.strip()
    if not body:
        raise ValidationError("Comment text is required")
    repo = ReportRepository(db)
    if not repo.exists(report_id):
        raise NotFound("Report not found")
    try:
        comment = repo.add_comment(report_id=report_id, author=author, body=body)
        db.commit()
    except SQLAlchemyError as err:
        db.rollback()
        logger.error("Failed to add comment to report %s: %s", report_id, err)
        raise DependencyError("Unable to add comment") from err
    db.refresh(comment)
    return comment


def _hours_between(start: datetime, end: datetime) -> float:
    return (ensure_utc(end) - ensure_utc(start)).total_seconds() / 3600


def build_leaderboard(db: Session, now: datetime | None = None) -> list[LeaderboardEntry]:
    """Rank reports by net votes, highest first.

    Open duration runs until the fix time for fixed reports and until
    ``now`` for everything else.
    """
    now = now or utcnow()
    entries = [
        LeaderboardEntry(
            id=report.id,
            title=report.title,
            ward=report.ward,
            department=report.department,
            status=report.status,
            net_votes=report.net_votes,
            open_duration_hours=_hours_between(
                report.report_time,
                report.fixed_time if report.status == "fixed" and report.fixed_time else now,
            ),
        )
        for report in list_reports(db)
    ]
    entries.sort(key=lambda entry: entry.net_votes, reverse=True)
    return entries
