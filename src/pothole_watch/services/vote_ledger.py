"""At-most-one vote per voter per report, with atomic counter updates."""

from __future__ import annotations

import logging
import uuid

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from pothole_watch.core.errors import (
    DependencyError,
    DuplicateVote,
    NotFound,
    ValidationError,
)
from pothole_watch.models.report import Report
from pothole_watch.repositories.report_repo import ReportRepository

logger = logging.getLogger(__name__)

VOTE_VALUES = {"up": 1, "down": -1}


def new_voter_id() -> str:
    """Return a fresh random anonymous voter identifier."""
    return str(uuid.uuid4())


class VoteLedger:
    """Records votes and keeps the report counters in step.

    Uniqueness is enforced by the ``(report_id, voter_id)`` constraint in
    the database, so the ledger holds no locks and is safe across any
    number of server processes.
    """

    def __init__(self, session: Session) -> None:
        self.session = session
        self.reports = ReportRepository(session)

    def cast_vote(self, report_id: str, voter_id: str, direction: str) -> Report:
        """Record one vote and return the report with updated counters.

        The vote insert is committed before the counter increment. If the
        increment fails the vote is kept and the counters lag behind by one
        until reconciled.

        Raises:
            ValidationError: If ``direction`` is not "up" or "down".
            NotFound: If the report does not exist.
            DuplicateVote: If this voter already voted on the report.
            DependencyError: If the store fails.
        """
        if direction not in VOTE_VALUES:
            raise ValidationError("Invalid vote")
        value = VOTE_VALUES[direction]

        try:
            if not self.reports.exists(report_id):
                raise NotFound("Report not found")
            self.reports.insert_vote(report_id=report_id, voter_id=voter_id, value=value)
            self.session.commit()
        except IntegrityError as err:
            self.session.rollback()
            logger.debug("Duplicate vote by %s on report %s", voter_id, report_id)
            raise DuplicateVote() from err
        except SQLAlchemyError as err:
            self.session.rollback()
            logger.error("Vote insert failed for report %s: %s", report_id, err)
            raise DependencyError("Unable to record vote") from err

        try:
            self.reports.increment_counter(report_id, value)
            self.session.commit()
        except SQLAlchemyError as err:
            self.session.rollback()
            logger.error(
                "Vote recorded but counter update failed for report %s",
                report_id,
                exc_info=True,
            )
            raise DependencyError("Unable to update vote counts") from err

        report = self.reports.get_by_id(report_id)
        if report is None:
            raise NotFound("Report not found")
        self.session.refresh(report)
        return report
