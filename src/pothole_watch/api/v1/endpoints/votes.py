# src/pothole_watch/api/v1/endpoints/votes.py
"""Vote endpoint for the Pothole Watch API."""

from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse

from pothole_watch.core.errors import AppError
from pothole_watch.schemas.report import ReportResponse
from pothole_watch.schemas.vote import VoteCreate
from pothole_watch.services.vote_ledger import VoteLedger, new_voter_id

from ..cookies import read_voter_id, set_voter_cookie
from ..dependencies import SessionDep
from ..errors import render_error

router = APIRouter(prefix="/reports", tags=["votes"])


@router.post("/{report_id}/vote", response_model=ReportResponse)
def cast_vote(
    report_id: str,
    vote_data: VoteCreate,
    request: Request,
    response: Response,
    db: SessionDep,
) -> ReportResponse | JSONResponse:
    """Cast one anonymous vote on a report.

    A browser without a voter cookie gets a new identity, and the cookie is
    set on every outcome (including the 409 for a repeated vote) so the
    client keeps the identity it already used.
    """
    existing_voter_id = read_voter_id(request)
    voter_id = existing_voter_id or new_voter_id()

    try:
        report = VoteLedger(db).cast_vote(report_id, voter_id, vote_data.direction)
    except AppError as err:
        error_response = render_error(err)
        if existing_voter_id is None:
            set_voter_cookie(error_response, voter_id)
        return error_response

    if existing_voter_id is None:
        set_voter_cookie(response, voter_id)
    return ReportResponse.model_validate(report)
