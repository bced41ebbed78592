# src/pothole_watch/api/v1/endpoints/comments.py
"""Comment endpoints for reports."""

from fastapi import APIRouter, status

from pothole_watch.schemas.comment import (
    CommentCreate,
    CommentEnvelope,
    CommentListResponse,
    CommentResponse,
)
from pothole_watch.services import report_service

from ..dependencies import CurrentUserDep, SessionDep

router = APIRouter(prefix="/reports", tags=["comments"])


@router.get("/{report_id}/comments", response_model=CommentListResponse)
def list_comments(report_id: str, db: SessionDep) -> CommentListResponse:
    """Return comments on a report, newest first."""
    comments = report_service.list_comments(db, report_id)
    return CommentListResponse(comments=[CommentResponse.model_validate(c) for c in comments])


@router.post(
    "/{report_id}/comments",
    status_code=status.HTTP_201_CREATED,
    response_model=CommentEnvelope,
)
def add_comment(
    report_id: str,
    payload: CommentCreate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> CommentEnvelope:
    """Comment on a report as the signed-in user."""
    comment = report_service.add_comment(
        db,
        report_id,
        author=current_user.display_name or current_user.username,
        body=payload.body,
    )
    return CommentEnvelope(comment=CommentResponse.model_validate(comment))
