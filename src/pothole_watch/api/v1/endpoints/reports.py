# src/pothole_watch/api/v1/endpoints/reports.py
"""Report endpoints: submission, listing, leaderboard and status changes."""

from fastapi import APIRouter, status

from pothole_watch.schemas.report import (
    LeaderboardResponse,
    ReportCreate,
    ReportListResponse,
    ReportResponse,
    StatusUpdate,
)
from pothole_watch.services import report_service

from ..dependencies import SessionDep, SuperAdminDep

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("", response_model=ReportListResponse)
def list_reports(db: SessionDep) -> ReportListResponse:
    """List every report, newest first."""
    reports = report_service.list_reports(db)
    return ReportListResponse(reports=[ReportResponse.model_validate(r) for r in reports])


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ReportResponse)
def create_report(payload: ReportCreate, db: SessionDep) -> ReportResponse:
    """Submit a new pothole report. Anonymous submissions are allowed."""
    report = report_service.create_report(db, payload)
    return ReportResponse.model_validate(report)


@router.get("/leaderboard", response_model=LeaderboardResponse)
def leaderboard(db: SessionDep) -> LeaderboardResponse:
    """Rank reports by net votes."""
    return LeaderboardResponse(entries=report_service.build_leaderboard(db))


@router.get("/{report_id}", response_model=ReportResponse)
def get_report(report_id: str, db: SessionDep) -> ReportResponse:
    return ReportResponse.model_validate(report_service.get_report(db, report_id))


@router.patch("/{report_id}/status", response_model=ReportResponse)
def update_status(
    report_id: str,
    payload: StatusUpdate,
    admin: SuperAdminDep,
    db: SessionDep,
) -> ReportResponse:
    """Transition a report's repair status (superadmin only)."""
    report = report_service.update_status(db, report_id, payload.status, payload.fixed_time)
    return ReportResponse.model_validate(report)
