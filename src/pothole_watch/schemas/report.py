"""Report-related Pydantic schemas."""

from __future__ import annotations

import math
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, field_serializer, field_validator

from pothole_watch.db.time import ensure_utc

from .common import CamelModel

ReportSeverity = Literal["low", "medium", "high", "critical"]
ReportStatus = Literal["reported", "scheduled", "in_progress", "fixed"]


def _blank_to_none(v: object) -> object:
    if isinstance(v, str):
        v = v.strip()
        return v or None
    return v


class ReportCreate(CamelModel):
    """Schema for submitting a new pothole report."""

    title: str = Field("Unnamed pothole", max_length=200)
    description: str = Field("", max_length=5000)
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    department: str | None = Field(None, max_length=200)
    severity: ReportSeverity = "medium"
    reporter_name: str | None = Field(None, max_length=100)
    district: str | None = None
    municipality: str | None = None
    ward_number: str | None = None
    ward: str | None = None
    pothole_confidence: float | None = Field(None, ge=0, le=1)
    image_url: str | None = None

    @field_validator(
        "department",
        "reporter_name",
        "district",
        "municipality",
        "ward_number",
        "ward",
        "image_url",
        mode="before",
    )
    @classmethod
    def _normalize_optional(cls, v: object) -> object:
        return _blank_to_none(v)

    @field_validator("latitude", "longitude")
    @classmethod
    def _finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("Latitude and longitude are required")
        return v


class StatusUpdate(CamelModel):
    """Administrative status transition."""

    status: ReportStatus
    fixed_time: datetime | None = None


class ReportResponse(CamelModel):
    """Report as returned by the API."""

    id: str
    title: str
    description: str
    latitude: float
    longitude: float
    district: str | None = None
    municipality: str | None = None
    ward_number: str | None = None
    ward: str | None = None
    department: str
    severity: ReportSeverity
    pothole_confidence: float | None = None
    status: ReportStatus
    upvotes: int
    downvotes: int
    reporter_name: str | None = None
    report_time: datetime
    fixed_time: datetime | None = None
    image_url: str | None = None

    @field_serializer("report_time", "fixed_time")
    def _serialize_time(self, value: datetime | None) -> str | None:
        return ensure_utc(value).isoformat() if value is not None else None


class ReportListResponse(BaseModel):
    reports: list[ReportResponse]


class LeaderboardEntry(CamelModel):
    id: str
    title: str
    ward: str | None = None
    department: str
    net_votes: int
    status: ReportStatus
    open_duration_hours: float


class LeaderboardResponse(BaseModel):
    entries: list[LeaderboardEntry]
