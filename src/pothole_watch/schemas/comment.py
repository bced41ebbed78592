"""Comment-related Pydantic schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_serializer, model_validator

from pothole_watch.db.time import ensure_utc

from .common import CamelModel


class CommentCreate(BaseModel):
    """Schema for posting a comment.

    Older clients send the text as ``text`` instead of ``body``; both are
    accepted and ``body`` wins when both are present.
    """

    body: str = Field(..., min_length=1, max_length=2000)

    @model_validator(mode="before")
    @classmethod
    def _normalize_body(cls, data: object) -> object:
        if not isinstance(data, dict):
            return data
        candidate = data.get("body")
        if not isinstance(candidate, str):
            candidate = data.get("text")
        text = candidate.strip() if isinstance(candidate, str) else ""
        if not text:
            raise ValueError("Comment text is required")
        return {"body": text}


class CommentResponse(CamelModel):
    id: str
    report_id: str
    author: str | None = None
    body: str
    created_at: datetime

    @field_serializer("created_at")
    def _serialize_created_at(self, value: datetime) -> str:
        return ensure_utc(value).isoformat()


class CommentEnvelope(BaseModel):
    comment: CommentResponse


class CommentListResponse(BaseModel):
    comments: list[CommentResponse]
