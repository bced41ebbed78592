"""Authentication-related Pydantic schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from pothole_watch.core.session_tokens import SessionUser, UserRole

from .common import CamelModel


class LoginRequest(BaseModel):
    """Credentials submitted to the login endpoint."""

    username: str = Field(..., min_length=1, description="Case-sensitive username")
    password: str = Field(..., min_length=1)

    @field_validator("username", mode="before")
    @classmethod
    def _strip_username(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v


class SignupRequest(CamelModel):
    """Registration payload.

    Length rules (3+ character username, 6+ character password) are checked
    by the auth service so they apply to every caller, not just HTTP.
    """

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    display_name: str | None = Field(None, max_length=100)

    @field_validator("username", "display_name", mode="before")
    @classmethod
    def _strip_text(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v


class SessionUserResponse(CamelModel):
    """Public profile of the signed-in user."""

    username: str
    role: UserRole
    display_name: str | None = None

    @classmethod
    def from_session(cls, user: SessionUser) -> SessionUserResponse:
        return cls(username=user.username, role=user.role, display_name=user.display_name)


class AuthResponse(BaseModel):
    ok: bool = True
    user: SessionUserResponse


class MeResponse(BaseModel):
    user: SessionUserResponse | None


class OkResponse(BaseModel):
    ok: bool = True
