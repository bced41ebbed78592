# src/pothole_watch/api/v1/endpoints/auth.py
"""Authentication endpoints for the Pothole Watch API."""

from __future__ import annotations

from fastapi import APIRouter, Response, status

from pothole_watch.core.errors import Unauthorized
from pothole_watch.core.session_tokens import SessionUser
from pothole_watch.schemas.auth import (
    AuthResponse,
    LoginRequest,
    MeResponse,
    OkResponse,
    SessionUserResponse,
    SignupRequest,
)

from ..cookies import clear_session_cookie, set_session_cookie
from ..dependencies import AuthServiceDep, OptionalUserDep

router = APIRouter(prefix="/auth", tags=["authentication"])


def _signed_in(response: Response, auth: AuthServiceDep, user: SessionUser) -> AuthResponse:
    set_session_cookie(response, auth.issue_token(user))
    return AuthResponse(user=SessionUserResponse.from_session(user))


@router.post(
    "/login",
    summary="Sign in with username and password",
    status_code=status.HTTP_200_OK,
    response_model=AuthResponse,
)
def login(payload: LoginRequest, response: Response, auth: AuthServiceDep) -> AuthResponse:
    """Verify credentials and set the session cookie."""
    user = auth.login(payload.username, payload.password)
    if user is None:
        raise Unauthorized("Invalid credentials")
    return _signed_in(response, auth, user)


@router.post(
    "/signup",
    summary="Create an account and sign in",
    status_code=status.HTTP_200_OK,
    response_model=AuthResponse,
)
def signup(payload: SignupRequest, response: Response, auth: AuthServiceDep) -> AuthResponse:
    """Register a new ``user``-role account and set the session cookie."""
    user = auth.register(payload.username, payload.password, payload.display_name)
    return _signed_in(response, auth, user)


@router.post("/logout", response_model=OkResponse)
async def logout(response: Response) -> OkResponse:
    """Clear the session cookie.

    The token itself stays valid until it expires; there is no revocation.
    """
    clear_session_cookie(response)
    return OkResponse()


@router.get("/me", response_model=MeResponse)
async def me(user: OptionalUserDep) -> MeResponse:
    """Return the signed-in user, or null."""
    return MeResponse(user=SessionUserResponse.from_session(user) if user else None)
