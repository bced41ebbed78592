"""Cookie helpers for session and voter identity cookies."""

from __future__ import annotations

import uuid

from fastapi import Request, Response

from pothole_watch.core.settings import settings


def read_session_token(request: Request) -> str | None:
    return request.cookies.get(settings.session_cookie_name) or None


def read_voter_id(request: Request) -> str | None:
    """Return the voter id cookie if it holds a UUID, otherwise None."""
    raw = request.cookies.get(settings.voter_cookie_name)
    if not raw:
        return None
    try:
        uuid.UUID(raw)
    except ValueError:
        return None
    return raw


def set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        settings.session_cookie_name,
        token,
        max_age=settings.session_ttl_seconds,
        path="/",
        httponly=True,
        samesite="lax",
        secure=settings.secure_cookies,
    )


def clear_session_cookie(response: Response) -> None:
    response.set_cookie(
        settings.session_cookie_name,
        "",
        max_age=0,
        path="/",
        httponly=True,
        samesite="lax",
        secure=settings.secure_cookies,
    )


def set_voter_cookie(response: Response, voter_id: str) -> None:
    response.set_cookie(
        settings.voter_cookie_name,
        voter_id,
        max_age=settings.voter_cookie_max_age_seconds,
        path="/",
        httponly=True,
        samesite="lax",
        secure=settings.secure_cookies,
    )
