"""Signed, expiring session tokens.

A token is ``<payload>.<signature>`` where ``payload`` is the URL-safe
base64 encoding (without padding) of a JSON object and ``signature`` is the
URL-safe base64 HMAC-SHA256 of the encoded payload under the server secret.
There is no header and no algorithm field: the algorithm is fixed, so a
token can never ask to be verified some other way.
"""

from __future__ import annotations

import hashlib
import json
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Literal

from itsdangerous import BadData, Signer
from itsdangerous.encoding import base64_decode, base64_encode

UserRole = Literal["user", "superadmin"]
ROLES: frozenset[str] = frozenset({"user", "superadmin"})

DEFAULT_TTL_SECONDS = 60 * 60 * 24 * 7
TOKEN_SEPARATOR = "."


@dataclass(frozen=True)
class SessionUser:
    """Public identity carried by a session."""

    username: str
    role: UserRole
    display_name: str | None = None

    @property
    def is_superadmin(self) -> bool:
        return self.role == "superadmin"


class SessionTokenCodec:
    """Create and verify session tokens with a fixed HMAC-SHA256 key."""

    def __init__(
        self,
        secret: str,
        ttl_seconds: int = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if not secret or not secret.strip():
            raise ValueError("Session secret must not be empty")
        # The secret is the HMAC key as-is: no salt, no derived key.
        self._signer = Signer(
            secret,
            sep=TOKEN_SEPARATOR,
            key_derivation="none",
            digest_method=hashlib.sha256,
        )
        self.ttl_seconds = ttl_seconds
        self._clock = clock

    def encode(self, user: SessionUser) -> str:
        """Serialize ``user`` into a signed token valid for ``ttl_seconds``."""
        issued_at = int(self._clock())
        payload: dict[str, Any] = {
            "username": user.username,
            "role": user.role,
            "displayName": user.display_name,
            "iat": issued_at,
            "exp": issued_at + self.ttl_seconds,
        }
        payload_encoded = base64_encode(json.dumps(payload, separators=(",", ":")))
        return self._signer.sign(payload_encoded).decode("ascii")

    def decode(self, token: str | None) -> SessionUser | None:
        """Return the session user for a valid token, otherwise None."""
        if not token:
            return None
        parts = token.split(TOKEN_SEPARATOR)
        if len(parts) != 2 or not all(parts):
            return None

        try:
            payload_encoded = self._signer.unsign(token)
            payload = json.loads(base64_decode(payload_encoded).decode("utf-8"))
        except (BadData, ValueError):
            return None
        if not isinstance(payload, dict):
            return None

        username = payload.get("username")
        role = payload.get("role")
        expires_at = payload.get("exp")
        if not isinstance(username, str) or not username:
            return None
        if role not in ROLES:
            return None
        if isinstance(expires_at, bool) or not isinstance(expires_at, (int, float)):
            return None
        if expires_at < self._clock():
            return None

        display_name = payload.get("displayName")
        return SessionUser(
            username=username,
            role=role,
            display_name=display_name if isinstance(display_name, str) else None,
        )
