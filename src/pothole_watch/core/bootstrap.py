"""Statically configured accounts usable before any database user exists."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from pothole_watch.core.errors import ConfigurationError
from pothole_watch.core.session_tokens import UserRole


@dataclass(frozen=True)
class BootstrapAccount:
    username: str
    password: str
    role: UserRole = "user"
    display_name: str | None = None


@dataclass(frozen=True)
class BootstrapAccounts:
    """Read-only set of bootstrap accounts, loaded once at startup."""

    accounts: tuple[BootstrapAccount, ...] = ()

    @classmethod
    def from_json(cls, raw: str | None) -> BootstrapAccounts:
        """Parse a JSON array of account objects.

        Entries without string ``username`` and ``password`` are skipped and
        unknown roles fall back to ``user``.

        Raises:
            ConfigurationError: If ``raw`` is not valid JSON or not an array.
        """
        if raw is None or not raw.strip():
            return cls()
        try:
            parsed: Any = json.loads(raw)
        except json.JSONDecodeError as err:
            raise ConfigurationError("BOOTSTRAP_USERS_JSON must be valid JSON") from err
        if not isinstance(parsed, list):
            raise ConfigurationError("BOOTSTRAP_USERS_JSON must be an array")

        accounts: list[BootstrapAccount] = []
        for entry in parsed:
            if not isinstance(entry, dict):
                continue
            username = entry.get("username")
            password = entry.get("password")
            if not isinstance(username, str) or not isinstance(password, str):
                continue
            display_name = entry.get("displayName")
            accounts.append(
                BootstrapAccount(
                    username=username.strip(),
                    password=password,
                    role="superadmin" if entry.get("role") == "superadmin" else "user",
                    display_name=display_name if isinstance(display_name, str) else None,
                )
            )
        return cls(tuple(accounts))

    def find(self, username: str) -> BootstrapAccount | None:
        """Return the account with exactly this username, if any."""
        for account in self.accounts:
            if account.username == username:
                return account
        return None

    def __contains__(self, username: object) -> bool:
        return isinstance(username, str) and self.find(username) is not None

    def __len__(self) -> int:
        return len(self.accounts)
