"""Salted Argon2id password hashing.

Stored values have the form ``<salt hex>:<derived key hex>``. The salt hex
string itself (not its decoded bytes) is fed to the KDF as the salt.
"""

from __future__ import annotations

import hmac
import secrets

from argon2.low_level import Type, hash_secret_raw

SALT_BYTES = 16
KEY_LENGTH = 64
ARGON2_TIME_COST = 2
ARGON2_MEMORY_COST_KIB = 19 * 1024
ARGON2_PARALLELISM = 1


def _derive(password: str, salt: str) -> str:
    return hash_secret_raw(
        secret=password.encode("utf-8"),
        salt=salt.encode("utf-8"),
        time_cost=ARGON2_TIME_COST,
        memory_cost=ARGON2_MEMORY_COST_KIB,
        parallelism=ARGON2_PARALLELISM,
        hash_len=KEY_LENGTH,
        type=Type.ID,
    ).hex()


def safe_equal_text(left: str, right: str) -> bool:
    """Compare two strings in constant time."""
    return hmac.compare_digest(left.encode("utf-8"), right.encode("utf-8"))


def hash_password(password: str) -> str:
    """Return ``salt:key`` for ``password`` using a fresh random salt."""
    salt = secrets.token_hex(SALT_BYTES)
    return f"{salt}:{_derive(password, salt)}"


def verify_password(password: str, stored_hash: str | None) -> bool:
    """Check ``password`` against a stored ``salt:key`` value.

    Malformed stored values fail closed.
    """
    if not stored_hash:
        return False
    salt, sep, key = stored_hash.partition(":")
    if not sep or not salt or not key or ":" in key:
        return False
    try:
        bytes.fromhex(key)
    except ValueError:
        return False
    # Argon2 rejects salts shorter than 8 bytes.
    if len(salt.encode("utf-8")) < 8:
        return False
    return safe_equal_text(_derive(password, salt), key.lower())


# Used to spend the same derivation cost when a username is unknown.
DUMMY_HASH = hash_password(secrets.token_hex(8))
