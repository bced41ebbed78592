# tests/test_passwords.py
"""Tests for salted Argon2id password hashing."""

import pytest
from argon2.low_level import Type, hash_secret_raw

from pothole_watch.core.passwords import (
    ARGON2_MEMORY_COST_KIB,
    ARGON2_PARALLELISM,
    ARGON2_TIME_COST,
    KEY_LENGTH,
    SALT_BYTES,
    hash_password,
    safe_equal_text,
    verify_password,
)


def test_hash_has_salt_and_key() -> None:
    stored = hash_password("secret1")
    salt, key = stored.split(":")
    assert len(salt) == SALT_BYTES * 2
    assert len(key) == 128
    int(key, 16)


def test_key_is_argon2id_of_salt_text() -> None:
    stored = hash_password("secret1")
    salt, key = stored.split(":")
    expected = hash_secret_raw(
        secret=b"secret1",
        salt=salt.encode(),
        time_cost=ARGON2_TIME_COST,
        memory_cost=ARGON2_MEMORY_COST_KIB,
        parallelism=ARGON2_PARALLELISM,
        hash_len=KEY_LENGTH,
        type=Type.ID,
    )
    assert key == expected.hex()


def test_hash_differs_per_call() -> None:
    assert hash_password("secret1") != hash_password("secret1")


def test_verify_accepts_correct_password() -> None:
    stored = hash_password("secret1")
    assert verify_password("secret1", stored) is True


def test_verify_accepts_uppercase_key_hex() -> None:
    salt, key = hash_password("secret1").split(":")
    assert verify_password("secret1", f"{salt}:{key.upper()}") is True


def test_verify_rejects_wrong_password() -> None:
    stored = hash_password("secret1")
    assert verify_password("secret2", stored) is False


@pytest.mark.parametrize(
    "stored",
    ["", "no-separator", ":abcdef", "abcdef:", "salt:not-hex", "a:b:c", "short:abcd", None],
)
def test_verify_fails_closed_on_malformed_hash(stored) -> None:
    assert verify_password("secret1", stored) is False


def test_safe_equal_text() -> None:
    assert safe_equal_text("abc", "abc") is True
    assert safe_equal_text("abc", "abd") is False
    assert safe_equal_text("abc", "abcd") is False
    assert safe_equal_text("ünï", "ünï") is True
