# tests/test_security.py
"""Tests for password hashing and session tokens."""

from datetime import timedelta

import pytest
from jose import JWTError

from devoverflow.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


def test_password_round_trip() -> None:
    hashed = hash_password("s3cret-password")

    assert hashed != "s3cret-password"
    assert verify_password("s3cret-password", hashed)
    assert not verify_password("wrong-password", hashed)


def test_verify_password_with_malformed_hash() -> None:
    assert verify_password("anything", "not-a-bcrypt-hash") is False


def test_token_claims() -> None:
    token = create_access_token("user-1", name="Grace", email="grace@example.com")
    claims = decode_access_token(token)

    assert claims["sub"] == "user-1"
    assert claims["name"] == "Grace"
    assert claims["email"] == "grace@example.com"
    assert "exp" in claims


def test_expired_token_rejected() -> None:
    token = create_access_token(
        "user-1",
        name="Grace",
        email="grace@example.com",
        expires_delta=timedelta(seconds=-1),
    )

    with pytest.raises(JWTError):
        decode_access_token(token)
