"""Tests for access token verification."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from discipleship.infrastructure.security import decode_access_token


def test_valid_token_returns_claims(token_for):
    claims = decode_access_token(token_for("user-1", email="u@example.com"))
    assert claims["sub"] == "user-1"
    assert claims["email"] == "u@example.com"


def test_token_signed_with_another_secret_is_rejected():
    token = jwt.encode(
        {"sub": "user-1", "aud": "authenticated"}, "wrong-secret", algorithm="HS256"
    )
    with pytest.raises(ValueError):
        decode_access_token(token)


def test_expired_token_is_rejected(token_for):
    expired = token_for("user-1", exp=datetime.now(timezone.utc) - timedelta(minutes=1))
    with pytest.raises(ValueError):
        decode_access_token(expired)


def test_wrong_audience_is_rejected(token_for):
    with pytest.raises(ValueError):
        decode_access_token(token_for("user-1", aud="someone-else"))
