"""Verification of access tokens issued by the identity provider."""

from __future__ import annotations

from typing import Any

from jose import JWTError, jwt

from discipleship.config import get_settings


def decode_access_token(token: str) -> dict[str, Any]:
    """Return the verified claims of ``token`` or raise ``ValueError``."""

    settings = get_settings()
    options = {"verify_aud": bool(settings.jwt_audience)}
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience or None,
            options=options,
        )
    except JWTError as exc:
        raise ValueError("Could not validate credentials") from exc
    if not claims.get("sub"):
        raise ValueError("Could not validate credentials")
    return claims


__all__ = ["decode_access_token"]
