"""Invite code generation and normalisation.

Codes are six characters drawn with a cryptographic random source from an
alphabet without look-alike characters (no ``0``/``O`` or ``1``/``I``), so
they can be read aloud or typed from a screenshot.
"""

from __future__ import annotations

import secrets

from .exceptions import ValidationError

INVITE_CHARSET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"
INVITE_LENGTH = 6


def generate_invite_code() -> str:
    """Generate a random invite code."""
    return "".join(secrets.choice(INVITE_CHARSET) for _ in range(INVITE_LENGTH))


def normalize_invite_code(code: str | None) -> str:
    """Return ``code`` upper-cased and stripped, or raise ``ValidationError``."""

    normalized = (code or "").strip().upper()
    if len(normalized) != INVITE_LENGTH:
        raise ValidationError(
            f"Invite codes are {INVITE_LENGTH} characters long"
        )
    if any(char not in INVITE_CHARSET for char in normalized):
        raise ValidationError("Invite code contains invalid characters")
    return normalized


__all__ = [
    "INVITE_CHARSET",
    "INVITE_LENGTH",
    "generate_invite_code",
    "normalize_invite_code",
]
