"""Use cases for the pairing lifecycle."""

from .create_pairing import create_pairing, regenerate_invite_code
from .get_pairing import get_current_pairing, get_pairing_for_participant
from .join_pairing import join_pairing
from .sign_covenant import sign_covenant

__all__ = [
    "create_pairing",
    "get_current_pairing",
    "get_pairing_for_participant",
    "join_pairing",
    "regenerate_invite_code",
    "sign_covenant",
]
