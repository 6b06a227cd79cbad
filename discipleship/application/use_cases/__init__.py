"""Aggregate application use cases."""

from .notifications import emit
from .pairings import create_pairing, join_pairing, sign_covenant
from .progress import record_assignment_completion

__all__ = [
    "create_pairing",
    "emit",
    "join_pairing",
    "record_assignment_completion",
    "sign_covenant",
]
