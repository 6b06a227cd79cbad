"""Use cases for managing profiles."""

from .complete_onboarding import complete_onboarding
from .ensure_profile import ensure_profile, get_profile
from .update_profile import update_notification_settings, update_profile

__all__ = [
    "complete_onboarding",
    "ensure_profile",
    "get_profile",
    "update_notification_settings",
    "update_profile",
]
