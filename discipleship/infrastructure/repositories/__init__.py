"""Repository implementations for infrastructure layer."""

from ._persistence import commit_or_raise
from .assignment_progress_repository import AssignmentProgressRepository
from .curriculum_repository import CurriculumRepository
from .message_repository import MessageRepository
from .notification_repository import NotificationRepository
from .pairing_repository import CovenantFlip, PairingRepository
from .profile_repository import ProfileRepository
from .reflection_repository import ReflectionRepository

__all__ = [
    "AssignmentProgressRepository",
    "CovenantFlip",
    "CurriculumRepository",
    "MessageRepository",
    "NotificationRepository",
    "PairingRepository",
    "ProfileRepository",
    "ReflectionRepository",
    "commit_or_raise",
]
