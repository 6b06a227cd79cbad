"""ORM models used by the application infrastructure."""

from .assignment_progress import AssignmentProgressModel
from .curriculum import AssignmentModel, WeeklyContentModel
from .message import MessageModel
from .notification import NotificationModel
from .pairing import PairingModel
from .profile import ProfileModel
from .reflection import ReflectionModel

__all__ = [
    "AssignmentModel",
    "AssignmentProgressModel",
    "MessageModel",
    "NotificationModel",
    "PairingModel",
    "ProfileModel",
    "ReflectionModel",
    "WeeklyContentModel",
]
