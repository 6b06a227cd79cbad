"""Domain entities exposed by the application."""

from .assignment_progress import AssignmentProgress, ProgressStatus
from .curriculum import Assignment, AssignmentType, WeeklyContent
from .message import Message
from .notification import (
    DEFAULT_NOTIFICATION_ROUTE,
    NOTIFICATION_ROUTES,
    Notification,
    NotificationType,
    notification_target_url,
)
from .pairing import (
    FIRST_WEEK,
    MAX_WEEK,
    OPEN_PAIRING_STATUSES,
    CovenantSide,
    Pairing,
    PairingStatus,
)
from .profile import Profile, UserRole
from .reflection import Reflection
from .week_progress import WeekProgress

__all__ = [
    "Assignment",
    "AssignmentProgress",
    "AssignmentType",
    "CovenantSide",
    "DEFAULT_NOTIFICATION_ROUTE",
    "FIRST_WEEK",
    "MAX_WEEK",
    "Message",
    "NOTIFICATION_ROUTES",
    "Notification",
    "NotificationType",
    "OPEN_PAIRING_STATUSES",
    "Pairing",
    "PairingStatus",
    "Profile",
    "ProgressStatus",
    "Reflection",
    "UserRole",
    "WeekProgress",
    "WeeklyContent",
    "notification_target_url",
]
