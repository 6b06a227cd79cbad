from .curriculum import AssignmentRead, WeeklyContentRead
from .message import MessageCreate, MessageRead, MessagesReadResponse
from .notification import (
    MarkReadResponse,
    NotificationMarkReadRequest,
    NotificationRead,
    UnreadCountRead,
)
from .pairing import (
    CurrentPairingRead,
    EncouragementRequest,
    JoinPairingRequest,
    PairingRead,
    PartnerRead,
)
from .profile import (
    NotificationSettingsUpdate,
    OnboardingRequest,
    OnboardingResponse,
    ProfileRead,
    ProfileUpdate,
)
from .progress import (
    AssignmentProgressRead,
    AssignmentProgressUpdate,
    ProgressOverviewRead,
    ProgressUpdateRead,
    WeekDetailRead,
    WeekProgressRead,
)
from .reflection import ReflectionCreate, ReflectionRead

__all__ = [
    "AssignmentProgressRead",
    "AssignmentProgressUpdate",
    "AssignmentRead",
    "CurrentPairingRead",
    "EncouragementRequest",
    "JoinPairingRequest",
    "MarkReadResponse",
    "MessageCreate",
    "MessageRead",
    "MessagesReadResponse",
    "NotificationMarkReadRequest",
    "NotificationRead",
    "NotificationSettingsUpdate",
    "OnboardingRequest",
    "OnboardingResponse",
    "PairingRead",
    "PartnerRead",
    "ProfileRead",
    "ProfileUpdate",
    "ProgressOverviewRead",
    "ProgressUpdateRead",
    "ReflectionCreate",
    "ReflectionRead",
    "UnreadCountRead",
    "WeekDetailRead",
    "WeekProgressRead",
    "WeeklyContentRead",
]
