"""Profile schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from discipleship.domain.entities import UserRole

from .pairing import PairingRead


class ProfileRead(BaseModel):
    id: str
    email: str | None
    full_name: str | None
    role: UserRole | None
    bio: str | None
    phone: str | None
    avatar_url: str | None
    onboarding_complete: bool
    email_notifications: bool
    message_notifications: bool
    progress_notifications: bool
    created_at: datetime | None
    updated_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class ProfileUpdate(BaseModel):
    full_name: str | None = Field(default=None, max_length=120)
    bio: str | None = Field(default=None, max_length=2000)
    phone: str | None = Field(default=None, max_length=40)
    avatar_url: str | None = Field(default=None, max_length=500)

    model_config = ConfigDict(extra="forbid")


class OnboardingRequest(BaseModel):
    full_name: str = Field(..., min_length=1, max_length=120)
    role: UserRole
    bio: str | None = Field(default=None, max_length=2000)
    phone: str | None = Field(default=None, max_length=40)


class OnboardingResponse(BaseModel):
    profile: ProfileRead
    pairing: PairingRead | None = None


class NotificationSettingsUpdate(BaseModel):
    email_notifications: bool | None = None
    message_notifications: bool | None = None
    progress_notifications: bool | None = None

    model_config = ConfigDict(extra="forbid")


__all__ = [
    "NotificationSettingsUpdate",
    "OnboardingRequest",
    "OnboardingResponse",
    "ProfileRead",
    "ProfileUpdate",
]
