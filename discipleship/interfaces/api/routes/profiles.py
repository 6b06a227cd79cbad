"""Routes for the caller's own profile."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from discipleship.application.use_cases.profiles import (
    complete_onboarding as complete_onboarding_uc,
    update_notification_settings as update_notification_settings_uc,
    update_profile as update_profile_uc,
)
from discipleship.domain.entities import Profile
from discipleship.infrastructure.database import get_db
from discipleship.interfaces.api.dependencies import get_current_profile
from discipleship.interfaces.api.routes_helpers import to_http_exception
from discipleship.interfaces.api.schemas import (
    NotificationSettingsUpdate,
    OnboardingRequest,
    OnboardingResponse,
    PairingRead,
    ProfileRead,
    ProfileUpdate,
)

router = APIRouter(prefix="/profiles", tags=["profiles"])


@router.get("/me", response_model=ProfileRead)
def read_current_profile(current_profile: Profile = Depends(get_current_profile)):
    return ProfileRead.model_validate(current_profile)


@router.patch("/me", response_model=ProfileRead)
def update_current_profile(
    payload: ProfileUpdate,
    db: Session = Depends(get_db),
    current_profile: Profile = Depends(get_current_profile),
):
    """Edit name, bio, phone or avatar; omitted fields stay as they are."""

    try:
        profile = update_profile_uc(
            db, current_profile.id, **payload.model_dump(exclude_unset=True)
        )
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return ProfileRead.model_validate(profile)


@router.post("/me/onboarding", response_model=OnboardingResponse)
def complete_onboarding(
    payload: OnboardingRequest,
    db: Session = Depends(get_db),
    current_profile: Profile = Depends(get_current_profile),
):
    """Choose a role; leaders receive their pending pairing and invite code."""

    try:
        profile, pairing = complete_onboarding_uc(
            db,
            current_profile.id,
            full_name=payload.full_name,
            role=payload.role,
            bio=payload.bio,
            phone=payload.phone,
        )
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return OnboardingResponse(
        profile=ProfileRead.model_validate(profile),
        pairing=PairingRead.model_validate(pairing) if pairing else None,
    )


@router.put("/me/notification-settings", response_model=ProfileRead)
def update_notification_settings(
    payload: NotificationSettingsUpdate,
    db: Session = Depends(get_db),
    current_profile: Profile = Depends(get_current_profile),
):
    try:
        profile = update_notification_settings_uc(
            db, current_profile.id, **payload.model_dump(exclude_unset=True)
        )
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return ProfileRead.model_validate(profile)
