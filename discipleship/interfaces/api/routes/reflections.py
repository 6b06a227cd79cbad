"""Routes for weekly reflections."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from discipleship.application.use_cases.reflections import (
    create_reflection as create_reflection_uc,
    list_reflections as list_reflections_uc,
)
from discipleship.domain.entities import Profile
from discipleship.infrastructure.database import get_db
from discipleship.interfaces.api.dependencies import require_onboarded
from discipleship.interfaces.api.routes_helpers import to_http_exception
from discipleship.interfaces.api.schemas import ReflectionCreate, ReflectionRead

router = APIRouter(prefix="/pairings", tags=["reflections"])


@router.get(
    "/{pairing_id}/weeks/{week_number}/reflections",
    response_model=list[ReflectionRead],
)
def list_reflections(
    pairing_id: int,
    week_number: int,
    db: Session = Depends(get_db),
    current_profile: Profile = Depends(require_onboarded),
):
    """Return shared reflections and the caller's private ones, newest first."""

    try:
        reflections = list_reflections_uc(
            db, pairing_id, viewer_id=current_profile.id, week_number=week_number
        )
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return [ReflectionRead.model_validate(reflection) for reflection in reflections]


@router.post(
    "/{pairing_id}/weeks/{week_number}/reflections",
    response_model=ReflectionRead,
    status_code=status.HTTP_201_CREATED,
)
def create_reflection(
    pairing_id: int,
    week_number: int,
    payload: ReflectionCreate,
    db: Session = Depends(get_db),
    current_profile: Profile = Depends(require_onboarded),
):
    try:
        reflection = create_reflection_uc(
            db,
            pairing_id,
            user_id=current_profile.id,
            week_number=week_number,
            text=payload.reflection_text,
            is_shared=payload.is_shared,
        )
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return ReflectionRead.model_validate(reflection)
