"""Routes for week pages, the progress timeline and assignment updates."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from discipleship.application.use_cases.progress import (
    get_progress_overview as get_progress_overview_uc,
    get_week_detail as get_week_detail_uc,
    save_assignment_progress as save_assignment_progress_uc,
)
from discipleship.domain.entities import Profile
from discipleship.infrastructure.database import get_db
from discipleship.interfaces.api.dependencies import require_onboarded
from discipleship.interfaces.api.routes_helpers import to_http_exception
from discipleship.interfaces.api.schemas import (
    AssignmentProgressRead,
    AssignmentProgressUpdate,
    AssignmentRead,
    ProgressOverviewRead,
    ProgressUpdateRead,
    ReflectionRead,
    WeekDetailRead,
    WeeklyContentRead,
    WeekProgressRead,
)

router = APIRouter(prefix="/pairings", tags=["progress"])


@router.get("/{pairing_id}/progress", response_model=ProgressOverviewRead)
def read_progress(
    pairing_id: int,
    db: Session = Depends(get_db),
    current_profile: Profile = Depends(require_onboarded),
):
    """Return the per-week timeline computed from the learner's completions."""

    try:
        overview = get_progress_overview_uc(db, pairing_id, profile_id=current_profile.id)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return ProgressOverviewRead(
        pairing_id=pairing_id,
        current_week=overview.pairing.current_week,
        weeks=[WeekProgressRead.model_validate(week) for week in overview.weeks],
        journey_complete=overview.journey_complete,
    )


@router.get("/{pairing_id}/weeks/{week_number}", response_model=WeekDetailRead)
def read_week(
    pairing_id: int,
    week_number: int,
    db: Session = Depends(get_db),
    current_profile: Profile = Depends(require_onboarded),
):
    try:
        detail = get_week_detail_uc(
            db, pairing_id, profile_id=current_profile.id, week_number=week_number
        )
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return WeekDetailRead(
        week=WeeklyContentRead.model_validate(detail.week),
        assignments=[AssignmentRead.model_validate(item) for item in detail.assignments],
        progress=[AssignmentProgressRead.model_validate(item) for item in detail.progress],
        reflections=[ReflectionRead.model_validate(item) for item in detail.reflections],
    )


@router.put(
    "/{pairing_id}/assignments/{assignment_id}/progress",
    response_model=ProgressUpdateRead,
)
def update_assignment_progress(
    pairing_id: int,
    assignment_id: int,
    payload: AssignmentProgressUpdate,
    db: Session = Depends(get_db),
    current_profile: Profile = Depends(require_onboarded),
):
    """Save status and notes; completing the last assignment unlocks the next week."""

    try:
        update = save_assignment_progress_uc(
            db,
            pairing_id,
            assignment_id,
            user_id=current_profile.id,
            status=payload.status,
            notes=payload.notes,
        )
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return ProgressUpdateRead(
        progress=AssignmentProgressRead.model_validate(update.progress),
        current_week=update.current_week,
        advanced=update.advanced,
    )
