"""Routes exposing the curriculum catalog."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from discipleship.application.use_cases.curriculum import (
    list_assignments as list_assignments_uc,
    list_weekly_content as list_weekly_content_uc,
)
from discipleship.domain.entities import Profile
from discipleship.infrastructure.database import get_db
from discipleship.interfaces.api.dependencies import get_current_profile
from discipleship.interfaces.api.routes_helpers import to_http_exception
from discipleship.interfaces.api.schemas import AssignmentRead, WeeklyContentRead

router = APIRouter(prefix="/curriculum", tags=["curriculum"])


@router.get("/weeks", response_model=list[WeeklyContentRead])
def list_weeks(
    db: Session = Depends(get_db),
    current_profile: Profile = Depends(get_current_profile),
):
    return [WeeklyContentRead.model_validate(week) for week in list_weekly_content_uc(db)]


@router.get("/assignments", response_model=list[AssignmentRead])
def list_assignments(
    week: int | None = Query(default=None, description="Only assignments of this week"),
    db: Session = Depends(get_db),
    current_profile: Profile = Depends(get_current_profile),
):
    try:
        assignments = list_assignments_uc(db, week)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return [AssignmentRead.model_validate(assignment) for assignment in assignments]
