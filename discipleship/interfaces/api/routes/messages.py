"""Routes for the pairing conversation."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from discipleship.application.use_cases.messages import (
    list_messages as list_messages_uc,
    mark_messages_read as mark_messages_read_uc,
    send_message as send_message_uc,
)
from discipleship.domain.entities import Profile
from discipleship.infrastructure.database import get_db
from discipleship.interfaces.api.dependencies import require_onboarded
from discipleship.interfaces.api.routes_helpers import to_http_exception
from discipleship.interfaces.api.schemas import (
    MessageCreate,
    MessageRead,
    MessagesReadResponse,
)

router = APIRouter(prefix="/pairings", tags=["messages"])


@router.get("/{pairing_id}/messages", response_model=list[MessageRead])
def list_messages(
    pairing_id: int,
    limit: int | None = Query(default=None, ge=1, le=500),
    db: Session = Depends(get_db),
    current_profile: Profile = Depends(require_onboarded),
):
    """Return the conversation oldest first; ``limit`` keeps only the newest messages."""

    try:
        messages = list_messages_uc(
            db, pairing_id, viewer_id=current_profile.id, limit=limit
        )
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return [MessageRead.model_validate(message) for message in messages]


@router.post(
    "/{pairing_id}/messages",
    response_model=MessageRead,
    status_code=status.HTTP_201_CREATED,
)
def send_message(
    pairing_id: int,
    payload: MessageCreate,
    db: Session = Depends(get_db),
    current_profile: Profile = Depends(require_onboarded),
):
    try:
        message = send_message_uc(
            db, pairing_id, sender_id=current_profile.id, content=payload.content
        )
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return MessageRead.model_validate(message)


@router.post("/{pairing_id}/messages/read", response_model=MessagesReadResponse)
def mark_messages_read(
    pairing_id: int,
    db: Session = Depends(get_db),
    current_profile: Profile = Depends(require_onboarded),
):
    try:
        updated = mark_messages_read_uc(db, pairing_id, viewer_id=current_profile.id)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return MessagesReadResponse(updated=updated)
