"""Endpoints and websocket handler for realtime notifications."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import (
    APIRouter,
    Depends,
    HTTPException,
    Query,
    Response,
    WebSocket,
    WebSocketDisconnect,
    status,
)
from sqlalchemy.orm import Session

from discipleship.application.use_cases.notifications import (
    count_unread_notifications,
    delete_notification as delete_notification_uc,
    list_notifications as list_notifications_uc,
    mark_all_notifications_read,
    mark_notifications_read,
)
from discipleship.application.use_cases.pairings import get_pairing_for_participant
from discipleship.domain.entities import Notification, Profile
from discipleship.infrastructure.database import SessionLocal, get_db
from discipleship.infrastructure.notifications import (
    notification_manager,
    realtime_event_publisher,
    serialize_notification,
)
from discipleship.interfaces.api.dependencies import (
    get_current_profile,
    resolve_current_profile,
)
from discipleship.interfaces.api.routes_helpers import to_http_exception
from discipleship.interfaces.api.schemas import (
    MarkReadResponse,
    NotificationMarkReadRequest,
    NotificationRead,
    UnreadCountRead,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])
logger = logging.getLogger(__name__)


def _notification_to_schema(notification: Notification) -> NotificationRead:
    return NotificationRead(
        id=notification.id or 0,
        user_id=notification.user_id,
        pairing_id=notification.pairing_id,
        type=notification.type,
        title=notification.title,
        message=notification.message,
        read=notification.read,
        url=notification.target_url,
        created_at=notification.created_at,
    )


@router.get("", response_model=list[NotificationRead])
def list_notifications(
    unread_only: bool = False,
    limit: int = Query(default=50, ge=1, le=200),
    db: Session = Depends(get_db),
    current_profile: Profile = Depends(get_current_profile),
) -> list[NotificationRead]:
    """Return the most recent notifications for the authenticated profile."""

    notifications = list_notifications_uc(
        db, current_profile.id, unread_only=unread_only, limit=limit
    )
    return [_notification_to_schema(notification) for notification in notifications]


@router.get("/unread-count", response_model=UnreadCountRead)
def unread_count(
    db: Session = Depends(get_db),
    current_profile: Profile = Depends(get_current_profile),
) -> UnreadCountRead:
    return UnreadCountRead(unread=count_unread_notifications(db, current_profile.id))


@router.post("/read", response_model=MarkReadResponse)
def mark_read(
    payload: NotificationMarkReadRequest,
    db: Session = Depends(get_db),
    current_profile: Profile = Depends(get_current_profile),
) -> MarkReadResponse:
    try:
        updated = mark_notifications_read(
            db, payload.unique_ids(), user_id=current_profile.id
        )
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return MarkReadResponse(updated=updated)


@router.post("/read-all", response_model=MarkReadResponse)
def mark_all_read(
    db: Session = Depends(get_db),
    current_profile: Profile = Depends(get_current_profile),
) -> MarkReadResponse:
    try:
        updated = mark_all_notifications_read(db, current_profile.id)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return MarkReadResponse(updated=updated)


@router.delete("/{notification_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_notification(
    notification_id: int,
    db: Session = Depends(get_db),
    current_profile: Profile = Depends(get_current_profile),
) -> Response:
    try:
        delete_notification_uc(db, notification_id, user_id=current_profile.id)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def _acknowledge(profile_id: str, ids: list[Any]) -> None:
    valid_ids = [value for value in ids if isinstance(value, int)]
    if not valid_ids:
        return
    session = SessionLocal()
    try:
        mark_notifications_read(session, valid_ids, user_id=profile_id)
    except ValueError:
        logger.warning("Could not acknowledge notifications for %s", profile_id)
    finally:
        session.close()


def _relay_typing(profile_id: str, message: dict[str, Any]) -> None:
    pairing_id = message.get("pairing_id")
    if not isinstance(pairing_id, int):
        return
    session = SessionLocal()
    try:
        pairing = get_pairing_for_participant(session, pairing_id, profile_id)
    except ValueError:
        return
    finally:
        session.close()

    partner_id = pairing.partner_id(profile_id)
    if partner_id:
        realtime_event_publisher.dispatch(
            partner_id,
            event_type="typing",
            payload={
                "pairing_id": pairing_id,
                "user_id": profile_id,
                "is_typing": bool(message.get("is_typing", True)),
            },
        )


@router.websocket("/ws")
async def notifications_websocket(websocket: WebSocket) -> None:
    """Websocket endpoint that streams notifications and change events."""

    token = websocket.query_params.get("token")
    if not token:
        await websocket.close(code=1008)
        return

    session = SessionLocal()
    try:
        profile = resolve_current_profile(token, session)
        pending_notifications = list_notifications_uc(
            session, profile.id, unread_only=True
        )
    except HTTPException:
        await websocket.close(code=1008)
        return
    finally:
        session.close()

    await notification_manager.connect(profile.id, websocket)
    try:
        await websocket.send_json(
            {
                "type": "init",
                "data": [serialize_notification(n) for n in pending_notifications],
            }
        )
        while True:
            try:
                message = await websocket.receive_json()
            except WebSocketDisconnect:
                raise
            except (ValueError, KeyError, TypeError):
                # Malformed JSON or a binary frame.
                continue

            if not isinstance(message, dict):
                continue

            message_type = message.get("type")
            if message_type == "ping":
                await websocket.send_json({"type": "pong"})
            elif message_type == "ack":
                ids = message.get("ids", [])
                if isinstance(ids, list):
                    _acknowledge(profile.id, ids)
            elif message_type == "typing":
                _relay_typing(profile.id, message)
    except WebSocketDisconnect:
        pass
    finally:
        notification_manager.disconnect(profile.id, websocket)
