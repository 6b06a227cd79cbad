"""Routes for creating, joining and signing pairings."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from discipleship.application.use_cases.messages import count_unread_messages
from discipleship.application.use_cases.notifications import (
    send_encouragement as send_encouragement_uc,
)
from discipleship.application.use_cases.pairings import (
    create_pairing as create_pairing_uc,
    get_current_pairing as get_current_pairing_uc,
    join_pairing as join_pairing_uc,
    regenerate_invite_code as regenerate_invite_code_uc,
    sign_covenant as sign_covenant_uc,
)
from discipleship.domain.entities import Pairing, Profile
from discipleship.infrastructure.database import get_db
from discipleship.infrastructure.notifications import notification_manager
from discipleship.infrastructure.repositories import ProfileRepository
from discipleship.interfaces.api.dependencies import require_onboarded
from discipleship.interfaces.api.routes_helpers import to_http_exception
from discipleship.interfaces.api.schemas import (
    CurrentPairingRead,
    EncouragementRequest,
    JoinPairingRequest,
    PairingRead,
    PartnerRead,
)

router = APIRouter(prefix="/pairings", tags=["pairings"])


def _to_read_model(pairing: Pairing) -> PairingRead:
    return PairingRead.model_validate(pairing)


@router.post("", response_model=PairingRead, status_code=status.HTTP_201_CREATED)
def create_pairing(
    db: Session = Depends(get_db),
    current_profile: Profile = Depends(require_onboarded),
):
    """Open a pending pairing and return its invite code."""

    try:
        pairing = create_pairing_uc(db, leader_id=current_profile.id)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(pairing)


@router.get("/current", response_model=CurrentPairingRead)
def read_current_pairing(
    db: Session = Depends(get_db),
    current_profile: Profile = Depends(require_onboarded),
):
    """Return the caller's open pairing, the partner and presence information."""

    pairing = get_current_pairing_uc(db, current_profile.id)
    if pairing is None or pairing.id is None:
        return CurrentPairingRead()

    partner = None
    partner_id = pairing.partner_id(current_profile.id)
    if partner_id:
        partner_profile = ProfileRepository(db).get(partner_id)
        if partner_profile is not None:
            partner = PartnerRead(
                id=partner_profile.id,
                full_name=partner_profile.full_name,
                avatar_url=partner_profile.avatar_url,
                is_online=notification_manager.is_online(partner_profile.id),
            )

    try:
        unread = count_unread_messages(db, pairing.id, viewer_id=current_profile.id)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return CurrentPairingRead(
        pairing=_to_read_model(pairing), partner=partner, unread_messages=unread
    )


@router.post("/join", response_model=PairingRead)
def join_pairing(
    payload: JoinPairingRequest,
    db: Session = Depends(get_db),
    current_profile: Profile = Depends(require_onboarded),
):
    try:
        pairing = join_pairing_uc(
            db, invite_code=payload.invite_code, learner_id=current_profile.id
        )
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(pairing)


@router.post("/{pairing_id}/invite-code", response_model=PairingRead)
def regenerate_invite_code(
    pairing_id: int,
    db: Session = Depends(get_db),
    current_profile: Profile = Depends(require_onboarded),
):
    """Issue a new invite code; the previous one stops working immediately."""

    try:
        pairing = regenerate_invite_code_uc(db, pairing_id, leader_id=current_profile.id)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(pairing)


@router.post("/{pairing_id}/covenant", response_model=PairingRead)
def sign_covenant(
    pairing_id: int,
    db: Session = Depends(get_db),
    current_profile: Profile = Depends(require_onboarded),
):
    try:
        pairing = sign_covenant_uc(db, pairing_id, profile_id=current_profile.id)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(pairing)


@router.post("/{pairing_id}/encouragement", status_code=status.HTTP_204_NO_CONTENT)
def send_encouragement(
    pairing_id: int,
    payload: EncouragementRequest,
    db: Session = Depends(get_db),
    current_profile: Profile = Depends(require_onboarded),
) -> Response:
    try:
        send_encouragement_uc(
            db, pairing_id, sender_id=current_profile.id, message=payload.message
        )
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
