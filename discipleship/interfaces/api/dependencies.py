"""FastAPI dependency utilities."""

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from discipleship.application.use_cases.profiles import ensure_profile
from discipleship.domain.entities import Profile
from discipleship.domain.exceptions import PersistenceError
from discipleship.infrastructure.database import get_db
from discipleship.infrastructure.security import decode_access_token

# Tokens are issued by the external identity provider; this URL only feeds the docs.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/v1/token")


def _credentials_exception() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )


def resolve_current_profile(token: str, db: Session) -> Profile:
    """Resolve the profile behind ``token``, creating it on first use."""

    try:
        payload = decode_access_token(token)
    except ValueError as exc:
        raise _credentials_exception() from exc

    subject = payload.get("sub")
    if not isinstance(subject, str) or not subject:
        raise _credentials_exception()
    email = payload.get("email")

    try:
        return ensure_profile(db, subject, email=email if isinstance(email, str) else None)
    except PersistenceError as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Profile storage unavailable",
        ) from exc


def get_current_profile(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> Profile:
    """Return the authenticated profile from the provided token."""

    return resolve_current_profile(token, db)


def require_onboarded(current_profile: Profile = Depends(get_current_profile)) -> Profile:
    """Ensure the profile finished onboarding and picked a role."""

    if not current_profile.onboarding_complete or current_profile.role is None:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Complete onboarding first",
        )
    return current_profile
