"""Shared fixtures: a throwaway SQLite database seeded with the curriculum."""

from __future__ import annotations

import os
import tempfile
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

TEST_DB_PATH = Path(tempfile.gettempdir()) / "discipleship-tests.db"
TEST_JWT_SECRET = "test-secret"

# The engine is built at import time, so configure it before importing the package.
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["JWT_SECRET"] = TEST_JWT_SECRET
os.environ.pop("SENDGRID_API_KEY", None)
os.environ.pop("SENDGRID_SENDER", None)

from jose import jwt  # noqa: E402

from discipleship.domain.entities import (  # noqa: E402
    Notification,
    Pairing,
    PairingStatus,
    Profile,
    UserRole,
)
from discipleship.infrastructure import database  # noqa: E402
from discipleship.infrastructure.curriculum import seed_curriculum  # noqa: E402
from discipleship.infrastructure.notifications import (  # noqa: E402
    PushRequest,
    clear_deliveries,
    register_delivery,
)
from discipleship.infrastructure.repositories import (  # noqa: E402
    PairingRepository,
    ProfileRepository,
)


class RecordingDelivery:
    """Delivery channel that remembers every request it was handed."""

    def __init__(self) -> None:
        self.requests: list[PushRequest] = []

    def deliver(self, request: PushRequest, notification: Notification) -> None:
        self.requests.append(request)

    def for_user(self, user_id: str) -> list[PushRequest]:
        return [request for request in self.requests if request.recipient_id == user_id]


@pytest.fixture(autouse=True)
def setup_database():
    """Give every test a fresh schema with the built-in curriculum."""

    database.Base.metadata.drop_all(bind=database.engine, checkfirst=True)
    database.initialize_database()
    session = database.SessionLocal()
    try:
        seed_curriculum(session)
    finally:
        session.close()
    clear_deliveries()
    yield
    clear_deliveries()


@pytest.fixture()
def db_session():
    session = database.SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def recorder() -> RecordingDelivery:
    delivery = RecordingDelivery()
    register_delivery(delivery)
    return delivery


@pytest.fixture()
def make_profile(db_session):
    def _make_profile(
        profile_id: str,
        *,
        role: UserRole | None = UserRole.LEARNER,
        full_name: str | None = None,
        email: str | None = None,
    ) -> Profile:
        return ProfileRepository(db_session).create(
            Profile(
                id=profile_id,
                email=email or f"{profile_id}@example.com",
                full_name=full_name or profile_id.title(),
                role=role,
                onboarding_complete=role is not None,
            )
        )

    return _make_profile


@pytest.fixture()
def leader(make_profile) -> Profile:
    return make_profile("leader", role=UserRole.LEADER, full_name="Grace Leader")


@pytest.fixture()
def learner(make_profile) -> Profile:
    return make_profile("learner", role=UserRole.LEARNER, full_name="Sam Learner")


@pytest.fixture()
def pending_pairing(db_session, leader) -> Pairing:
    return PairingRepository(db_session).create(
        Pairing(id=None, leader_id=leader.id, learner_id=None, invite_code="AB3D9F")
    )


@pytest.fixture()
def active_pairing(db_session, leader, learner) -> Pairing:
    return PairingRepository(db_session).create(
        Pairing(
            id=None,
            leader_id=leader.id,
            learner_id=learner.id,
            invite_code="QRS234",
            status=PairingStatus.ACTIVE,
            started_at=datetime.now(timezone.utc),
        )
    )


def make_token(subject: str, *, email: str | None = None, **claims) -> str:
    payload = {
        "sub": subject,
        "aud": "authenticated",
        "exp": datetime.now(timezone.utc) + timedelta(minutes=5),
        **claims,
    }
    if email:
        payload["email"] = email
    return jwt.encode(payload, TEST_JWT_SECRET, algorithm="HS256")


def auth_headers(subject: str, **kwargs) -> dict[str, str]:
    return {"Authorization": f"Bearer {make_token(subject, **kwargs)}"}


@pytest.fixture()
def token_for():
    return make_token


@pytest.fixture()
def headers_for():
    return auth_headers
