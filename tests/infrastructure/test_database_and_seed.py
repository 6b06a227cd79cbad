"""Tests for database helpers and curriculum seeding."""

from __future__ import annotations

import pytest

from discipleship.infrastructure.curriculum import CURRICULUM, seed_curriculum
from discipleship.infrastructure.database import normalize_database_url
from discipleship.infrastructure.repositories import CurriculumRepository


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("postgres://u:p@host/db", "postgresql://u:p@host/db"),
        (" postgresql://u:p@host/db ", "postgresql://u:p@host/db"),
        ("sqlite:///./local.db", "sqlite:///./local.db"),
    ],
)
def test_normalize_database_url(raw, expected):
    assert normalize_database_url(raw) == expected


def test_seed_is_idempotent(db_session):
    # The autouse fixture already seeded once.
    assert seed_curriculum(db_session) == 0

    repository = CurriculumRepository(db_session)
    weeks = repository.list_weeks()
    assert [week.week_number for week in weeks] == [1, 2, 3, 4, 5, 6]
    assert weeks[0].title == "Foundation of Faith"
    assert len(repository.list_assignments()) == sum(len(entry[4]) for entry in CURRICULUM)


def test_assignments_are_ordered_within_each_week(db_session):
    assignments = CurriculumRepository(db_session).list_assignments(2)
    assert [a.order_index for a in assignments] == [1, 2, 3]
    assert {a.week_number for a in assignments} == {2}
