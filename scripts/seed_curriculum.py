"""Utility script to load the built-in curriculum into the database."""

from __future__ import annotations

import argparse

from discipleship.domain.exceptions import PersistenceError
from discipleship.infrastructure.curriculum import seed_curriculum
from discipleship.infrastructure.database import SessionLocal, initialize_database


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for curriculum seeding."""

    parser = argparse.ArgumentParser(
        description="Create the tables if needed and load the six week curriculum.",
    )
    parser.add_argument(
        "--skip-create",
        action="store_true",
        help="Assume the tables already exist and only insert curriculum rows.",
    )
    return parser.parse_args()


def main() -> None:
    """Seed the curriculum using the configured database."""

    args = parse_args()
    if not args.skip_create:
        initialize_database()

    session = SessionLocal()
    try:
        added = seed_curriculum(session)
    except PersistenceError as exc:
        raise SystemExit(f"Could not seed the curriculum: {exc}") from exc
    else:
        if added:
            print(f"Added {added} curriculum weeks.")
        else:
            print("Curriculum already present; nothing to do.")
    finally:
        session.close()


if __name__ == "__main__":
    main()
