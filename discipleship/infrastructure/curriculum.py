"""Built-in six week curriculum and the routine that loads it."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from discipleship.domain.entities import Assignment, AssignmentType, WeeklyContent
from discipleship.infrastructure.repositories import CurriculumRepository

logger = logging.getLogger(__name__)

# (week, title, description, scripture, assignments as (type, title, description))
CURRICULUM: tuple[tuple[int, str, str, str, tuple[tuple[AssignmentType, str, str], ...]], ...] = (
    (
        1,
        "Foundation of Faith",
        "What it means to follow Jesus and why the journey starts with grace.",
        "Ephesians 2:8-10",
        (
            (AssignmentType.READING, "Read Ephesians 2", "Read the chapter twice, slowly."),
            (AssignmentType.REFLECTION, "Your faith story", "Write down how you came to faith."),
            (AssignmentType.DISCUSSION, "Share your story", "Talk through your stories together."),
        ),
    ),
    (
        2,
        "Prayer & Communion",
        "Learning to talk with God daily and honestly.",
        "Matthew 6:5-15",
        (
            (AssignmentType.READING, "Read Matthew 6", "Focus on the Lord's Prayer."),
            (AssignmentType.PRAYER, "Daily prayer time", "Pray for ten minutes each day this week."),
            (AssignmentType.REFLECTION, "Prayer journal", "Record what you prayed and what you noticed."),
        ),
    ),
    (
        3,
        "Scripture Study",
        "Reading the Bible for understanding and application.",
        "2 Timothy 3:14-17",
        (
            (AssignmentType.READING, "Read 2 Timothy 3", "Note every promise about Scripture."),
            (AssignmentType.ACTION, "Memorize a verse", "Choose one verse and learn it by heart."),
            (AssignmentType.DISCUSSION, "Study together", "Walk through a passage using observe, interpret, apply."),
        ),
    ),
    (
        4,
        "Community & Fellowship",
        "Why faith grows best alongside other believers.",
        "Acts 2:42-47",
        (
            (AssignmentType.READING, "Read Acts 2", "Look at how the early church lived together."),
            (AssignmentType.ACTION, "Join a gathering", "Attend a small group or service this week."),
            (AssignmentType.REFLECTION, "Who is your community?", "List the people who help you grow."),
        ),
    ),
    (
        5,
        "Service & Outreach",
        "Using your gifts to serve others.",
        "Mark 10:42-45",
        (
            (AssignmentType.READING, "Read Mark 10", "Consider what greatness means to Jesus."),
            (AssignmentType.ACTION, "Serve someone", "Do one concrete act of service this week."),
            (AssignmentType.DISCUSSION, "Debrief your service", "Share what serving taught you."),
        ),
    ),
    (
        6,
        "Living Your Faith",
        "Carrying what you learned into everyday life.",
        "James 1:22-25",
        (
            (AssignmentType.READING, "Read James 1", "Underline every instruction to act."),
            (AssignmentType.REFLECTION, "Looking back", "Write what changed over these six weeks."),
            (AssignmentType.PRAYER, "Commission prayer", "Pray together about the next season."),
        ),
    ),
)


def seed_curriculum(session: Session) -> int:
    """Insert missing weeks and their assignments; return the number of weeks added.

    Weeks already present are left untouched, so running this twice is safe.
    """

    repository = CurriculumRepository(session)
    existing_weeks = {week.week_number for week in repository.list_weeks()}
    added = 0
    for week_number, title, description, scripture, assignments in CURRICULUM:
        if week_number in existing_weeks:
            continue
        repository.add_week(
            WeeklyContent(
                id=None,
                week_number=week_number,
                title=title,
                description=description,
                scripture_reference=scripture,
                video_url=None,
            )
        )
        for order_index, (assignment_type, assignment_title, details) in enumerate(
            assignments, start=1
        ):
            repository.add_assignment(
                Assignment(
                    id=None,
                    week_number=week_number,
                    title=assignment_title,
                    description=details,
                    assignment_type=assignment_type,
                    order_index=order_index,
                )
            )
        added += 1
    if added:
        logger.info("Seeded %s curriculum weeks", added)
    return added


__all__ = ["CURRICULUM", "seed_curriculum"]
