"""Domain events that produce user notifications.

Each event knows who should hear about it and how to phrase it; the
application layer persists one notification per draft and forwards it to the
delivery channels.
"""

from __future__ import annotations

from dataclasses import dataclass

from .entities import NotificationType

MESSAGE_PREVIEW_LENGTH = 100


@dataclass(frozen=True)
class NotificationDraft:
    """Recipient-addressed notification content not yet persisted."""

    user_id: str
    pairing_id: int | None
    type: NotificationType
    title: str
    message: str


def preview(content: str, *, length: int = MESSAGE_PREVIEW_LENGTH) -> str:
    """Shorten ``content`` to ``length`` characters followed by an ellipsis."""

    if len(content) > length:
        return content[:length] + "..."
    return content


class DomainEvent:
    """Base class for events; subclasses return one draft per recipient."""

    def drafts(self) -> list[NotificationDraft]:  # pragma: no cover - interface
        raise NotImplementedError


@dataclass(frozen=True)
class NewMessage(DomainEvent):
    recipient_id: str
    sender_name: str
    pairing_id: int
    content: str

    def drafts(self) -> list[NotificationDraft]:
        return [
            NotificationDraft(
                user_id=self.recipient_id,
                pairing_id=self.pairing_id,
                type=NotificationType.MESSAGE,
                title=f"New message from {self.sender_name}",
                message=preview(self.content),
            )
        ]


@dataclass(frozen=True)
class AssignmentCompleted(DomainEvent):
    leader_id: str
    learner_name: str
    pairing_id: int
    assignment_title: str
    week_number: int

    def drafts(self) -> list[NotificationDraft]:
        return [
            NotificationDraft(
                user_id=self.leader_id,
                pairing_id=self.pairing_id,
                type=NotificationType.ASSIGNMENT,
                title=f"{self.learner_name} completed an assignment",
                message=(
                    f'Week {self.week_number}: "{self.assignment_title}" '
                    "has been marked as complete."
                ),
            )
        ]


@dataclass(frozen=True)
class WeekCompleted(DomainEvent):
    partner_id: str
    completed_by_name: str
    pairing_id: int
    week_number: int
    week_title: str

    def drafts(self) -> list[NotificationDraft]:
        return [
            NotificationDraft(
                user_id=self.partner_id,
                pairing_id=self.pairing_id,
                type=NotificationType.WEEK_COMPLETE,
                title=f"Week {self.week_number} completed!",
                message=(
                    f"{self.completed_by_name} has completed all assignments "
                    f'for "{self.week_title}".'
                ),
            )
        ]


@dataclass(frozen=True)
class WeekUnlocked(DomainEvent):
    leader_id: str
    learner_id: str
    pairing_id: int
    week_number: int
    week_title: str

    def drafts(self) -> list[NotificationDraft]:
        return [
            NotificationDraft(
                user_id=user_id,
                pairing_id=self.pairing_id,
                type=NotificationType.WEEK_COMPLETE,
                title=f"Week {self.week_number} Unlocked!",
                message=f'Congratulations! You can now begin "{self.week_title}".',
            )
            for user_id in (self.leader_id, self.learner_id)
        ]


@dataclass(frozen=True)
class CovenantSigned(DomainEvent):
    partner_id: str
    signer_name: str
    pairing_id: int

    def drafts(self) -> list[NotificationDraft]:
        return [
            NotificationDraft(
                user_id=self.partner_id,
                pairing_id=self.pairing_id,
                type=NotificationType.COVENANT,
                title=f"{self.signer_name} signed the covenant",
                message=(
                    "Your partner has signed the discipleship covenant. "
                    "Sign yours to begin the journey!"
                ),
            )
        ]


@dataclass(frozen=True)
class CovenantComplete(DomainEvent):
    leader_id: str
    leader_name: str
    learner_id: str
    learner_name: str
    pairing_id: int

    def drafts(self) -> list[NotificationDraft]:
        # Each side is told the name of the other.
        recipients = (
            (self.leader_id, self.learner_name),
            (self.learner_id, self.leader_name),
        )
        return [
            NotificationDraft(
                user_id=user_id,
                pairing_id=self.pairing_id,
                type=NotificationType.COVENANT,
                title="Covenant Complete!",
                message=(
                    f"Both you and {partner_name} have signed. "
                    "Your discipleship journey begins now!"
                ),
            )
            for user_id, partner_name in recipients
        ]


@dataclass(frozen=True)
class LearnerJoined(DomainEvent):
    leader_id: str
    learner_name: str
    pairing_id: int

    def drafts(self) -> list[NotificationDraft]:
        return [
            NotificationDraft(
                user_id=self.leader_id,
                pairing_id=self.pairing_id,
                type=NotificationType.PAIRING,
                title=f"{self.learner_name} joined your journey",
                message=(
                    f"{self.learner_name} has used your invite code and is ready "
                    "to begin. Sign the covenant together to start."
                ),
            )
        ]


@dataclass(frozen=True)
class Encouragement(DomainEvent):
    learner_id: str
    leader_name: str
    pairing_id: int
    content: str

    def drafts(self) -> list[NotificationDraft]:
        return [
            NotificationDraft(
                user_id=self.learner_id,
                pairing_id=self.pairing_id,
                type=NotificationType.ENCOURAGEMENT,
                title=f"{self.leader_name} sent you encouragement",
                message=preview(self.content),
            )
        ]


__all__ = [
    "AssignmentCompleted",
    "CovenantComplete",
    "CovenantSigned",
    "DomainEvent",
    "Encouragement",
    "LearnerJoined",
    "MESSAGE_PREVIEW_LENGTH",
    "NewMessage",
    "NotificationDraft",
    "WeekCompleted",
    "WeekUnlocked",
    "preview",
]
