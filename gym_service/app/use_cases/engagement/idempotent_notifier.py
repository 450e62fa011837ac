"""
Idempotent Notifier

Records a notification at most once per (user, type, window) and then tries
to deliver it.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional, Tuple, Union
from uuid import UUID

from gym_service.app.services.clock import Clock, day_bounds
from gym_service.app.services.message_sender import IMessageSender
from gym_service.app.services.message_templates import render_notification_body, subject_for
from gym_service.app.services.unit_of_work import UnitOfWork
from gym_service.domain.entities import Notification, NotificationType, User
from .dtos import NotifyOutcome, NotifyStatus

logger = logging.getLogger(__name__)

MAX_MESSAGE_LENGTH = 500


@dataclass(frozen=True)
class DedupeWindow:
    """Span within which a second notification of the same type is suppressed"""

    kind: str
    days: int = 0

    @classmethod
    def same_day(cls) -> "DedupeWindow":
        return cls(kind="same_day")

    @classmethod
    def trailing(cls, days: int) -> "DedupeWindow":
        return cls(kind="trailing", days=days)

    def bounds(self, now: datetime) -> Tuple[datetime, Optional[datetime]]:
        """[since, until) to search for an earlier notification; until None is open-ended"""
        if self.kind == "same_day":
            return day_bounds(now.date())
        return now - timedelta(days=self.days), None


DEDUPE_WINDOWS = {
    NotificationType.renewal.value: DedupeWindow.same_day(),
    NotificationType.attendance.value: DedupeWindow.trailing(7),
}


def type_tag(notification_type: Union[NotificationType, str]) -> str:
    if isinstance(notification_type, NotificationType):
        return notification_type.value
    return str(notification_type)


def dedupe_window_for(notification_type: Union[NotificationType, str]) -> DedupeWindow:
    return DEDUPE_WINDOWS.get(type_tag(notification_type), DedupeWindow.same_day())


class IdempotentNotifier:
    """
    Persist-then-best-effort-notify.

    Business Rules:
    - Skip silently when the user already has a notification of the same type
      inside the dedupe window (renewal: same calendar day, attendance: 7 days)
    - Otherwise insert and commit the notification first
    - Delivery failures are logged and reported in the outcome, never raised,
      and never undo the insert
    - Check-then-insert is not atomic; callers serialise runs
    """

    def __init__(
        self,
        uow: UnitOfWork,
        sender: IMessageSender,
        clock: Clock,
        dashboard_url: str = "",
    ):
        self.uow = uow
        self.sender = sender
        self.clock = clock
        self.dashboard_url = dashboard_url

    async def notify_once(
        self,
        user_id: UUID,
        notification_type: Union[NotificationType, str],
        message: str,
        dedupe_window: Optional[DedupeWindow] = None,
    ) -> NotifyOutcome:
        tag = type_tag(notification_type)
        window = dedupe_window or dedupe_window_for(tag)
        now = self.clock.now()
        since, until = window.bounds(now)

        async with self.uow:
            if await self.uow.notifications.exists_between(user_id, tag, since, until):
                logger.debug(f"Skipping {tag} notification for user {user_id}: already sent")
                return NotifyOutcome(status=NotifyStatus.skipped)

            notification = await self.uow.notifications.create(
                Notification(
                    user_id=user_id,
                    type=tag,
                    message=message[:MAX_MESSAGE_LENGTH],
                    created_at=now,
                )
            )
            await self.uow.commit()
            notification_id = notification.id

            recipient = await self.uow.users.get_by_id(user_id)
            delivered = await self._deliver(recipient, user_id, tag, message)

        return NotifyOutcome(
            status=NotifyStatus.created,
            notification_id=notification_id,
            delivered=delivered,
        )

    async def _deliver(
        self, recipient: Optional[User], user_id: UUID, tag: str, message: str
    ) -> bool:
        if recipient is None:
            logger.warning(f"Cannot deliver {tag} notification: user {user_id} not found")
            return False

        body = render_notification_body(recipient.name, message, self.dashboard_url)
        try:
            delivered = await self.sender.send(recipient, subject_for(tag), body)
        except Exception as e:
            logger.warning(f"Delivery of {tag} notification to user {user_id} failed: {e}")
            return False

        if not delivered:
            logger.warning(f"Delivery of {tag} notification to user {user_id} failed")
        return delivered
