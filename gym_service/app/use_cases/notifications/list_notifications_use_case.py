from uuid import UUID

from gym_service.app.services.unit_of_work import UnitOfWork
from gym_service.libs.result import Result, Return
from .dtos import MarkAllReadResponse, NotificationListResponse, NotificationResponse

NOTIFICATIONS_LIMIT = 100


class ListNotificationsUseCase:
    """Latest 100 notifications, newest first, with the unread count"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[NotificationListResponse]:
        async with self.uow:
            notifications = await self.uow.notifications.list_for_user(user_id, NOTIFICATIONS_LIMIT)
            unread = await self.uow.notifications.count_unread(user_id)

            return Return.ok(
                NotificationListResponse(
                    notifications=[NotificationResponse.from_notification(n) for n in notifications],
                    unread_count=unread,
                )
            )


class MarkAllReadUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[MarkAllReadResponse]:
        async with self.uow:
            updated = await self.uow.notifications.mark_all_read(user_id)
            await self.uow.commit()
        return Return.ok(MarkAllReadResponse(updated=updated))
