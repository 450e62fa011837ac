from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import func, update
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from gym_service.app.repositories.notification_repository import INotificationRepository
from gym_service.domain.entities import Notification


class NotificationRepository(INotificationRepository):
    """Notification repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, notification: Notification) -> Notification:
        """Create a new notification"""
        self.session.add(notification)
        await self.session.flush()
        await self.session.refresh(notification)
        return notification

    async def exists_between(
        self,
        user_id: UUID,
        notification_type: str,
        since: datetime,
        until: Optional[datetime] = None,
    ) -> bool:
        stmt = select(Notification.id).where(
            Notification.user_id == user_id,
            Notification.type == notification_type,
            Notification.created_at >= since,
        )
        if until is not None:
            stmt = stmt.where(Notification.created_at < until)
        result = await self.session.exec(stmt.limit(1))
        return result.first() is not None

    async def list_for_user(self, user_id: UUID, limit: int = 100) -> List[Notification]:
        stmt = (
            select(Notification)
            .where(Notification.user_id == user_id)
            .order_by(col(Notification.created_at).desc())
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def count_unread(self, user_id: UUID) -> int:
        stmt = (
            select(func.count())
            .select_from(Notification)
            .where(Notification.user_id == user_id, Notification.is_read == False)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def mark_all_read(self, user_id: UUID) -> int:
        """Mark every unread notification of a user as read"""
        stmt = (
            update(Notification)
            .where(Notification.user_id == user_id, Notification.is_read == False)
            .values(is_read=True)
            .execution_options(synchronize_session="fetch")
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
