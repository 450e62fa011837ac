from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from gym_service.domain.entities import Notification


class INotificationRepository(ABC):
    """Notification repository interface - application layer"""

    @abstractmethod
    async def create(self, notification: Notification) -> Notification:
        """Create a new notification"""
        pass

    @abstractmethod
    async def exists_between(
        self,
        user_id: UUID,
        notification_type: str,
        since: datetime,
        until: Optional[datetime] = None,
    ) -> bool:
        """Whether a notification of the type was created for the user within [since, until)"""
        pass

    @abstractmethod
    async def list_for_user(self, user_id: UUID, limit: int = 100) -> List[Notification]:
        """Latest notifications of a user, newest first"""
        pass

    @abstractmethod
    async def count_unread(self, user_id: UUID) -> int:
        """Count unread notifications of a user"""
        pass

    @abstractmethod
    async def mark_all_read(self, user_id: UUID) -> int:
        """Mark every unread notification of a user as read. Returns count."""
        pass
