from datetime import datetime
from typing import List

from pydantic import BaseModel

from gym_service.domain.entities import Notification


class NotificationResponse(BaseModel):
    id: str
    type: str
    message: str
    is_read: bool
    created_at: datetime

    @classmethod
    def from_notification(cls, notification: Notification) -> "NotificationResponse":
        return cls(
            id=str(notification.id),
            type=notification.type,
            message=notification.message,
            is_read=notification.is_read,
            created_at=notification.created_at,
        )


class NotificationListResponse(BaseModel):
    notifications: List[NotificationResponse]
    unread_count: int


class MarkAllReadResponse(BaseModel):
    updated: int
