from .list_notifications_use_case import ListNotificationsUseCase, MarkAllReadUseCase
from .dtos import MarkAllReadResponse, NotificationListResponse, NotificationResponse

__all__ = [
    "ListNotificationsUseCase",
    "MarkAllReadUseCase",
    "MarkAllReadResponse",
    "NotificationListResponse",
    "NotificationResponse",
]
