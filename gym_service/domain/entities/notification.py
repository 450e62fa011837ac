"""
Notification Entity

In-app message of record for a user.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel


class Notification(SQLModel, table=True):
    """
    Notification entity - in-app message addressed to a user.

    Business Rules:
    - type is a free tag; renewal, attendance and health are the known ones
    - Only is_read ever changes after creation
    """

    __tablename__ = "notifications"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(foreign_key="users.id", ondelete="CASCADE", nullable=False)

    type: str = Field(max_length=32)
    message: str = Field(max_length=500)
    is_read: bool = Field(default=False)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(), sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index("idx_notification_user_read_created", "user_id", "is_read", "created_at"),
        Index("idx_notification_user_type_created", "user_id", "type", "created_at"),
    )
