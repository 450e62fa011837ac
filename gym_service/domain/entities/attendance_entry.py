"""
AttendanceEntry Entity

One gym visit.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import AttendanceMethod


class AttendanceEntry(SQLModel, table=True):
    """
    AttendanceEntry entity - a check-in with an optional check-out.

    Business Rules:
    - At most one open entry (check_out is null) per user
    - check_out is set once, entries are never deleted
    """

    __tablename__ = "attendance"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(foreign_key="users.id", ondelete="CASCADE", nullable=False)

    check_in: datetime = Field(sa_column=Column(DateTime, nullable=False))
    check_out: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    method: AttendanceMethod = Field(default=AttendanceMethod.manual)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(), sa_column=Column(DateTime)
    )

    __table_args__ = (Index("idx_attendance_user_checkin", "user_id", "check_in"),)
