"""
Engagement DTOs

Reminder candidates and notification outcomes.
"""

from datetime import date
from enum import Enum
from typing import Optional
from uuid import UUID

from pydantic import BaseModel


class RenewalReminder(BaseModel):
    """Active membership close to its end date"""

    membership_id: UUID
    user_id: UUID
    plan_name: str
    end_date: date
    days_left: int

    def message(self) -> str:
        return (
            f"Your {self.plan_name} membership expires on {self.end_date.isoformat()}. "
            "Consider renewing."
        )


class AttendanceReminder(BaseModel):
    """Member who visited too rarely over the trailing week"""

    user_id: UUID
    name: str
    visits: int

    def message(self) -> str:
        return "We miss you! Try to visit at least twice this week."


class NotifyStatus(str, Enum):
    created = "created"
    skipped = "skipped"


class NotifyOutcome(BaseModel):
    """Result of one notify_once call"""

    status: NotifyStatus
    notification_id: Optional[UUID] = None
    delivered: bool = False
