"""
MembershipPlan Entity

A subscription offer members can buy.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel


class MembershipPlan(SQLModel, table=True):
    """
    MembershipPlan entity - a named subscription with a fixed duration.

    Business Rules:
    - Name is unique
    - Duration is a positive number of days
    - Edited only by admins; deleted only while no membership references it
    """

    __tablename__ = "membership_plans"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(unique=True, max_length=100)
    duration_days: int = Field(gt=0)
    price: float = Field(default=0.0)
    description: Optional[str] = Field(default=None)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(), sa_column=Column(DateTime)
    )
