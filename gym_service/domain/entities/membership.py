"""
Membership Entity

Links a User to a MembershipPlan for a date window.
"""

from datetime import date, datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import MembershipStatus


class Membership(SQLModel, table=True):
    """
    Membership entity - one subscription period of a user.

    Business Rules:
    - end_date >= start_date, both inclusive
    - Created pending (chained after the latest active one) or active (from today)
    - Status only changes through the lifecycle sweep:
      pending -> active once start_date <= today,
      active -> expired once end_date < today
    - One current chain per user is kept by the subscribe flow, not by a constraint
    """

    __tablename__ = "memberships"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(foreign_key="users.id", ondelete="CASCADE", nullable=False)
    plan_id: UUID = Field(foreign_key="membership_plans.id", nullable=False)

    start_date: date = Field(nullable=False)
    end_date: date = Field(nullable=False)
    status: MembershipStatus = Field(default=MembershipStatus.pending)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(), sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index("idx_membership_user_status_end", "user_id", "status", "end_date"),
        Index("idx_membership_start_date", "start_date"),
    )
