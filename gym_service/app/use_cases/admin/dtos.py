"""
Admin Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the admin area.
"""

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from gym_service.app.repositories.attendance_repository import AttendanceDetail, MemberVisitCount
from gym_service.app.repositories.membership_repository import MembershipDetail
from gym_service.domain.entities import User


# ============================================================================
# Commands
# ============================================================================


class PlanCommand(BaseModel):
    """Create or replace a plan"""

    name: str = Field(min_length=1, max_length=100)
    duration_days: int = Field(gt=0)
    price: float = Field(default=0.0, ge=0)
    description: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class AdminStats(BaseModel):
    members: int
    active_memberships: int
    expiring_7d: int
    checkins_today: int
    revenue_30d: float


class UpcomingExpiry(BaseModel):
    user_name: str
    plan_name: str
    end_date: date


class UserSummary(BaseModel):
    id: str
    name: str
    email: str
    role: str
    phone: Optional[str] = None
    is_active: bool
    email_verified: bool
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserSummary":
        return cls(
            id=str(user.id),
            name=user.name,
            email=user.email,
            role=user.role.value,
            phone=user.phone,
            is_active=user.is_active,
            email_verified=user.email_verified,
            created_at=user.created_at,
        )


class AdminDashboardResponse(BaseModel):
    stats: AdminStats
    top_members: List[MemberVisitCount]
    upcoming_expiries: List[UpcomingExpiry]
    latest_members: List[UserSummary]


class MembershipReportResponse(BaseModel):
    memberships: List[MembershipDetail]


class CheckinReportResponse(BaseModel):
    checkins: List[AttendanceDetail]


class AttendanceExport(BaseModel):
    """Rendered CSV document"""

    filename: str
    content: str
    rows: int


class UserListResponse(BaseModel):
    users: List[UserSummary]


class UserStatusResponse(BaseModel):
    user: UserSummary
    message: str


class DeletePlanResponse(BaseModel):
    deleted: bool = True
    plan_id: str
