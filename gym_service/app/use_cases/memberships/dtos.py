"""
Membership Use Case DTOs
"""

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel

from gym_service.domain.entities import HealthMetric, MembershipPlan, MembershipStatus


class PlanResponse(BaseModel):
    id: str
    name: str
    duration_days: int
    price: float
    description: Optional[str] = None

    @classmethod
    def from_plan(cls, plan: MembershipPlan) -> "PlanResponse":
        return cls(
            id=str(plan.id),
            name=plan.name,
            duration_days=plan.duration_days,
            price=plan.price,
            description=plan.description,
        )


class PlanListResponse(BaseModel):
    plans: List[PlanResponse]


class SubscribeResponse(BaseModel):
    """The membership created by a subscription"""

    membership_id: str
    plan_name: str
    start_date: date
    end_date: date
    status: MembershipStatus


class CurrentMembership(BaseModel):
    id: str
    plan_name: str
    start_date: date
    end_date: date
    status: MembershipStatus


class HealthSnapshot(BaseModel):
    entry_date: date
    weight_kg: Optional[float] = None
    height_cm: Optional[float] = None
    bmi: Optional[float] = None
    heart_rate_bpm: Optional[int] = None
    calories_intake: Optional[int] = None

    @classmethod
    def from_metric(cls, metric: HealthMetric) -> "HealthSnapshot":
        return cls(
            entry_date=metric.entry_date,
            weight_kg=metric.weight_kg,
            height_cm=metric.height_cm,
            bmi=metric.bmi,
            heart_rate_bpm=metric.heart_rate_bpm,
            calories_intake=metric.calories_intake,
        )


class DashboardResponse(BaseModel):
    """Member home screen"""

    membership: Optional[CurrentMembership] = None
    weekly_checkins: int
    latest_health: Optional[HealthSnapshot] = None
    generated_at: datetime
