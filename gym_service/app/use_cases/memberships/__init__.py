"""
Membership Use Cases

Plans, subscriptions, the member dashboard and the lifecycle sweep.
"""

from .advance_lifecycle_use_case import AdvanceLifecycleResponse, AdvanceLifecycleUseCase
from .get_dashboard_use_case import GetDashboardUseCase
from .list_plans_use_case import ListPlansUseCase
from .subscribe_use_case import SubscribeUseCase
from .dtos import (
    CurrentMembership,
    DashboardResponse,
    HealthSnapshot,
    PlanListResponse,
    PlanResponse,
    SubscribeResponse,
)

__all__ = [
    # Use Cases
    "AdvanceLifecycleUseCase",
    "GetDashboardUseCase",
    "ListPlansUseCase",
    "SubscribeUseCase",
    # DTOs
    "AdvanceLifecycleResponse",
    "CurrentMembership",
    "DashboardResponse",
    "HealthSnapshot",
    "PlanListResponse",
    "PlanResponse",
    "SubscribeResponse",
]
