"""
Gym Service Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    UserRole,
    Gender,
    MembershipStatus,
    AttendanceMethod,
    NotificationType,
)

# Export all entities
from .user import User
from .membership_plan import MembershipPlan
from .membership import Membership
from .attendance_entry import AttendanceEntry
from .health_metric import HealthMetric, calculate_bmi
from .notification import Notification

__all__ = [
    # Enums
    "UserRole",
    "Gender",
    "MembershipStatus",
    "AttendanceMethod",
    "NotificationType",
    # Entities
    "User",
    "MembershipPlan",
    "Membership",
    "AttendanceEntry",
    "HealthMetric",
    "Notification",
    # Helpers
    "calculate_bmi",
]
