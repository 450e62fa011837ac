"""
Gym Service Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class UserRole(str, Enum):
    """Account role"""

    member = "member"
    admin = "admin"


class Gender(str, Enum):
    male = "male"
    female = "female"
    other = "other"


class MembershipStatus(str, Enum):
    """Membership lifecycle status"""

    pending = "pending"
    active = "active"
    expired = "expired"


class AttendanceMethod(str, Enum):
    """How a check-in was recorded"""

    manual = "manual"
    qr = "qr"
    nfc = "nfc"


class NotificationType(str, Enum):
    """Known notification type tags"""

    renewal = "renewal"
    attendance = "attendance"
    health = "health"
    general = "general"
