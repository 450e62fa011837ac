"""
User Profile DTOs
"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field

from gym_service.domain.entities import Gender, User


class UpdateProfileCommand(BaseModel):
    """Editable profile fields; omitted optional fields are cleared"""

    name: str = Field(min_length=1, max_length=100)
    phone: Optional[str] = Field(default=None, max_length=32)
    gender: Optional[Gender] = None
    date_of_birth: Optional[date] = None


class ProfileResponse(BaseModel):
    id: str
    name: str
    email: str
    role: str
    is_active: bool
    email_verified: bool
    phone: Optional[str] = None
    gender: Optional[Gender] = None
    date_of_birth: Optional[date] = None
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "ProfileResponse":
        return cls(
            id=str(user.id),
            name=user.name,
            email=user.email,
            role=user.role.value,
            is_active=user.is_active,
            email_verified=user.email_verified,
            phone=user.phone,
            gender=user.gender,
            date_of_birth=user.date_of_birth,
            created_at=user.created_at,
        )
