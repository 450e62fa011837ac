"""
User Entity

Represents a gym member or an administrator.
"""

from datetime import date, datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import Gender, UserRole


class User(SQLModel, table=True):
    """
    User entity - a gym member or an administrator.

    Business Rules:
    - Email must be unique across all users
    - Email verification required before login
    - Password stored as bcrypt hash
    - Deactivated users cannot log in and receive no engagement reminders
    - Only members can be deactivated by an admin
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=100)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=255)

    role: UserRole = Field(default=UserRole.member)
    is_active: bool = Field(default=True)

    # Email verification
    email_verified: bool = Field(default=False)
    verification_token: Optional[str] = Field(default=None, index=True, max_length=128)
    verification_expires_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime)
    )

    # Profile
    phone: Optional[str] = Field(default=None, max_length=32)
    gender: Optional[Gender] = Field(default=None)
    date_of_birth: Optional[date] = Field(default=None)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(), sa_column=Column(DateTime)
    )

    __table_args__ = (Index("idx_user_role_active", "role", "is_active"),)
