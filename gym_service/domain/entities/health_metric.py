"""
HealthMetric Entity

Daily body measurements of a user.
"""

from datetime import date, datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel


def calculate_bmi(height_cm: Optional[float], weight_kg: Optional[float]) -> Optional[float]:
    """BMI rounded to 2 decimals, None when either input is missing or zero."""
    if not height_cm or not weight_kg:
        return None
    height_m = float(height_cm) / 100
    return round(float(weight_kg) / (height_m * height_m), 2)


class HealthMetric(SQLModel, table=True):
    """
    HealthMetric entity - one entry per user and date.

    Business Rules:
    - (user_id, entry_date) is unique; a second entry for a date overwrites the first
    - bmi is derived from weight_kg and height_cm
    """

    __tablename__ = "health_metrics"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(foreign_key="users.id", ondelete="CASCADE", nullable=False)
    entry_date: date = Field(nullable=False)

    weight_kg: Optional[float] = Field(default=None)
    height_cm: Optional[float] = Field(default=None)
    bmi: Optional[float] = Field(default=None)
    heart_rate_bpm: Optional[int] = Field(default=None)
    calories_intake: Optional[int] = Field(default=None)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(), sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index("idx_health_user_entry", "user_id", "entry_date", unique=True),
    )
