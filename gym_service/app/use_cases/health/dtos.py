"""
Health Metric DTOs
"""

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field

from gym_service.domain.entities import HealthMetric


class RecordHealthMetricCommand(BaseModel):
    """One day's measurements; entry_date defaults to today"""

    entry_date: Optional[date] = None
    weight_kg: Optional[float] = Field(default=None, gt=0)
    height_cm: Optional[float] = Field(default=None, gt=0)
    heart_rate_bpm: Optional[int] = Field(default=None, gt=0)
    calories_intake: Optional[int] = Field(default=None, ge=0)


class HealthMetricResponse(BaseModel):
    entry_date: date
    weight_kg: Optional[float] = None
    height_cm: Optional[float] = None
    bmi: Optional[float] = None
    heart_rate_bpm: Optional[int] = None
    calories_intake: Optional[int] = None

    @classmethod
    def from_metric(cls, metric: HealthMetric) -> "HealthMetricResponse":
        return cls(
            entry_date=metric.entry_date,
            weight_kg=metric.weight_kg,
            height_cm=metric.height_cm,
            bmi=metric.bmi,
            heart_rate_bpm=metric.heart_rate_bpm,
            calories_intake=metric.calories_intake,
        )


class HealthMetricListResponse(BaseModel):
    metrics: List[HealthMetricResponse]


class TipsResponse(BaseModel):
    tips: List[str]
    weekly_checkins: int
    bmi: Optional[float] = None
