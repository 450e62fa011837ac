from datetime import date
from typing import List, Optional
from uuid import UUID

from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from gym_service.app.repositories.health_metric_repository import IHealthMetricRepository
from gym_service.domain.entities import HealthMetric


class HealthMetricRepository(IHealthMetricRepository):
    """Health metric repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_user_and_date(self, user_id: UUID, entry_date: date) -> Optional[HealthMetric]:
        stmt = select(HealthMetric).where(
            HealthMetric.user_id == user_id, HealthMetric.entry_date == entry_date
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_latest_height(self, user_id: UUID, on_or_before: date) -> Optional[float]:
        stmt = (
            select(HealthMetric.height_cm)
            .where(
                HealthMetric.user_id == user_id,
                col(HealthMetric.height_cm).is_not(None),
                HealthMetric.entry_date <= on_or_before,
            )
            .order_by(col(HealthMetric.entry_date).desc())
            .limit(1)
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def get_latest_for_user(self, user_id: UUID) -> Optional[HealthMetric]:
        stmt = (
            select(HealthMetric)
            .where(HealthMetric.user_id == user_id)
            .order_by(col(HealthMetric.entry_date).desc())
            .limit(1)
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def list_for_user(self, user_id: UUID) -> List[HealthMetric]:
        stmt = (
            select(HealthMetric)
            .where(HealthMetric.user_id == user_id)
            .order_by(col(HealthMetric.entry_date))
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def upsert(self, metric: HealthMetric) -> HealthMetric:
        """Insert, or overwrite the existing entry with the same (user_id, entry_date)"""
        existing = await self.get_by_user_and_date(metric.user_id, metric.entry_date)
        if existing is None:
            self.session.add(metric)
            await self.session.flush()
            await self.session.refresh(metric)
            return metric

        existing.weight_kg = metric.weight_kg
        existing.height_cm = metric.height_cm
        existing.bmi = metric.bmi
        existing.heart_rate_bpm = metric.heart_rate_bpm
        existing.calories_intake = metric.calories_intake
        self.session.add(existing)
        await self.session.flush()
        await self.session.refresh(existing)
        return existing
