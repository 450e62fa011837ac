"""
Record Health Metric Use Case

Upserts a user's measurements for one date and derives BMI.
"""

from uuid import UUID

from gym_service.app.services.clock import Clock
from gym_service.app.services.unit_of_work import UnitOfWork
from gym_service.domain.entities import HealthMetric, calculate_bmi
from gym_service.libs.result import Result, Return
from .dtos import HealthMetricResponse, RecordHealthMetricCommand


class RecordHealthMetricUseCase:
    """
    Business Rules:
    - One entry per user and date; recording again overwrites every field
    - Missing height falls back to the latest known height on or before the date
    - BMI = weight / (height in metres)^2, rounded to 2 decimals
    """

    def __init__(self, uow: UnitOfWork, clock: Clock):
        self.uow = uow
        self.clock = clock

    async def execute(
        self, user_id: UUID, command: RecordHealthMetricCommand
    ) -> Result[HealthMetricResponse]:
        entry_date = command.entry_date or self.clock.today()

        async with self.uow:
            height_cm = command.height_cm
            if height_cm is None:
                height_cm = await self.uow.health_metrics.get_latest_height(user_id, entry_date)

            metric = HealthMetric(
                user_id=user_id,
                entry_date=entry_date,
                weight_kg=command.weight_kg,
                height_cm=height_cm,
                bmi=calculate_bmi(height_cm, command.weight_kg),
                heart_rate_bpm=command.heart_rate_bpm,
                calories_intake=command.calories_intake,
            )
            metric = await self.uow.health_metrics.upsert(metric)
            await self.uow.commit()

            return Return.ok(HealthMetricResponse.from_metric(metric))
