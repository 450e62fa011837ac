from uuid import UUID

from gym_service.app.services.unit_of_work import UnitOfWork
from gym_service.libs.result import Result, Return
from .dtos import HealthMetricListResponse, HealthMetricResponse


class ListHealthMetricsUseCase:
    """All entries of a user, oldest date first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[HealthMetricListResponse]:
        async with self.uow:
            metrics = await self.uow.health_metrics.list_for_user(user_id)
            return Return.ok(
                HealthMetricListResponse(metrics=[HealthMetricResponse.from_metric(m) for m in metrics])
            )
