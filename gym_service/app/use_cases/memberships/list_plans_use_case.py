from gym_service.app.services.unit_of_work import UnitOfWork
from gym_service.libs.result import Result, Return
from .dtos import PlanListResponse, PlanResponse


class ListPlansUseCase:
    """Plans ordered by duration, shortest first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[PlanListResponse]:
        async with self.uow:
            plans = await self.uow.plans.list_all()
            return Return.ok(PlanListResponse(plans=[PlanResponse.from_plan(p) for p in plans]))
