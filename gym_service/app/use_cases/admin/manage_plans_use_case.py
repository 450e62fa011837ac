"""
Plan Management Use Cases

Admin create, edit and delete of membership plans.
"""

import logging
from uuid import UUID

from gym_service.app.services.unit_of_work import UnitOfWork
from gym_service.app.use_cases.memberships import PlanResponse
from gym_service.domain.entities import MembershipPlan
from gym_service.libs.result import Error, Result, Return
from .dtos import DeletePlanResponse, PlanCommand

logger = logging.getLogger(__name__)


class CreatePlanUseCase:
    """
    Business Rules:
    - Name (trimmed) must be unique
    - Duration must be positive
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: PlanCommand) -> Result[PlanResponse]:
        name = command.name.strip()

        async with self.uow:
            if await self.uow.plans.get_by_name(name):
                return Return.err(Error("PLAN_NAME_TAKEN", f"A plan named '{name}' already exists"))

            plan = MembershipPlan(
                name=name,
                duration_days=command.duration_days,
                price=command.price,
                description=command.description or None,
            )
            plan = await self.uow.plans.create(plan)
            await self.uow.commit()

            logger.info(f"Plan created: {plan.name} ({plan.duration_days} days)")
            return Return.ok(PlanResponse.from_plan(plan))


class UpdatePlanUseCase:
    """Existing memberships keep their dates when a plan's duration changes."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, plan_id: UUID, command: PlanCommand) -> Result[PlanResponse]:
        name = command.name.strip()

        async with self.uow:
            plan = await self.uow.plans.get_by_id(plan_id)
            if not plan:
                return Return.err(Error("PLAN_NOT_FOUND", "Plan not found"))

            same_name = await self.uow.plans.get_by_name(name)
            if same_name and same_name.id != plan.id:
                return Return.err(Error("PLAN_NAME_TAKEN", f"A plan named '{name}' already exists"))

            plan.name = name
            plan.duration_days = command.duration_days
            plan.price = command.price
            plan.description = command.description or None

            plan = await self.uow.plans.update(plan)
            await self.uow.commit()

            return Return.ok(PlanResponse.from_plan(plan))


class DeletePlanUseCase:
    """
    Business Rules:
    - A plan referenced by any membership cannot be deleted
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, plan_id: UUID) -> Result[DeletePlanResponse]:
        async with self.uow:
            plan = await self.uow.plans.get_by_id(plan_id)
            if not plan:
                return Return.err(Error("PLAN_NOT_FOUND", "Plan not found"))

            in_use = await self.uow.memberships.count_by_plan(plan.id)
            if in_use:
                return Return.err(
                    Error(
                        "PLAN_IN_USE",
                        f"Plan is referenced by {in_use} membership(s)",
                    )
                )

            await self.uow.plans.delete(plan)
            await self.uow.commit()

            logger.info(f"Plan deleted: {plan_id}")
            return Return.ok(DeletePlanResponse(plan_id=str(plan_id)))
