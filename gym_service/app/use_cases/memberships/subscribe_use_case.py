"""
Subscribe Use Case

Creates a membership for the chosen plan, chained after the current one.
"""

import logging
from datetime import timedelta
from uuid import UUID

from gym_service.app.services.clock import Clock
from gym_service.app.services.unit_of_work import UnitOfWork
from gym_service.domain.entities import Membership, MembershipStatus
from gym_service.libs.result import Error, Result, Return
from .dtos import SubscribeResponse

logger = logging.getLogger(__name__)


class SubscribeUseCase:
    """
    Use case for subscribing a member to a plan.

    Business Rules:
    - Plan must exist
    - With an active membership ending today or later, the new membership is
      pending and starts the day after the latest such end date
    - Otherwise it is active from today
    - end_date = start_date + duration_days - 1 (both inclusive)
    """

    def __init__(self, uow: UnitOfWork, clock: Clock):
        self.uow = uow
        self.clock = clock

    async def execute(self, user_id: UUID, plan_id: UUID) -> Result[SubscribeResponse]:
        """
        Args:
            user_id: Subscribing member
            plan_id: Chosen plan

        Returns:
            Result with SubscribeResponse or PLAN_NOT_FOUND
        """
        today = self.clock.today()

        async with self.uow:
            plan = await self.uow.plans.get_by_id(plan_id)
            if not plan:
                return Return.err(Error("PLAN_NOT_FOUND", "Plan not found"))

            current = await self.uow.memberships.get_latest_active_reaching(user_id, today)
            if current:
                start_date = current.end_date + timedelta(days=1)
                status = MembershipStatus.pending
            else:
                start_date = today
                status = MembershipStatus.active

            membership = Membership(
                user_id=user_id,
                plan_id=plan.id,
                start_date=start_date,
                end_date=start_date + timedelta(days=plan.duration_days - 1),
                status=status,
            )
            membership = await self.uow.memberships.create(membership)
            await self.uow.commit()

            logger.info(
                f"User {user_id} subscribed to {plan.name}: "
                f"{membership.start_date}..{membership.end_date} ({status.value})"
            )

            return Return.ok(
                SubscribeResponse(
                    membership_id=str(membership.id),
                    plan_name=plan.name,
                    start_date=membership.start_date,
                    end_date=membership.end_date,
                    status=membership.status,
                )
            )
