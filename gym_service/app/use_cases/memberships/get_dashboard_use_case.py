from uuid import UUID

from gym_service.app.services.clock import Clock
from gym_service.app.services.unit_of_work import UnitOfWork
from gym_service.app.use_cases.engagement import attendance_window
from gym_service.libs.result import Result, Return
from .dtos import CurrentMembership, DashboardResponse, HealthSnapshot


class GetDashboardUseCase:
    """
    Member dashboard: current membership, check-ins this week, latest health entry.

    The current membership is the active one if any, then pending, then
    expired; ties go to the latest end date.
    """

    def __init__(self, uow: UnitOfWork, clock: Clock):
        self.uow = uow
        self.clock = clock

    async def execute(self, user_id: UUID) -> Result[DashboardResponse]:
        now = self.clock.now()
        since, until = attendance_window(now.date())

        async with self.uow:
            detail = await self.uow.memberships.get_current_detail(user_id)
            weekly = await self.uow.attendance.count_for_user_between(user_id, since, until)
            latest = await self.uow.health_metrics.get_latest_for_user(user_id)

            membership = None
            if detail:
                membership = CurrentMembership(
                    id=str(detail.id),
                    plan_name=detail.plan_name,
                    start_date=detail.start_date,
                    end_date=detail.end_date,
                    status=detail.status,
                )

            return Return.ok(
                DashboardResponse(
                    membership=membership,
                    weekly_checkins=weekly,
                    latest_health=HealthSnapshot.from_metric(latest) if latest else None,
                    generated_at=now,
                )
            )
