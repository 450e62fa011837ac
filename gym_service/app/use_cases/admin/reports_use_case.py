"""
Admin drill-down reports behind the dashboard numbers.
"""

from datetime import timedelta

from gym_service.app.services.clock import Clock, day_bounds
from gym_service.app.services.unit_of_work import UnitOfWork
from gym_service.libs.result import Result, Return
from .dtos import CheckinReportResponse, MembershipReportResponse
from .get_admin_dashboard_use_case import EXPIRING_WITHIN_DAYS

REPORT_LIMIT = 1000


class ListActiveMembershipsUseCase:
    """Active memberships, soonest end date first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[MembershipReportResponse]:
        async with self.uow:
            rows = await self.uow.memberships.list_active_details(REPORT_LIMIT)
        return Return.ok(MembershipReportResponse(memberships=rows))


class ListExpiringMembershipsUseCase:
    """Active memberships ending today through today+7"""

    def __init__(self, uow: UnitOfWork, clock: Clock):
        self.uow = uow
        self.clock = clock

    async def execute(self) -> Result[MembershipReportResponse]:
        today = self.clock.today()
        async with self.uow:
            rows = await self.uow.memberships.list_active_ending_between(
                today, today + timedelta(days=EXPIRING_WITHIN_DAYS), REPORT_LIMIT
            )
        return Return.ok(MembershipReportResponse(memberships=rows))


class ListTodayCheckinsUseCase:
    """Today's check-ins, newest first"""

    def __init__(self, uow: UnitOfWork, clock: Clock):
        self.uow = uow
        self.clock = clock

    async def execute(self) -> Result[CheckinReportResponse]:
        since, until = day_bounds(self.clock.today())
        async with self.uow:
            rows = await self.uow.attendance.list_details_between(
                since, until, newest_first=True, limit=REPORT_LIMIT
            )
        return Return.ok(CheckinReportResponse(checkins=rows))
