"""
Admin Dashboard Use Case

Headline numbers and short lists for the admin home screen.
"""

from datetime import timedelta

from gym_service.app.services.clock import Clock, day_bounds
from gym_service.app.services.unit_of_work import UnitOfWork
from gym_service.domain.entities import MembershipStatus, UserRole
from gym_service.libs.result import Result, Return
from .dtos import AdminDashboardResponse, AdminStats, UpcomingExpiry, UserSummary

EXPIRING_WITHIN_DAYS = 7
REVENUE_WINDOW_DAYS = 30
TOP_MEMBERS_LIMIT = 10
UPCOMING_EXPIRIES_LIMIT = 20
LATEST_MEMBERS_LIMIT = 10


class GetAdminDashboardUseCase:
    """
    Stats:
    - members: users with role member
    - active_memberships: memberships with status active
    - expiring_7d: active memberships ending today through today+7
    - checkins_today: check-ins dated today
    - revenue_30d: plan prices of memberships starting in the last 30 days

    Lists: top 10 members by visits in the last 30 days, up to 20 upcoming
    expiries, 10 newest members.
    """

    def __init__(self, uow: UnitOfWork, clock: Clock):
        self.uow = uow
        self.clock = clock

    async def execute(self) -> Result[AdminDashboardResponse]:
        now = self.clock.now()
        today = now.date()
        expiring_until = today + timedelta(days=EXPIRING_WITHIN_DAYS)
        day_start, day_end = day_bounds(today)

        async with self.uow:
            stats = AdminStats(
                members=await self.uow.users.count_by_role(UserRole.member),
                active_memberships=await self.uow.memberships.count_by_status(MembershipStatus.active),
                expiring_7d=await self.uow.memberships.count_active_ending_between(today, expiring_until),
                checkins_today=await self.uow.attendance.count_between(day_start, day_end),
                revenue_30d=await self.uow.memberships.sum_price_started_since(
                    today - timedelta(days=REVENUE_WINDOW_DAYS)
                ),
            )

            top_members = await self.uow.attendance.top_members_since(
                now - timedelta(days=REVENUE_WINDOW_DAYS), TOP_MEMBERS_LIMIT
            )
            expiring = await self.uow.memberships.list_active_ending_between(
                today, expiring_until, UPCOMING_EXPIRIES_LIMIT
            )
            latest = await self.uow.users.list_latest_members(LATEST_MEMBERS_LIMIT)

            return Return.ok(
                AdminDashboardResponse(
                    stats=stats,
                    top_members=top_members,
                    upcoming_expiries=[
                        UpcomingExpiry(user_name=m.user_name, plan_name=m.plan_name, end_date=m.end_date)
                        for m in expiring
                    ],
                    latest_members=[UserSummary.from_user(u) for u in latest],
                )
            )
