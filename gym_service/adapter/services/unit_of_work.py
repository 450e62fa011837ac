from sqlmodel.ext.asyncio.session import AsyncSession

from gym_service.adapter.repositories.attendance_repository import AttendanceRepository
from gym_service.adapter.repositories.health_metric_repository import HealthMetricRepository
from gym_service.adapter.repositories.membership_repository import MembershipRepository
from gym_service.adapter.repositories.notification_repository import NotificationRepository
from gym_service.adapter.repositories.plan_repository import PlanRepository
from gym_service.adapter.repositories.user_repository import UserRepository
from gym_service.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.plans = PlanRepository(self.session)
        self.memberships = MembershipRepository(self.session)
        self.attendance = AttendanceRepository(self.session)
        self.health_metrics = HealthMetricRepository(self.session)
        self.notifications = NotificationRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
