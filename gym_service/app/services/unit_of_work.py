from abc import ABC, abstractmethod
from typing import AsyncContextManager, Callable

from gym_service.app.repositories.attendance_repository import IAttendanceRepository
from gym_service.app.repositories.health_metric_repository import IHealthMetricRepository
from gym_service.app.repositories.membership_repository import IMembershipRepository
from gym_service.app.repositories.notification_repository import INotificationRepository
from gym_service.app.repositories.plan_repository import IPlanRepository
from gym_service.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    plans: IPlanRepository
    memberships: IMembershipRepository
    attendance: IAttendanceRepository
    health_metrics: IHealthMetricRepository
    notifications: INotificationRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass


# Opens a job-scoped UnitOfWork (own connection) and closes it on exit
UnitOfWorkScope = Callable[[], AsyncContextManager[UnitOfWork]]
