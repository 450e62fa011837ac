from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional
from uuid import UUID

from gym_service.domain.entities import HealthMetric


class IHealthMetricRepository(ABC):
    """Health metric repository interface - application layer"""

    @abstractmethod
    async def get_by_user_and_date(self, user_id: UUID, entry_date: date) -> Optional[HealthMetric]:
        """Get the entry of a user for a date"""
        pass

    @abstractmethod
    async def get_latest_height(self, user_id: UUID, on_or_before: date) -> Optional[float]:
        """Most recent known height of a user up to a date"""
        pass

    @abstractmethod
    async def get_latest_for_user(self, user_id: UUID) -> Optional[HealthMetric]:
        """Latest entry of a user"""
        pass

    @abstractmethod
    async def list_for_user(self, user_id: UUID) -> List[HealthMetric]:
        """All entries of a user, oldest first"""
        pass

    @abstractmethod
    async def upsert(self, metric: HealthMetric) -> HealthMetric:
        """Insert, or overwrite the existing entry with the same (user_id, entry_date)"""
        pass
