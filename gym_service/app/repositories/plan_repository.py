from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from gym_service.domain.entities import MembershipPlan


class IPlanRepository(ABC):
    """Membership plan repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, plan_id: UUID) -> Optional[MembershipPlan]:
        """Get plan by ID"""
        pass

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[MembershipPlan]:
        """Get plan by its unique name"""
        pass

    @abstractmethod
    async def list_all(self) -> List[MembershipPlan]:
        """All plans ordered by duration"""
        pass

    @abstractmethod
    async def create(self, plan: MembershipPlan) -> MembershipPlan:
        """Create a new plan"""
        pass

    @abstractmethod
    async def update(self, plan: MembershipPlan) -> MembershipPlan:
        """Update existing plan"""
        pass

    @abstractmethod
    async def delete(self, plan: MembershipPlan) -> None:
        """Delete a plan"""
        pass
