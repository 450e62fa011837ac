from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel

from gym_service.domain.entities import Membership, MembershipStatus


class MembershipDetail(BaseModel):
    """Membership joined with its plan and owner"""

    id: UUID
    user_id: UUID
    user_name: str
    user_email: str
    plan_name: str
    start_date: date
    end_date: date
    status: MembershipStatus


class IMembershipRepository(ABC):
    """Membership repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, membership_id: UUID) -> Optional[Membership]:
        """Get membership by ID"""
        pass

    @abstractmethod
    async def get_by_user_id(self, user_id: UUID) -> List[Membership]:
        """Get all memberships for a user"""
        pass

    @abstractmethod
    async def list_by_status(self, status: MembershipStatus) -> List[Membership]:
        """Get all memberships in a status"""
        pass

    @abstractmethod
    async def create(self, membership: Membership) -> Membership:
        """Create a new membership"""
        pass

    @abstractmethod
    async def update(self, membership: Membership) -> Membership:
        """Update existing membership"""
        pass

    @abstractmethod
    async def get_latest_active_reaching(
        self, user_id: UUID, today: date
    ) -> Optional[Membership]:
        """Active membership of a user with the latest end_date on or after today"""
        pass

    @abstractmethod
    async def get_current_detail(self, user_id: UUID) -> Optional[MembershipDetail]:
        """Most relevant membership of a user: active, then pending, then expired; latest end first"""
        pass

    @abstractmethod
    async def activate_pending(self, today: date) -> int:
        """Bulk pending -> active where start_date <= today. Returns affected rows."""
        pass

    @abstractmethod
    async def expire_active(self, today: date) -> int:
        """Bulk active -> expired where end_date < today. Returns affected rows."""
        pass

    @abstractmethod
    async def find_active_ending_on(self, end_dates: List[date]) -> List[MembershipDetail]:
        """Active memberships of active users whose end_date is one of end_dates"""
        pass

    @abstractmethod
    async def list_active_details(self, limit: int = 1000) -> List[MembershipDetail]:
        """Active memberships with owner and plan, soonest end first"""
        pass

    @abstractmethod
    async def list_active_ending_between(
        self, start: date, end: date, limit: int = 1000
    ) -> List[MembershipDetail]:
        """Active memberships ending within [start, end], soonest end first"""
        pass

    @abstractmethod
    async def count_by_status(self, status: MembershipStatus) -> int:
        """Count memberships in a status"""
        pass

    @abstractmethod
    async def count_active_ending_between(self, start: date, end: date) -> int:
        """Count active memberships ending within [start, end]"""
        pass

    @abstractmethod
    async def sum_price_started_since(self, since: date) -> float:
        """Sum of plan prices for memberships starting on or after since"""
        pass

    @abstractmethod
    async def count_by_plan(self, plan_id: UUID) -> int:
        """Count memberships of any status referencing a plan"""
        pass
