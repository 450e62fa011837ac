from typing import List, Optional
from uuid import UUID

from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from gym_service.app.repositories.plan_repository import IPlanRepository
from gym_service.domain.entities import MembershipPlan


class PlanRepository(IPlanRepository):
    """Membership plan repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, plan_id: UUID) -> Optional[MembershipPlan]:
        """Get plan by ID"""
        stmt = select(MembershipPlan).where(MembershipPlan.id == plan_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_name(self, name: str) -> Optional[MembershipPlan]:
        """Get plan by its unique name"""
        stmt = select(MembershipPlan).where(MembershipPlan.name == name)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_all(self) -> List[MembershipPlan]:
        """All plans ordered by duration"""
        stmt = select(MembershipPlan).order_by(
            col(MembershipPlan.duration_days), col(MembershipPlan.name)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, plan: MembershipPlan) -> MembershipPlan:
        """Create a new plan"""
        self.session.add(plan)
        await self.session.flush()
        await self.session.refresh(plan)
        return plan

    async def update(self, plan: MembershipPlan) -> MembershipPlan:
        """Update existing plan"""
        self.session.add(plan)
        await self.session.flush()
        await self.session.refresh(plan)
        return plan

    async def delete(self, plan: MembershipPlan) -> None:
        """Delete a plan"""
        await self.session.delete(plan)
        await self.session.flush()
