from datetime import date
from typing import List, Optional
from uuid import UUID

from sqlalchemy import case, func, update
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from gym_service.app.repositories.membership_repository import (
    IMembershipRepository,
    MembershipDetail,
)
from gym_service.domain.entities import Membership, MembershipPlan, MembershipStatus, User


class MembershipRepository(IMembershipRepository):
    """Membership repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    @staticmethod
    def _detail_query():
        return (
            select(Membership, User, MembershipPlan)
            .join(User, User.id == Membership.user_id)
            .join(MembershipPlan, MembershipPlan.id == Membership.plan_id)
        )

    @staticmethod
    def _to_detail(membership: Membership, user: User, plan: MembershipPlan) -> MembershipDetail:
        return MembershipDetail(
            id=membership.id,
            user_id=user.id,
            user_name=user.name,
            user_email=user.email,
            plan_name=plan.name,
            start_date=membership.start_date,
            end_date=membership.end_date,
            status=membership.status,
        )

    async def get_by_id(self, membership_id: UUID) -> Optional[Membership]:
        """Get membership by ID"""
        stmt = select(Membership).where(Membership.id == membership_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_user_id(self, user_id: UUID) -> List[Membership]:
        """Get all memberships for a user"""
        stmt = (
            select(Membership)
            .where(Membership.user_id == user_id)
            .order_by(col(Membership.start_date))
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_by_status(self, status: MembershipStatus) -> List[Membership]:
        stmt = select(Membership).where(Membership.status == status)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, membership: Membership) -> Membership:
        """Create a new membership"""
        self.session.add(membership)
        await self.session.flush()
        await self.session.refresh(membership)
        return membership

    async def update(self, membership: Membership) -> Membership:
        """Update existing membership"""
        self.session.add(membership)
        await self.session.flush()
        await self.session.refresh(membership)
        return membership

    async def get_latest_active_reaching(
        self, user_id: UUID, today: date
    ) -> Optional[Membership]:
        stmt = (
            select(Membership)
            .where(
                Membership.user_id == user_id,
                Membership.status == MembershipStatus.active,
                Membership.end_date >= today,
            )
            .order_by(col(Membership.end_date).desc())
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def get_current_detail(self, user_id: UUID) -> Optional[MembershipDetail]:
        status_rank = case(
            (Membership.status == MembershipStatus.active, 0),
            (Membership.status == MembershipStatus.pending, 1),
            else_=2,
        )
        stmt = (
            self._detail_query()
            .where(Membership.user_id == user_id)
            .order_by(status_rank, col(Membership.end_date).desc())
            .limit(1)
        )
        result = await self.session.execute(stmt)
        row = result.first()
        if row is None:
            return None
        return self._to_detail(*row)

    async def activate_pending(self, today: date) -> int:
        """Bulk pending -> active where start_date <= today"""
        stmt = (
            update(Membership)
            .where(
                Membership.status == MembershipStatus.pending,
                Membership.start_date <= today,
            )
            .values(status=MembershipStatus.active)
            .execution_options(synchronize_session="fetch")
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def expire_active(self, today: date) -> int:
        """Bulk active -> expired where end_date < today"""
        stmt = (
            update(Membership)
            .where(
                Membership.status == MembershipStatus.active,
                Membership.end_date < today,
            )
            .values(status=MembershipStatus.expired)
            .execution_options(synchronize_session="fetch")
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def find_active_ending_on(self, end_dates: List[date]) -> List[MembershipDetail]:
        if not end_dates:
            return []
        stmt = (
            self._detail_query()
            .where(
                Membership.status == MembershipStatus.active,
                User.is_active == True,
                col(Membership.end_date).in_(end_dates),
            )
            .order_by(col(Membership.end_date), col(User.name))
        )
        result = await self.session.execute(stmt)
        return [self._to_detail(*row) for row in result.all()]

    async def list_active_details(self, limit: int = 1000) -> List[MembershipDetail]:
        stmt = (
            self._detail_query()
            .where(Membership.status == MembershipStatus.active)
            .order_by(col(Membership.end_date))
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [self._to_detail(*row) for row in result.all()]

    async def list_active_ending_between(
        self, start: date, end: date, limit: int = 1000
    ) -> List[MembershipDetail]:
        stmt = (
            self._detail_query()
            .where(
                Membership.status == MembershipStatus.active,
                Membership.end_date >= start,
                Membership.end_date <= end,
            )
            .order_by(col(Membership.end_date))
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [self._to_detail(*row) for row in result.all()]

    async def count_by_status(self, status: MembershipStatus) -> int:
        stmt = select(func.count()).select_from(Membership).where(Membership.status == status)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def count_active_ending_between(self, start: date, end: date) -> int:
        stmt = (
            select(func.count())
            .select_from(Membership)
            .where(
                Membership.status == MembershipStatus.active,
                Membership.end_date >= start,
                Membership.end_date <= end,
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def sum_price_started_since(self, since: date) -> float:
        stmt = (
            select(func.coalesce(func.sum(MembershipPlan.price), 0.0))
            .select_from(Membership)
            .join(MembershipPlan, MembershipPlan.id == Membership.plan_id)
            .where(Membership.start_date >= since)
        )
        result = await self.session.execute(stmt)
        return float(result.scalar_one())

    async def count_by_plan(self, plan_id: UUID) -> int:
        stmt = select(func.count()).select_from(Membership).where(Membership.plan_id == plan_id)
        result = await self.session.execute(stmt)
        return result.scalar_one()
