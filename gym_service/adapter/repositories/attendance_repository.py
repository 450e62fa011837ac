from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import and_, func
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from gym_service.app.repositories.attendance_repository import (
    AttendanceDetail,
    IAttendanceRepository,
    MemberVisitCount,
)
from gym_service.domain.entities import AttendanceEntry, User, UserRole


class AttendanceRepository(IAttendanceRepository):
    """Attendance repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_open_for_user(self, user_id: UUID) -> Optional[AttendanceEntry]:
        stmt = (
            select(AttendanceEntry)
            .where(
                AttendanceEntry.user_id == user_id,
                col(AttendanceEntry.check_out).is_(None),
            )
            .order_by(col(AttendanceEntry.check_in).desc())
            .limit(1)
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def create(self, entry: AttendanceEntry) -> AttendanceEntry:
        """Create a new entry"""
        self.session.add(entry)
        await self.session.flush()
        await self.session.refresh(entry)
        return entry

    async def update(self, entry: AttendanceEntry) -> AttendanceEntry:
        """Update existing entry"""
        self.session.add(entry)
        await self.session.flush()
        await self.session.refresh(entry)
        return entry

    async def list_recent_for_user(self, user_id: UUID, limit: int = 50) -> List[AttendanceEntry]:
        stmt = (
            select(AttendanceEntry)
            .where(AttendanceEntry.user_id == user_id)
            .order_by(col(AttendanceEntry.check_in).desc())
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def count_for_user_between(
        self, user_id: UUID, since: datetime, until: datetime
    ) -> int:
        stmt = (
            select(func.count())
            .select_from(AttendanceEntry)
            .where(
                AttendanceEntry.user_id == user_id,
                AttendanceEntry.check_in >= since,
                AttendanceEntry.check_in < until,
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def list_details_between(
        self, since: datetime, until: datetime, newest_first: bool = False, limit: Optional[int] = None
    ) -> List[AttendanceDetail]:
        order = col(AttendanceEntry.check_in).desc() if newest_first else col(AttendanceEntry.check_in)
        stmt = (
            select(AttendanceEntry, User)
            .join(User, User.id == AttendanceEntry.user_id)
            .where(AttendanceEntry.check_in >= since, AttendanceEntry.check_in < until)
            .order_by(order)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return [
            AttendanceDetail(
                id=entry.id,
                user_id=user.id,
                member_name=user.name,
                member_email=user.email,
                check_in=entry.check_in,
                check_out=entry.check_out,
                method=entry.method,
            )
            for entry, user in result.all()
        ]

    async def count_between(self, since: datetime, until: datetime) -> int:
        stmt = (
            select(func.count())
            .select_from(AttendanceEntry)
            .where(AttendanceEntry.check_in >= since, AttendanceEntry.check_in < until)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def top_members_since(self, since: datetime, limit: int = 10) -> List[MemberVisitCount]:
        visits = func.count(AttendanceEntry.id)
        stmt = (
            select(User.id, User.name, visits)
            .join(AttendanceEntry, AttendanceEntry.user_id == User.id)
            .where(AttendanceEntry.check_in >= since)
            .group_by(User.id, User.name)
            .order_by(visits.desc(), col(User.name))
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [
            MemberVisitCount(user_id=user_id, name=name, visits=count)
            for user_id, name, count in result.all()
        ]

    async def find_members_below_visits(
        self, since: datetime, until: datetime, threshold: int
    ) -> List[MemberVisitCount]:
        """Active members with fewer than threshold check-ins within [since, until)"""
        visits = func.count(AttendanceEntry.id)
        stmt = (
            select(User.id, User.name, visits)
            .outerjoin(
                AttendanceEntry,
                and_(
                    AttendanceEntry.user_id == User.id,
                    AttendanceEntry.check_in >= since,
                    AttendanceEntry.check_in < until,
                ),
            )
            .where(User.role == UserRole.member, User.is_active == True)
            .group_by(User.id, User.name)
            .having(visits < threshold)
            .order_by(col(User.name))
        )
        result = await self.session.execute(stmt)
        return [
            MemberVisitCount(user_id=user_id, name=name, visits=count)
            for user_id, name, count in result.all()
        ]
