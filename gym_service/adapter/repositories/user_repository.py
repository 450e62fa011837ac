from typing import List, Optional
from uuid import UUID

from sqlalchemy import func, or_
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from gym_service.app.repositories.user_repository import IUserRepository
from gym_service.domain.entities import User, UserRole


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        stmt = select(User).where(User.id == user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        stmt = select(User).where(User.email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_verification_token(self, token: str) -> Optional[User]:
        """Get user by email verification token"""
        stmt = select(User).where(User.verification_token == token)
        result = await self.session.exec(stmt)
        return result.first()

    async def get_any_admin(self) -> Optional[User]:
        stmt = select(User).where(User.role == UserRole.admin).limit(1)
        result = await self.session.exec(stmt)
        return result.first()

    async def create(self, user: User) -> User:
        """Create a new user"""
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def update(self, user: User) -> User:
        """Update existing user"""
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def search(
        self,
        query: Optional[str] = None,
        is_active: Optional[bool] = None,
        role: Optional[UserRole] = None,
        limit: int = 200,
    ) -> List[User]:
        stmt = select(User)
        if query:
            like = f"%{query}%"
            stmt = stmt.where(or_(col(User.name).like(like), col(User.email).like(like)))
        if is_active is not None:
            stmt = stmt.where(User.is_active == is_active)
        if role is not None:
            stmt = stmt.where(User.role == role)
        stmt = stmt.order_by(col(User.created_at).desc()).limit(limit)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def count_by_role(self, role: UserRole) -> int:
        stmt = select(func.count()).select_from(User).where(User.role == role)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def list_latest_members(self, limit: int = 10) -> List[User]:
        stmt = (
            select(User)
            .where(User.role == UserRole.member)
            .order_by(col(User.created_at).desc())
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        return list(result.all())
