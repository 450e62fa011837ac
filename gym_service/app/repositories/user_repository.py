from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from gym_service.domain.entities import User, UserRole


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        pass

    @abstractmethod
    async def get_by_verification_token(self, token: str) -> Optional[User]:
        """Get user by email verification token"""
        pass

    @abstractmethod
    async def get_any_admin(self) -> Optional[User]:
        """Get one admin account, if any exists"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user"""
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Update existing user"""
        pass

    @abstractmethod
    async def search(
        self,
        query: Optional[str] = None,
        is_active: Optional[bool] = None,
        role: Optional[UserRole] = None,
        limit: int = 200,
    ) -> List[User]:
        """Search users by name/email with optional status and role filters, newest first"""
        pass

    @abstractmethod
    async def count_by_role(self, role: UserRole) -> int:
        """Count users holding a role"""
        pass

    @abstractmethod
    async def list_latest_members(self, limit: int = 10) -> List[User]:
        """Most recently registered members"""
        pass
