"""
User Management Use Cases

Admin search and member account (de)activation.
"""

import logging
from typing import Optional
from uuid import UUID

from gym_service.app.services.unit_of_work import UnitOfWork
from gym_service.domain.entities import UserRole
from gym_service.libs.result import Error, Result, Return
from .dtos import UserListResponse, UserStatusResponse, UserSummary

logger = logging.getLogger(__name__)

USER_SEARCH_LIMIT = 200


class ListUsersUseCase:
    """Search by name or email; status is 'active', 'inactive' or anything else for all"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        query: Optional[str] = None,
        status: Optional[str] = None,
        role: Optional[str] = None,
    ) -> Result[UserListResponse]:
        is_active = {"active": True, "inactive": False}.get(status or "")
        role_filter = UserRole(role) if role in (UserRole.member.value, UserRole.admin.value) else None

        async with self.uow:
            users = await self.uow.users.search(
                query=(query or "").strip() or None,
                is_active=is_active,
                role=role_filter,
                limit=USER_SEARCH_LIMIT,
            )
            return Return.ok(UserListResponse(users=[UserSummary.from_user(u) for u in users]))


class SetUserActiveUseCase:
    """
    Deactivate or reactivate a member account.

    Business Rules:
    - Admins cannot deactivate themselves
    - Only members can be (de)activated
    - Deactivating an inactive user, or reactivating an active one, is a conflict
    - Deactivated users are refused at login and on every authenticated request
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor_id: UUID, user_id: UUID, active: bool) -> Result[UserStatusResponse]:
        if not active and actor_id == user_id:
            return Return.err(Error("CANNOT_DEACTIVATE_SELF", "Cannot deactivate yourself"))

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if not user:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            if user.role != UserRole.member:
                return Return.err(Error("CANNOT_MODIFY_ADMIN", "Cannot modify admins"))

            if user.is_active == active:
                if active:
                    return Return.err(Error("ALREADY_ACTIVE", "Already active"))
                return Return.err(Error("ALREADY_INACTIVE", "Already inactive"))

            user.is_active = active
            user = await self.uow.users.update(user)
            await self.uow.commit()

            action = "reactivated" if active else "deactivated"
            logger.info(f"User {user.email} {action} by {actor_id}")

            return Return.ok(
                UserStatusResponse(user=UserSummary.from_user(user), message=f"User {action}")
            )
