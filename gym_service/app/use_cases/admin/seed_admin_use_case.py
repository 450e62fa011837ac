"""
Seed Admin Use Case

Guarantees one verified admin account on startup.
"""

import logging
from typing import Optional

import bcrypt

from gym_service.app.services.unit_of_work import UnitOfWork
from gym_service.domain.entities import User, UserRole
from gym_service.libs.result import Result, Return

logger = logging.getLogger(__name__)


class SeedAdminUseCase:
    """Creates the admin only when no admin exists; returns the new email or None"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, email: str, password: str, name: str = "Admin") -> Result[Optional[str]]:
        async with self.uow:
            if await self.uow.users.get_any_admin():
                return Return.ok(None)

            password_hash = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(10))
            admin = User(
                name=name,
                email=email,
                password_hash=password_hash.decode("utf-8"),
                role=UserRole.admin,
                email_verified=True,
            )
            await self.uow.users.create(admin)
            await self.uow.commit()

        logger.info(f"Seeded admin user: {email}")
        return Return.ok(email)
