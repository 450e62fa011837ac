"""
Update Profile Use Case

Members edit their own name and personal details.
"""

from uuid import UUID

from gym_service.app.services.unit_of_work import UnitOfWork
from gym_service.libs.result import Error, Result, Return
from .dtos import ProfileResponse, UpdateProfileCommand


class UpdateProfileUseCase:
    """
    Business Rules:
    - Email, role and account flags are not editable here
    - Blank phone is stored as null
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, command: UpdateProfileCommand) -> Result[ProfileResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if not user:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            user.name = command.name.strip()
            user.phone = (command.phone or "").strip() or None
            user.gender = command.gender
            user.date_of_birth = command.date_of_birth

            user = await self.uow.users.update(user)
            await self.uow.commit()

            return Return.ok(ProfileResponse.from_user(user))
