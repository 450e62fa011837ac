from uuid import UUID

from gym_service.app.services.unit_of_work import UnitOfWork
from gym_service.libs.result import Error, Result, Return
from .dtos import ProfileResponse


class GetProfileUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[ProfileResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if not user:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))
            return Return.ok(ProfileResponse.from_user(user))
