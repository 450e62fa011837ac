from uuid import UUID

from gym_service.app.services.unit_of_work import UnitOfWork
from gym_service.libs.result import Result, Return
from .dtos import AttendanceEntryResponse, AttendanceListResponse

RECENT_ENTRIES_LIMIT = 50


class ListAttendanceUseCase:
    """Latest 50 entries, newest first, plus the open entry if any"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[AttendanceListResponse]:
        async with self.uow:
            entries = await self.uow.attendance.list_recent_for_user(user_id, RECENT_ENTRIES_LIMIT)
            open_entry = await self.uow.attendance.get_open_for_user(user_id)

            return Return.ok(
                AttendanceListResponse(
                    entries=[AttendanceEntryResponse.from_entry(e) for e in entries],
                    open_entry=AttendanceEntryResponse.from_entry(open_entry) if open_entry else None,
                )
            )
