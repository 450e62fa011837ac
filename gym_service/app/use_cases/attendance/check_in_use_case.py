"""
Check In / Check Out Use Cases

Members open and close a gym visit.
"""

import logging
from uuid import UUID

from gym_service.app.services.clock import Clock
from gym_service.app.services.unit_of_work import UnitOfWork
from gym_service.domain.entities import AttendanceEntry, AttendanceMethod
from gym_service.libs.result import Result, Return
from .dtos import AttendanceEntryResponse, CheckInOutResponse

logger = logging.getLogger(__name__)


class CheckInUseCase:
    """
    Business Rules:
    - At most one open entry (null check_out) per user
    - Checking in while an entry is open changes nothing
    """

    def __init__(self, uow: UnitOfWork, clock: Clock):
        self.uow = uow
        self.clock = clock

    async def execute(
        self, user_id: UUID, method: AttendanceMethod = AttendanceMethod.manual
    ) -> Result[CheckInOutResponse]:
        async with self.uow:
            open_entry = await self.uow.attendance.get_open_for_user(user_id)
            if open_entry:
                return Return.ok(
                    CheckInOutResponse(
                        changed=False, entry=AttendanceEntryResponse.from_entry(open_entry)
                    )
                )

            entry = AttendanceEntry(user_id=user_id, check_in=self.clock.now(), method=method)
            entry = await self.uow.attendance.create(entry)
            await self.uow.commit()

            logger.debug(f"User {user_id} checked in at {entry.check_in}")
            return Return.ok(
                CheckInOutResponse(changed=True, entry=AttendanceEntryResponse.from_entry(entry))
            )


class CheckOutUseCase:
    """
    Business Rules:
    - Closes the most recent open entry
    - Checking out with nothing open changes nothing
    """

    def __init__(self, uow: UnitOfWork, clock: Clock):
        self.uow = uow
        self.clock = clock

    async def execute(self, user_id: UUID) -> Result[CheckInOutResponse]:
        async with self.uow:
            open_entry = await self.uow.attendance.get_open_for_user(user_id)
            if not open_entry:
                return Return.ok(CheckInOutResponse(changed=False))

            open_entry.check_out = self.clock.now()
            entry = await self.uow.attendance.update(open_entry)
            await self.uow.commit()

            logger.debug(f"User {user_id} checked out at {entry.check_out}")
            return Return.ok(
                CheckInOutResponse(changed=True, entry=AttendanceEntryResponse.from_entry(entry))
            )
