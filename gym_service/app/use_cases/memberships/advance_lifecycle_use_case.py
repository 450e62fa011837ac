"""
Advance Lifecycle Use Case

Date-driven membership status transitions, applied in bulk.
"""

import logging
from datetime import date

from pydantic import BaseModel

from gym_service.app.services.unit_of_work import UnitOfWork
from gym_service.libs.result import Result, Return

logger = logging.getLogger(__name__)


class AdvanceLifecycleResponse(BaseModel):
    """Rows moved by one lifecycle pass"""

    today: date
    activated: int
    expired: int


class AdvanceLifecycleUseCase:
    """
    Move memberships along pending -> active -> expired.

    Business Rules:
    - pending memberships with start_date <= today become active
    - active memberships with end_date < today become expired
    - Both are set-based updates, each committed on its own
    - Idempotent: a second pass with the same date changes nothing
    - A store error propagates; whatever already committed stays, and the
      next pass completes the rest
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, today: date) -> Result[AdvanceLifecycleResponse]:
        async with self.uow:
            activated = await self.uow.memberships.activate_pending(today)
            await self.uow.commit()

            expired = await self.uow.memberships.expire_active(today)
            await self.uow.commit()

        if activated or expired:
            logger.info(f"Lifecycle {today}: activated={activated} expired={expired}")

        return Return.ok(
            AdvanceLifecycleResponse(today=today, activated=activated, expired=expired)
        )
