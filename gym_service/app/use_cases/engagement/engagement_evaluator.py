"""
Engagement Evaluator

Read-only queries deciding who is due a renewal or attendance reminder today.
"""

from datetime import date, datetime, timedelta
from typing import List, Tuple

from gym_service.app.services.clock import start_of_day
from gym_service.app.services.unit_of_work import UnitOfWork
from .dtos import AttendanceReminder, RenewalReminder

RENEWAL_REMINDER_DAYS = (3, 1, 0)
ATTENDANCE_WINDOW_DAYS = 7
ATTENDANCE_THRESHOLD = 2


def attendance_window(today: date, days: int = ATTENDANCE_WINDOW_DAYS) -> Tuple[datetime, datetime]:
    """
    Trailing window of `days` calendar days ending with today.

    Check-ins dated today-(days-1) through today fall inside; today-days is
    the excluded boundary.
    """
    since = start_of_day(today - timedelta(days=days - 1))
    until = start_of_day(today + timedelta(days=1))
    return since, until


class EngagementEvaluator:
    """
    Finds members due a reminder on a given day.

    Business Rules:
    - Renewal: active membership of an active user ending in 3, 1 or 0 days
    - Attendance: active member with fewer than 2 check-ins in the trailing 7 days
    - Pure reads; delivery and de-duplication belong to IdempotentNotifier
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def find_due_renewal_reminders(self, today: date) -> List[RenewalReminder]:
        end_dates = [today + timedelta(days=days) for days in RENEWAL_REMINDER_DAYS]
        async with self.uow:
            rows = await self.uow.memberships.find_active_ending_on(end_dates)

        return [
            RenewalReminder(
                membership_id=row.id,
                user_id=row.user_id,
                plan_name=row.plan_name,
                end_date=row.end_date,
                days_left=(row.end_date - today).days,
            )
            for row in rows
        ]

    async def find_due_attendance_reminders(self, today: date) -> List[AttendanceReminder]:
        since, until = attendance_window(today)
        async with self.uow:
            rows = await self.uow.attendance.find_members_below_visits(
                since, until, ATTENDANCE_THRESHOLD
            )

        return [
            AttendanceReminder(user_id=row.user_id, name=row.name, visits=row.visits)
            for row in rows
        ]
