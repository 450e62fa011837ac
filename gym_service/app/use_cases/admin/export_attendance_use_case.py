"""
Export Attendance Use Case

Renders check-ins within a date range as a CSV document.
"""

import csv
import io
from datetime import date, datetime, timedelta
from typing import Iterable, Optional

from gym_service.app.repositories.attendance_repository import AttendanceDetail
from gym_service.app.services.clock import Clock, start_of_day
from gym_service.app.services.unit_of_work import UnitOfWork
from gym_service.libs.result import Error, Result, Return
from .dtos import AttendanceExport

CSV_HEADER = "Member,Check In,Check Out,Method"
DEFAULT_EXPORT_DAYS = 30
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def _format_timestamp(value: Optional[datetime]) -> str:
    return value.strftime(TIMESTAMP_FORMAT) if value else ""


def render_attendance_csv(rows: Iterable[AttendanceDetail]) -> str:
    """
    Header line as is, every data field double-quoted with embedded quotes
    doubled, CRLF after every line including the last.
    """
    buffer = io.StringIO()
    buffer.write(CSV_HEADER + "\r\n")
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\r\n")
    for row in rows:
        writer.writerow(
            [
                row.member_name,
                _format_timestamp(row.check_in),
                _format_timestamp(row.check_out),
                row.method.value,
            ]
        )
    return buffer.getvalue()


class ExportAttendanceUseCase:
    """
    Business Rules:
    - Range is inclusive on both calendar dates
    - Without both bounds the range is the last 30 days (today-29 .. today)
    - Rows ordered by check-in, oldest first
    """

    def __init__(self, uow: UnitOfWork, clock: Clock):
        self.uow = uow
        self.clock = clock

    async def execute(
        self, date_from: Optional[date] = None, date_to: Optional[date] = None
    ) -> Result[AttendanceExport]:
        if date_from is None or date_to is None:
            date_to = self.clock.today()
            date_from = date_to - timedelta(days=DEFAULT_EXPORT_DAYS - 1)

        if date_from > date_to:
            return Return.err(Error("INVALID_DATE_RANGE", "'from' must not be after 'to'"))

        async with self.uow:
            rows = await self.uow.attendance.list_details_between(
                start_of_day(date_from), start_of_day(date_to + timedelta(days=1))
            )

        return Return.ok(
            AttendanceExport(
                filename=f"attendance_{date_from.isoformat()}_to_{date_to.isoformat()}.csv",
                content=render_attendance_csv(rows),
                rows=len(rows),
            )
        )
