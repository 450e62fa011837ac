from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from gym_service.domain.entities import AttendanceEntry, AttendanceMethod


class AttendanceEntryResponse(BaseModel):
    id: str
    check_in: datetime
    check_out: Optional[datetime] = None
    method: AttendanceMethod

    @classmethod
    def from_entry(cls, entry: AttendanceEntry) -> "AttendanceEntryResponse":
        return cls(
            id=str(entry.id),
            check_in=entry.check_in,
            check_out=entry.check_out,
            method=entry.method,
        )


class AttendanceListResponse(BaseModel):
    entries: List[AttendanceEntryResponse]
    open_entry: Optional[AttendanceEntryResponse] = None


class CheckInOutResponse(BaseModel):
    """changed is False when the request was a no-op"""

    changed: bool
    entry: Optional[AttendanceEntryResponse] = None
