from .check_in_use_case import CheckInUseCase, CheckOutUseCase
from .list_attendance_use_case import ListAttendanceUseCase
from .dtos import AttendanceEntryResponse, AttendanceListResponse, CheckInOutResponse

__all__ = [
    "CheckInUseCase",
    "CheckOutUseCase",
    "ListAttendanceUseCase",
    "AttendanceEntryResponse",
    "AttendanceListResponse",
    "CheckInOutResponse",
]
