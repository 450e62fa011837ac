from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel

from gym_service.domain.entities import AttendanceEntry, AttendanceMethod


class AttendanceDetail(BaseModel):
    """Attendance entry joined with the member's name"""

    id: UUID
    user_id: UUID
    member_name: str
    member_email: str
    check_in: datetime
    check_out: Optional[datetime]
    method: AttendanceMethod


class MemberVisitCount(BaseModel):
    """Visit count of one member over a window"""

    user_id: UUID
    name: str
    visits: int


class IAttendanceRepository(ABC):
    """Attendance repository interface - application layer"""

    @abstractmethod
    async def get_open_for_user(self, user_id: UUID) -> Optional[AttendanceEntry]:
        """Latest entry of a user without check_out"""
        pass

    @abstractmethod
    async def create(self, entry: AttendanceEntry) -> AttendanceEntry:
        """Create a new entry"""
        pass

    @abstractmethod
    async def update(self, entry: AttendanceEntry) -> AttendanceEntry:
        """Update existing entry"""
        pass

    @abstractmethod
    async def list_recent_for_user(self, user_id: UUID, limit: int = 50) -> List[AttendanceEntry]:
        """Latest entries of a user, newest first"""
        pass

    @abstractmethod
    async def count_for_user_between(
        self, user_id: UUID, since: datetime, until: datetime
    ) -> int:
        """Count check-ins of a user within [since, until)"""
        pass

    @abstractmethod
    async def list_details_between(
        self, since: datetime, until: datetime, newest_first: bool = False, limit: Optional[int] = None
    ) -> List[AttendanceDetail]:
        """Check-ins within [since, until) with member names"""
        pass

    @abstractmethod
    async def count_between(self, since: datetime, until: datetime) -> int:
        """Count all check-ins within [since, until)"""
        pass

    @abstractmethod
    async def top_members_since(self, since: datetime, limit: int = 10) -> List[MemberVisitCount]:
        """Members with most check-ins since a moment"""
        pass

    @abstractmethod
    async def find_members_below_visits(
        self, since: datetime, until: datetime, threshold: int
    ) -> List[MemberVisitCount]:
        """Active members with fewer than threshold check-ins within [since, until)"""
        pass
