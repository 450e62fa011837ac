from abc import ABC, abstractmethod
from datetime import date, datetime, time, timedelta
from typing import Tuple


class Clock(ABC):
    """Source of "now" for every date-driven rule"""

    @abstractmethod
    def now(self) -> datetime:
        pass

    def today(self) -> date:
        return self.now().date()


class SystemClock(Clock):
    """Wall clock in the server's local time"""

    def now(self) -> datetime:
        return datetime.now()


def start_of_day(day: date) -> datetime:
    return datetime.combine(day, time.min)


def day_bounds(day: date) -> Tuple[datetime, datetime]:
    """[start, end) of a calendar day"""
    start = start_of_day(day)
    return start, start + timedelta(days=1)
