"""
Daily Run Gate

Admits the once-per-day job body at most once per calendar day, however often
the hourly trigger fires.
"""

from datetime import date, datetime
from enum import Enum
from typing import Optional, Union

from gym_service.app.services.clock import Clock


class DailyRunState(str, Enum):
    not_run = "NOT_RUN"
    run = "RUN"


class DailyRunGate:
    """
    In-process record of the last successful daily run.

    The state is not persisted: a restart re-arms the gate, so one extra daily
    run per restart is possible.
    """

    def __init__(self, clock: Clock, run_hour: int = 9, last_run_key: Optional[str] = None):
        self.clock = clock
        self.run_hour = run_hour
        self.last_run_key = last_run_key

    @staticmethod
    def day_key(moment: Union[datetime, date]) -> str:
        return moment.strftime("%Y-%m-%d")

    def should_run_daily(
        self, now: Optional[datetime] = None, run_hour: Optional[int] = None
    ) -> bool:
        """True once the run hour is reached and today's run has not completed"""
        now = now or self.clock.now()
        hour = self.run_hour if run_hour is None else run_hour
        return now.hour >= hour and self.last_run_key != self.day_key(now)

    def mark_completed(self, now: Optional[datetime] = None) -> None:
        """Record a successful run for the day of `now`"""
        self.last_run_key = self.day_key(now or self.clock.now())

    def state(self, now: Optional[datetime] = None) -> DailyRunState:
        now = now or self.clock.now()
        if self.last_run_key == self.day_key(now):
            return DailyRunState.run
        return DailyRunState.not_run
