from datetime import datetime, timedelta

from gym_service.app.services.clock import Clock


class FixedClock(Clock):
    """Clock frozen at a given instant until moved explicitly"""

    def __init__(self, now: datetime):
        self._now = now

    def now(self) -> datetime:
        return self._now

    def set(self, now: datetime) -> None:
        self._now = now

    def advance(self, **kwargs) -> datetime:
        self._now = self._now + timedelta(**kwargs)
        return self._now
