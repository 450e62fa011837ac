from datetime import date, datetime

from gym_service.app.jobs.daily_run_gate import DailyRunGate, DailyRunState
from tests.fixtures.clock import FixedClock


def make_gate(now: datetime, run_hour: int = 9, last_run_key=None) -> DailyRunGate:
    return DailyRunGate(FixedClock(now), run_hour=run_hour, last_run_key=last_run_key)


def test_closed_before_run_hour():
    gate = make_gate(datetime(2025, 3, 10, 8, 59))

    assert gate.should_run_daily() is False


def test_open_after_run_hour_when_last_run_was_yesterday():
    gate = make_gate(datetime(2025, 3, 10, 9, 1), last_run_key="2025-03-09")

    assert gate.should_run_daily() is True


def test_open_at_exact_run_hour():
    gate = make_gate(datetime(2025, 3, 10, 9, 0))

    assert gate.should_run_daily() is True


def test_closed_after_completion_same_day():
    gate = make_gate(datetime(2025, 3, 10, 9, 1))
    gate.mark_completed()

    assert gate.should_run_daily() is False
    assert gate.should_run_daily(datetime(2025, 3, 10, 23, 0)) is False
    assert gate.state() == DailyRunState.run


def test_reopens_next_day():
    gate = make_gate(datetime(2025, 3, 10, 9, 1))
    gate.mark_completed()

    assert gate.should_run_daily(datetime(2025, 3, 11, 8, 0)) is False
    assert gate.should_run_daily(datetime(2025, 3, 11, 9, 0)) is True
    assert gate.state(datetime(2025, 3, 11, 9, 0)) == DailyRunState.not_run


def test_run_hour_override():
    gate = make_gate(datetime(2025, 3, 10, 7, 30))

    assert gate.should_run_daily(run_hour=7) is True
    assert gate.should_run_daily(run_hour=8) is False


def test_day_key_format():
    assert DailyRunGate.day_key(date(2025, 1, 5)) == "2025-01-05"
    assert DailyRunGate.day_key(datetime(2025, 12, 31, 23, 59)) == "2025-12-31"
