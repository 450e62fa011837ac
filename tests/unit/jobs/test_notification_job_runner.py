from contextlib import asynccontextmanager
from datetime import date, datetime
from uuid import uuid4

import pytest

from gym_service.app.jobs.daily_run_gate import DailyRunGate
from gym_service.app.jobs.notification_job_runner import NotificationJobRunner
from gym_service.app.repositories.attendance_repository import MemberVisitCount
from gym_service.app.repositories.membership_repository import MembershipDetail
from gym_service.domain.entities import MembershipStatus, User


@pytest.fixture
def idle_uow(mock_uow):
    mock_uow.memberships.activate_pending.return_value = 0
    mock_uow.memberships.expire_active.return_value = 0
    mock_uow.memberships.find_active_ending_on.return_value = []
    mock_uow.attendance.find_members_below_visits.return_value = []
    return mock_uow


def make_runner(uow, sender, clock, last_run_key=None):
    @asynccontextmanager
    async def scope():
        yield uow

    gate = DailyRunGate(clock, run_hour=9, last_run_key=last_run_key)
    return NotificationJobRunner(scope, sender, clock, gate)


@pytest.mark.asyncio
async def test_before_run_hour_only_advances_lifecycle(idle_uow, sender, clock):
    clock.set(datetime(2025, 3, 10, 8, 0))
    runner = make_runner(idle_uow, sender, clock)

    summary = await runner.run_hourly_tasks()

    assert summary.failed is False
    assert summary.lifecycle is not None
    assert summary.daily is None
    idle_uow.memberships.activate_pending.assert_awaited_once_with(date(2025, 3, 10))
    idle_uow.memberships.find_active_ending_on.assert_not_called()
    assert runner.gate.last_run_key is None


@pytest.mark.asyncio
async def test_daily_body_runs_once_per_day(idle_uow, sender, clock):
    clock.set(datetime(2025, 3, 10, 9, 0))
    runner = make_runner(idle_uow, sender, clock, last_run_key="2025-03-09")

    first = await runner.run_hourly_tasks()
    clock.advance(hours=1)
    second = await runner.run_hourly_tasks()

    assert first.daily is not None
    assert first.daily.day == date(2025, 3, 10)
    assert second.daily is None
    assert runner.gate.last_run_key == "2025-03-10"
    idle_uow.memberships.find_active_ending_on.assert_awaited_once()
    assert idle_uow.memberships.activate_pending.await_count == 2


@pytest.mark.asyncio
async def test_renewal_and_attendance_reminders_are_recorded(idle_uow, sender, clock):
    member = User(id=uuid4(), name="Sam", email="sam@example.com", password_hash="x")
    idle_uow.memberships.find_active_ending_on.return_value = [
        MembershipDetail(
            id=uuid4(),
            user_id=member.id,
            user_name=member.name,
            user_email=member.email,
            plan_name="Monthly",
            start_date=date(2025, 2, 12),
            end_date=date(2025, 3, 13),
            status=MembershipStatus.active,
        )
    ]
    idle_uow.attendance.find_members_below_visits.return_value = [
        MemberVisitCount(user_id=member.id, name=member.name, visits=1)
    ]
    idle_uow.notifications.exists_between.return_value = False
    idle_uow.notifications.create.side_effect = lambda n: n
    idle_uow.users.get_by_id.return_value = member

    summary = await make_runner(idle_uow, sender, clock).run_hourly_tasks()

    assert summary.daily.renewal_created == 1
    assert summary.daily.attendance_created == 1
    assert summary.daily.delivery_failures == 0

    messages = [call.args[0].message for call in idle_uow.notifications.create.call_args_list]
    assert "Your Monthly membership expires on 2025-03-13. Consider renewing." in messages
    assert "We miss you! Try to visit at least twice this week." in messages
    assert [m.subject for m in sender.sent] == ["Membership Renewal Reminder", "We miss you at the gym"]


@pytest.mark.asyncio
async def test_failure_is_reported_and_gate_stays_open(idle_uow, sender, clock):
    idle_uow.memberships.find_active_ending_on.side_effect = RuntimeError("connection lost")
    runner = make_runner(idle_uow, sender, clock)

    summary = await runner.run_hourly_tasks()

    assert summary.failed is True
    assert "connection lost" in summary.error
    assert runner.gate.last_run_key is None
    assert runner.gate.should_run_daily() is True


@pytest.mark.asyncio
async def test_lifecycle_failure_does_not_raise(idle_uow, sender, clock):
    idle_uow.memberships.activate_pending.side_effect = RuntimeError("database is locked")

    summary = await make_runner(idle_uow, sender, clock).run_hourly_tasks()

    assert summary.failed is True
    assert summary.lifecycle is None


@pytest.mark.asyncio
async def test_run_now_ignores_hour_and_marks_gate(idle_uow, sender, clock):
    clock.set(datetime(2025, 3, 10, 6, 0))
    runner = make_runner(idle_uow, sender, clock)

    summary = await runner.run_now()

    assert summary.daily is not None
    assert runner.gate.last_run_key == "2025-03-10"

    clock.set(datetime(2025, 3, 10, 11, 0))
    later = await runner.run_hourly_tasks()
    assert later.daily is None


@pytest.mark.asyncio
async def test_run_now_failure_is_reported_and_gate_stays_open(idle_uow, sender, clock):
    idle_uow.attendance.find_members_below_visits.side_effect = RuntimeError("disk I/O error")
    runner = make_runner(idle_uow, sender, clock)

    summary = await runner.run_now()

    assert summary.failed is True
    assert "disk I/O error" in summary.error
    assert summary.daily is None
    assert runner.gate.last_run_key is None
