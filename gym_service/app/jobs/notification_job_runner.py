"""
Notification Job Runner

Hourly lifecycle sweep plus the gated daily notification job.
"""

import asyncio
import logging
from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel

from gym_service.app.jobs.daily_run_gate import DailyRunGate
from gym_service.app.services.clock import Clock
from gym_service.app.services.message_sender import IMessageSender
from gym_service.app.services.unit_of_work import UnitOfWorkScope
from gym_service.app.use_cases.engagement import (
    DedupeWindow,
    EngagementEvaluator,
    IdempotentNotifier,
    NotifyOutcome,
    NotifyStatus,
)
from gym_service.app.use_cases.memberships.advance_lifecycle_use_case import (
    AdvanceLifecycleResponse,
    AdvanceLifecycleUseCase,
)
from gym_service.domain.entities import NotificationType

logger = logging.getLogger(__name__)


class DailyRunSummary(BaseModel):
    """Counters of one daily notification run"""

    day: date
    renewal_created: int = 0
    renewal_skipped: int = 0
    attendance_created: int = 0
    attendance_skipped: int = 0
    delivery_failures: int = 0

    def record(self, notification_type: NotificationType, outcome: NotifyOutcome) -> None:
        created = outcome.status == NotifyStatus.created
        if notification_type == NotificationType.renewal:
            if created:
                self.renewal_created += 1
            else:
                self.renewal_skipped += 1
        else:
            if created:
                self.attendance_created += 1
            else:
                self.attendance_skipped += 1
        if created and not outcome.delivered:
            self.delivery_failures += 1


class JobRunSummary(BaseModel):
    """What one hourly tick or manual trigger did"""

    ran_at: datetime
    lifecycle: Optional[AdvanceLifecycleResponse] = None
    daily: Optional[DailyRunSummary] = None
    failed: bool = False
    error: Optional[str] = None


class NotificationJobRunner:
    """
    Owns the daily gate and serialises job bodies.

    Business Rules:
    - Every tick advances the membership lifecycle
    - The daily body runs only when the gate admits it, and marks the gate
      only after it completes
    - A failed tick is logged and reported, never raised; the next tick retries
    - The manual trigger bypasses the hour check but still marks the gate
    - One job body in flight at a time
    """

    def __init__(
        self,
        uow_scope: UnitOfWorkScope,
        sender: IMessageSender,
        clock: Clock,
        gate: DailyRunGate,
        dashboard_url: str = "",
    ):
        self.uow_scope = uow_scope
        self.sender = sender
        self.clock = clock
        self.gate = gate
        self.dashboard_url = dashboard_url
        self._lock = asyncio.Lock()

    async def run_hourly_tasks(self) -> JobRunSummary:
        async with self._lock:
            now = self.clock.now()
            summary = JobRunSummary(ran_at=now)
            try:
                summary.lifecycle = await self._advance_lifecycle(now.date())
                if self.gate.should_run_daily(now):
                    summary.daily = await self._run_daily_notifications(now.date())
                    self.gate.mark_completed(now)
            except Exception as e:
                logger.exception("Hourly tasks failed")
                summary.failed = True
                summary.error = str(e)
                return summary

        logger.info(f"Hourly tick complete: {summary.model_dump(exclude={'ran_at'})}")
        return summary

    async def run_now(self) -> JobRunSummary:
        """Manual trigger: lifecycle and daily body immediately, then mark the gate"""
        async with self._lock:
            now = self.clock.now()
            summary = JobRunSummary(ran_at=now)
            try:
                summary.lifecycle = await self._advance_lifecycle(now.date())
                summary.daily = await self._run_daily_notifications(now.date())
                self.gate.mark_completed(now)
            except Exception as e:
                logger.exception("Manual daily run failed")
                summary.failed = True
                summary.error = str(e)
                return summary

        logger.info(f"Manual daily run complete for {now.date()}")
        return summary

    async def _advance_lifecycle(self, today: date) -> AdvanceLifecycleResponse:
        async with self.uow_scope() as uow:
            result = await AdvanceLifecycleUseCase(uow).execute(today)
        return result.value

    async def _run_daily_notifications(self, today: date) -> DailyRunSummary:
        summary = DailyRunSummary(day=today)

        async with self.uow_scope() as uow:
            evaluator = EngagementEvaluator(uow)
            renewals = await evaluator.find_due_renewal_reminders(today)
            low_attendance = await evaluator.find_due_attendance_reminders(today)

            notifier = IdempotentNotifier(uow, self.sender, self.clock, self.dashboard_url)
            for reminder in renewals:
                outcome = await notifier.notify_once(
                    reminder.user_id,
                    NotificationType.renewal,
                    reminder.message(),
                    DedupeWindow.same_day(),
                )
                summary.record(NotificationType.renewal, outcome)

            for reminder in low_attendance:
                outcome = await notifier.notify_once(
                    reminder.user_id,
                    NotificationType.attendance,
                    reminder.message(),
                    DedupeWindow.trailing(7),
                )
                summary.record(NotificationType.attendance, outcome)

        logger.info(f"Daily notifications complete: {summary.model_dump()}")
        return summary
