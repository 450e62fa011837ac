"""Engagement: reminder evaluation and de-duplicated notification delivery."""

from .dtos import AttendanceReminder, NotifyOutcome, NotifyStatus, RenewalReminder
from .engagement_evaluator import (
    ATTENDANCE_THRESHOLD,
    ATTENDANCE_WINDOW_DAYS,
    RENEWAL_REMINDER_DAYS,
    EngagementEvaluator,
    attendance_window,
)
from .idempotent_notifier import (
    DedupeWindow,
    IdempotentNotifier,
    dedupe_window_for,
)

__all__ = [
    "AttendanceReminder",
    "RenewalReminder",
    "NotifyOutcome",
    "NotifyStatus",
    "EngagementEvaluator",
    "attendance_window",
    "RENEWAL_REMINDER_DAYS",
    "ATTENDANCE_WINDOW_DAYS",
    "ATTENDANCE_THRESHOLD",
    "DedupeWindow",
    "IdempotentNotifier",
    "dedupe_window_for",
]
