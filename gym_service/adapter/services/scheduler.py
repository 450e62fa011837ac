import logging

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.cron import CronTrigger

from gym_service.app.jobs.notification_job_runner import NotificationJobRunner

logger = logging.getLogger(__name__)

HOURLY_JOB_ID = "hourly-tasks"


def build_scheduler(runner: NotificationJobRunner) -> AsyncIOScheduler:
    """Scheduler firing runner.run_hourly_tasks at minute 0 of every hour"""
    scheduler = AsyncIOScheduler()
    scheduler.add_job(
        runner.run_hourly_tasks,
        CronTrigger(minute=0),
        id=HOURLY_JOB_ID,
        max_instances=1,
        coalesce=True,
        replace_existing=True,
    )
    logger.info("Hourly scheduler configured")
    return scheduler
