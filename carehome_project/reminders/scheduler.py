from apscheduler.schedulers.background import BackgroundScheduler
from django.conf import settings
from django.core.management import call_command
from django.core.management.base import CommandError
from django.utils import timezone
import logging

logger = logging.getLogger(__name__)

# ============================================================
# GLOBAL SAFETY LOCK
# Prevents scheduler from starting more than once
# ============================================================
_scheduler = None


def start_scheduler():
    """
    Start APScheduler safely.

    - Respects ENABLE_SCHEDULER setting
    - Prevents double start (Django autoreload, imports)
    - Single-process deployments only; run the management
      command from cron when there are several workers
    """
    global _scheduler

    if not getattr(settings, "ENABLE_SCHEDULER", False):
        logger.info("APScheduler disabled via settings (ENABLE_SCHEDULER=False)")
        return None

    if _scheduler is not None:
        logger.info("APScheduler already running, skipping initialization")
        return _scheduler

    logger.info("Starting APScheduler...")

    _scheduler = BackgroundScheduler(
        timezone=settings.TIME_ZONE
    )

    # --------------------------------------------
    # SCHEDULE: ONCE A DAY
    # --------------------------------------------
    _scheduler.add_job(
        run_daily_reminders,
        trigger="cron",
        hour=settings.REMINDER_SCHEDULE_HOUR,
        minute=settings.REMINDER_SCHEDULE_MINUTE,
        id="generate_reminders",
        replace_existing=True,
        max_instances=1,      # Prevent overlapping runs
        coalesce=True,        # Merge missed runs if server was down
    )

    _scheduler.start()

    logger.info(
        "APScheduler started: reminders generated daily at %02d:%02d",
        settings.REMINDER_SCHEDULE_HOUR,
        settings.REMINDER_SCHEDULE_MINUTE,
    )
    return _scheduler


def shutdown_scheduler():
    global _scheduler

    if _scheduler is None:
        return

    _scheduler.shutdown(wait=False)
    _scheduler = None


def run_daily_reminders():
    """
    Wrapper job that calls the management command.
    Keeps all business logic out of the scheduler.
    """
    now = timezone.now()
    logger.info("Running scheduled reminder generation at %s", f"{now:%Y-%m-%d %H:%M:%S}")

    try:
        call_command("generate_reminders")
    except CommandError:
        logger.exception("Scheduled reminder generation failed")
