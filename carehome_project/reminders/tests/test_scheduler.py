from unittest import mock

import pytest
from django.core.management.base import CommandError
from django.test import override_settings

from reminders import scheduler


@pytest.fixture(autouse=True)
def reset_scheduler():
    yield
    scheduler.shutdown_scheduler()


@override_settings(ENABLE_SCHEDULER=False)
def test_scheduler_disabled_by_setting():
    assert scheduler.start_scheduler() is None


@override_settings(ENABLE_SCHEDULER=True, REMINDER_SCHEDULE_HOUR=7, REMINDER_SCHEDULE_MINUTE=30)
def test_scheduler_registers_single_daily_job():
    with mock.patch.object(scheduler, "BackgroundScheduler") as scheduler_cls:
        first = scheduler.start_scheduler()
        second = scheduler.start_scheduler()

    assert first is second
    scheduler_cls.assert_called_once()
    instance = scheduler_cls.return_value
    instance.add_job.assert_called_once()
    _, kwargs = instance.add_job.call_args
    assert kwargs["trigger"] == "cron"
    assert kwargs["hour"] == 7
    assert kwargs["minute"] == 30
    assert kwargs["max_instances"] == 1
    instance.start.assert_called_once()


def test_daily_job_logs_command_failure():
    with mock.patch.object(
        scheduler, "call_command", side_effect=CommandError("boom")
    ), mock.patch.object(scheduler, "logger") as logger:
        scheduler.run_daily_reminders()

    logger.exception.assert_called_once_with("Scheduled reminder generation failed")
