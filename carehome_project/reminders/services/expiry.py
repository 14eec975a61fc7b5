import logging
from datetime import timedelta

from django.utils import timezone

from reminders.models import Reminder
from .common import reminder_setting

logger = logging.getLogger(__name__)


def sweep_expired_birthday_reminders(*, today=None, grace_days=None):
    """
    Delete pending birthday reminders more than `grace_days` past due.

    Runs before the reminder board is rendered. Payment, document
    and general reminders stay until staff complete or delete them.
    """
    today = today or timezone.localdate()
    if grace_days is None:
        grace_days = reminder_setting("BIRTHDAY_EXPIRY_GRACE_DAYS")

    cutoff = today - timedelta(days=grace_days)

    deleted, _ = (
        Reminder.objects
        .filter(
            reminder_type=Reminder.Type.BIRTHDAY,
            status=Reminder.Status.PENDING,
            due_date__lt=cutoff,
        )
        .delete()
    )

    if deleted:
        logger.info("Swept %s expired birthday reminders (due before %s)", deleted, cutoff)

    return deleted
