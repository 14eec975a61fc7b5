import logging

from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction
from django.utils import timezone

from reminders.models import Reminder
from .birthday import generate_birthday_reminders
from .common import reminder_setting
from .payment import generate_payment_reminders

logger = logging.getLogger(__name__)


# ============================================================
# ENGINE ENTRY POINTS
# ============================================================

def run_scheduled_generation(today=None):
    """
    Daily job: birthday reminders on the batch window plus
    payment reminders. Safe to re-run on the same day.
    """
    today = today or timezone.localdate()
    window_days = reminder_setting("BIRTHDAY_BATCH_WINDOW_DAYS")

    logger.info("Running scheduled reminder generation for %s", today)

    birthdays = generate_birthday_reminders(window_days=window_days, today=today)
    payments = generate_payment_reminders(today=today)

    return {"reminders_created": birthdays + payments}


def run_on_demand_birthday_generation(today=None):
    """User-triggered birthday recompute on the on-demand window."""
    window_days = reminder_setting("BIRTHDAY_ON_DEMAND_WINDOW_DAYS")
    created = generate_birthday_reminders(window_days=window_days, today=today)
    return {"created": created}


# ============================================================
# STAFF ACTIONS
# ============================================================

def create_reminder(*, title, due_date, reminder_type=Reminder.Type.GENERAL,
                    description="", resident=None):
    """
    Staff-entered reminder. A pending birthday or payment reminder that
    collides with an existing one for the same period is rejected with
    ValidationError.
    """
    try:
        with transaction.atomic():
            return Reminder.objects.create(
                title=title,
                description=description,
                reminder_type=reminder_type,
                due_date=due_date,
                resident=resident,
                status=Reminder.Status.PENDING,
            )
    except IntegrityError as exc:
        raise ValidationError(
            "A pending reminder of this type already exists for the resident in this period."
        ) from exc


@transaction.atomic
def complete_reminder(reminder_id):
    reminder = Reminder.objects.select_for_update().get(pk=reminder_id)
    reminder.mark_complete()
    return reminder


def delete_reminder(reminder_id):
    deleted, _ = Reminder.objects.filter(pk=reminder_id).delete()
    if not deleted:
        raise Reminder.DoesNotExist(f"Reminder {reminder_id} does not exist.")
