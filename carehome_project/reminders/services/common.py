import logging

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.db import IntegrityError, transaction

from reminders.models import Reminder
from residents.models import Resident

logger = logging.getLogger(__name__)


def reminder_setting(name):
    """
    Read a day-count setting of the reminder engine.

    A missing or negative value is a configuration error and is
    raised to the caller rather than skipped.
    """
    value = getattr(settings, name, None)
    if not isinstance(value, int) or isinstance(value, bool) or value < 0:
        raise ImproperlyConfigured(
            f"{name} must be a non-negative number of days (got {value!r})."
        )
    return value


def active_residents(**filters):
    """
    Evaluated eagerly so a store outage surfaces here, before
    any per-resident work starts.
    """
    return list(
        Resident.objects
        .filter(status=Resident.Status.ACTIVE, **filters)
        .only("id", "full_name", "date_of_birth")
        .order_by("id")
    )


def pending_reminder_exists(resident, reminder_type, start, end):
    return Reminder.objects.filter(
        resident=resident,
        reminder_type=reminder_type,
        status=Reminder.Status.PENDING,
        due_date__gte=start,
        due_date__lte=end,
    ).exists()


def insert_reminder(**fields):
    """
    Insert a pending reminder.

    Returns False when the unique pending-per-period constraint
    rejects the row, i.e. a concurrent run already created it.
    """
    try:
        with transaction.atomic():
            Reminder.objects.create(status=Reminder.Status.PENDING, **fields)
    except IntegrityError:
        logger.info(
            "Skipped duplicate %s reminder for resident %s due %s",
            fields.get("reminder_type"),
            getattr(fields.get("resident"), "pk", None),
            fields.get("due_date"),
        )
        return False
    return True
