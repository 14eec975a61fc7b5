"""
reminders/services/birthday.py

Birthday reminders for active residents.

The scheduled job and the on-demand button look ahead by
different numbers of days; callers pass the window explicitly.
"""

import logging
from datetime import date

from django.db import DatabaseError
from django.utils import timezone

from reminders.models import Reminder
from .common import (
    active_residents,
    insert_reminder,
    pending_reminder_exists,
)

logger = logging.getLogger(__name__)


def birthday_in_year(date_of_birth, year):
    """Feb 29 birthdays are observed on Feb 28 in common years."""
    try:
        return date_of_birth.replace(year=year)
    except ValueError:
        return date(year, 2, 28)


def next_birthday(date_of_birth, today):
    """
    The resident's next birthday on or after `today`.
    A birthday falling on `today` has not passed yet.
    """
    upcoming = birthday_in_year(date_of_birth, today.year)
    if upcoming < today:
        upcoming = birthday_in_year(date_of_birth, today.year + 1)
    return upcoming


def _ensure_birthday_reminder(resident, upcoming):
    year_start = date(upcoming.year, 1, 1)
    year_end = date(upcoming.year, 12, 31)

    if pending_reminder_exists(resident, Reminder.Type.BIRTHDAY, year_start, year_end):
        return False

    age = upcoming.year - resident.date_of_birth.year

    return insert_reminder(
        title=f"{resident.full_name}'s Birthday",
        description=f"{resident.full_name} will turn {age} years old",
        reminder_type=Reminder.Type.BIRTHDAY,
        due_date=upcoming,
        resident=resident,
    )


def generate_birthday_reminders(*, window_days, today=None):
    """
    Create one pending birthday reminder per resident whose next
    birthday is 1..window_days days away.

    Re-running with the same data creates nothing new: an existing
    pending reminder in the birthday's calendar year blocks the
    insert. A failure for one resident is logged and skipped.

    Returns the number of reminders created.
    """
    today = today or timezone.localdate()
    residents = active_residents(date_of_birth__isnull=False)

    created = 0

    for resident in residents:
        upcoming = next_birthday(resident.date_of_birth, today)
        days_until = (upcoming - today).days

        if not 0 < days_until <= window_days:
            continue

        try:
            if _ensure_birthday_reminder(resident, upcoming):
                created += 1
                logger.info(
                    "Created birthday reminder for resident %s due %s",
                    resident.pk, upcoming
                )
        except DatabaseError:
            logger.exception(
                "Birthday reminder failed for resident %s; continuing",
                resident.pk
            )

    logger.info(
        "Birthday reminders (%s-day window, %s): %s created for %s residents",
        window_days, today, created, len(residents)
    )
    return created
