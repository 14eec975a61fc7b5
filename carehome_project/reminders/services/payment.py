"""
reminders/services/payment.py

Monthly payment-due reminders, anchored to the day of month of
each resident's first recorded payment. Meant to run once a day.
"""

import calendar
import logging

from django.db import DatabaseError
from django.db.models import Min
from django.utils import timezone

from billing.models import Payment
from reminders.models import Reminder
from .common import (
    active_residents,
    insert_reminder,
    pending_reminder_exists,
)

logger = logging.getLogger(__name__)


def earliest_payment_dates():
    rows = (
        Payment.objects
        .values("resident_id")
        .annotate(first_payment=Min("payment_date"))
    )
    return {row["resident_id"]: row["first_payment"] for row in rows}


def payment_reminder_day(anchor_day, year, month):
    """Clamp the anchor day into the month (31 → 30, 31 → 28/29)."""
    days_in_month = calendar.monthrange(year, month)[1]
    return min(anchor_day, days_in_month)


def _ensure_payment_reminder(resident, today, month_start, month_end):
    if pending_reminder_exists(resident, Reminder.Type.PAYMENT, month_start, month_end):
        return False

    return insert_reminder(
        title=f"Payment Due - {resident.full_name}",
        description=f"Monthly payment due for {today:%B %Y}",
        reminder_type=Reminder.Type.PAYMENT,
        due_date=today,
        resident=resident,
    )


def generate_payment_reminders(*, today=None):
    """
    Create today's payment reminders.

    A resident is due when today's day of month equals their
    (clamped) anchor day and no pending payment reminder exists
    for them this month. Residents without payment history are
    skipped. Returns the number of reminders created.
    """
    today = today or timezone.localdate()
    anchors = earliest_payment_dates()
    residents = active_residents(id__in=list(anchors))

    days_in_month = calendar.monthrange(today.year, today.month)[1]
    month_start = today.replace(day=1)
    month_end = today.replace(day=days_in_month)

    created = 0

    for resident in residents:
        reminder_day = payment_reminder_day(
            anchors[resident.pk].day, today.year, today.month
        )
        if today.day != reminder_day:
            continue

        try:
            if _ensure_payment_reminder(resident, today, month_start, month_end):
                created += 1
                logger.info(
                    "Created payment reminder for resident %s due %s",
                    resident.pk, today
                )
        except DatabaseError:
            logger.exception(
                "Payment reminder failed for resident %s; continuing",
                resident.pk
            )

    logger.info(
        "Payment reminders (%s): %s created for %s residents with history",
        today, created, len(residents)
    )
    return created
