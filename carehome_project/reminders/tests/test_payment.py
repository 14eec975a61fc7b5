from datetime import date
from unittest import mock

import pytest
from django.db import DatabaseError

from reminders.models import Reminder
from reminders.services.common import pending_reminder_exists
from reminders.services.payment import (
    earliest_payment_dates,
    generate_payment_reminders,
    payment_reminder_day,
)


@pytest.mark.parametrize(
    "anchor_day, year, month, expected",
    [
        (15, 2025, 3, 15),
        (31, 2025, 4, 30),
        (31, 2025, 2, 28),
        (31, 2024, 2, 29),
        (30, 2024, 2, 29),
    ],
)
def test_payment_reminder_day_clamps_to_month_length(anchor_day, year, month, expected):
    assert payment_reminder_day(anchor_day, year, month) == expected


@pytest.mark.django_db
def test_earliest_payment_fixes_the_anchor(make_resident, make_payment):
    resident = make_resident()
    make_payment(resident, date(2024, 6, 20))
    make_payment(resident, date(2024, 5, 12))
    make_payment(resident, date(2024, 7, 3))

    assert earliest_payment_dates() == {resident.pk: date(2024, 5, 12)}


@pytest.mark.django_db
def test_reminder_created_on_anchor_day(make_resident, make_payment):
    resident = make_resident(full_name="Asha Rao")
    make_payment(resident, date(2024, 5, 12))
    make_payment(resident, date(2024, 6, 3))

    assert generate_payment_reminders(today=date(2025, 3, 11)) == 0
    assert generate_payment_reminders(today=date(2025, 3, 12)) == 1

    reminder = Reminder.objects.get()
    assert reminder.title == "Payment Due - Asha Rao"
    assert reminder.description == "Monthly payment due for March 2025"
    assert reminder.reminder_type == Reminder.Type.PAYMENT
    assert reminder.due_date == date(2025, 3, 12)
    assert reminder.resident == resident
    assert reminder.period == "2025-03"


@pytest.mark.django_db
@pytest.mark.parametrize(
    "today, expected",
    [
        (date(2025, 4, 30), 1),
        (date(2025, 4, 29), 0),
        (date(2025, 2, 28), 1),
        (date(2024, 2, 28), 0),
        (date(2024, 2, 29), 1),
        (date(2025, 5, 31), 1),
    ],
)
def test_anchor_on_31st_is_clamped(make_resident, make_payment, today, expected):
    resident = make_resident()
    make_payment(resident, date(2023, 12, 31))

    assert generate_payment_reminders(today=today) == expected
    if expected:
        assert Reminder.objects.get().due_date == today


@pytest.mark.django_db
def test_no_duplicate_when_pending_reminder_exists_this_month(
    make_resident, make_payment, make_reminder
):
    resident = make_resident()
    make_payment(resident, date(2024, 5, 12))
    make_reminder(
        resident=resident,
        due_date=date(2025, 3, 2),
        reminder_type=Reminder.Type.PAYMENT,
    )

    assert generate_payment_reminders(today=date(2025, 3, 12)) == 0
    assert Reminder.objects.count() == 1


@pytest.mark.django_db
def test_rerun_on_anchor_day_is_idempotent(make_resident, make_payment):
    resident = make_resident()
    make_payment(resident, date(2024, 5, 12))

    assert generate_payment_reminders(today=date(2025, 3, 12)) == 1
    assert generate_payment_reminders(today=date(2025, 3, 12)) == 0


@pytest.mark.django_db
def test_last_months_reminder_does_not_block_this_month(
    make_resident, make_payment, make_reminder
):
    resident = make_resident()
    make_payment(resident, date(2024, 5, 12))
    make_reminder(
        resident=resident,
        due_date=date(2025, 2, 12),
        reminder_type=Reminder.Type.PAYMENT,
    )

    assert generate_payment_reminders(today=date(2025, 3, 12)) == 1


@pytest.mark.django_db
def test_residents_without_history_or_inactive_are_skipped(make_resident, make_payment):
    make_resident(full_name="New Arrival")
    moved_out = make_resident(full_name="Moved Out", status="inactive")
    make_payment(moved_out, date(2024, 5, 12))

    assert generate_payment_reminders(today=date(2025, 3, 12)) == 0
    assert not Reminder.objects.exists()


@pytest.mark.django_db
def test_failure_for_one_resident_does_not_stop_the_others(make_resident, make_payment):
    residents = [make_resident(full_name=name) for name in ("First", "Second", "Third")]
    for resident in residents:
        make_payment(resident, date(2024, 5, 12))

    failing = residents[1]

    def flaky_exists(resident, *args, **kwargs):
        if resident.pk == failing.pk:
            raise DatabaseError("connection reset")
        return pending_reminder_exists(resident, *args, **kwargs)

    with mock.patch(
        "reminders.services.payment.pending_reminder_exists",
        side_effect=flaky_exists,
    ):
        created = generate_payment_reminders(today=date(2025, 3, 12))

    assert created == 2
    assert set(Reminder.objects.values_list("resident_id", flat=True)) == {
        residents[0].pk, residents[2].pk
    }
