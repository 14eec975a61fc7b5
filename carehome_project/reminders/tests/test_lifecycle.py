from datetime import date

import pytest
from django.core.exceptions import ImproperlyConfigured, ValidationError
from django.db import IntegrityError, transaction
from django.test import override_settings

from reminders.models import Reminder
from reminders.services import (
    complete_reminder,
    create_reminder,
    delete_reminder,
    run_on_demand_birthday_generation,
    run_scheduled_generation,
)

TODAY = date(2025, 2, 12)


@pytest.fixture
def household(make_resident, make_payment):
    """Two residents: a birthday 20 days out, and payment anchored on the 12th."""
    birthday = make_resident(full_name="Kamala Iyer", date_of_birth=date(1946, 3, 4))
    payer = make_resident(full_name="Joseph D'Souza", date_of_birth=date(1939, 4, 1))
    make_payment(payer, date(2024, 8, 12))
    return birthday, payer


# ============================================================
# SCHEDULED RUN
# ============================================================

@pytest.mark.django_db
def test_scheduled_run_creates_birthday_and_payment_reminders(household):
    assert run_scheduled_generation(today=TODAY) == {"reminders_created": 2}

    assert set(Reminder.objects.values_list("reminder_type", flat=True)) == {
        Reminder.Type.BIRTHDAY,
        Reminder.Type.PAYMENT,
    }


@pytest.mark.django_db
def test_scheduled_run_twice_creates_nothing_the_second_time(household):
    run_scheduled_generation(today=TODAY)

    assert run_scheduled_generation(today=TODAY) == {"reminders_created": 0}
    assert Reminder.objects.count() == 2


@pytest.mark.django_db
def test_on_demand_run_uses_the_wider_window(household):
    # April 1st is 48 days out: outside the batch window, inside on-demand
    assert run_scheduled_generation(today=TODAY) == {"reminders_created": 2}
    assert run_on_demand_birthday_generation(today=TODAY) == {"created": 1}

    assert Reminder.objects.filter(reminder_type=Reminder.Type.BIRTHDAY).count() == 2


@pytest.mark.django_db
@override_settings(BIRTHDAY_BATCH_WINDOW_DAYS=None)
def test_missing_window_setting_is_fatal(household):
    with pytest.raises(ImproperlyConfigured):
        run_scheduled_generation(today=TODAY)


@pytest.mark.django_db
@override_settings(BIRTHDAY_ON_DEMAND_WINDOW_DAYS=-5)
def test_negative_window_setting_is_fatal(household):
    with pytest.raises(ImproperlyConfigured):
        run_on_demand_birthday_generation(today=TODAY)


# ============================================================
# STAFF ACTIONS
# ============================================================

@pytest.mark.django_db
def test_create_general_reminder_without_resident():
    reminder = create_reminder(title="Renew fire licence", due_date=date(2025, 6, 1))

    assert reminder.reminder_type == Reminder.Type.GENERAL
    assert reminder.status == Reminder.Status.PENDING
    assert reminder.resident is None
    assert reminder.period == ""


@pytest.mark.django_db
def test_create_reminder_colliding_with_pending_payment_raises_validation_error(
    make_resident, make_reminder
):
    resident = make_resident()
    make_reminder(resident=resident, due_date=date(2025, 5, 12), reminder_type=Reminder.Type.PAYMENT)

    with pytest.raises(ValidationError):
        create_reminder(
            title="Collect rent",
            due_date=date(2025, 5, 28),
            reminder_type=Reminder.Type.PAYMENT,
            resident=resident,
        )

    assert Reminder.objects.count() == 1


@pytest.mark.django_db
def test_complete_reminder_is_unconditional(make_resident, make_reminder):
    reminder = make_reminder(resident=make_resident(), due_date=date(2020, 1, 1))

    complete_reminder(reminder.pk)

    reminder.refresh_from_db()
    assert reminder.status == Reminder.Status.COMPLETED


@pytest.mark.django_db
def test_complete_touches_only_one_row(make_resident, make_reminder):
    resident = make_resident()
    target = make_reminder(resident=resident, due_date=date(2025, 3, 1))
    other = make_reminder(resident=resident, due_date=date(2025, 3, 1), reminder_type=Reminder.Type.PAYMENT)

    complete_reminder(target.pk)

    other.refresh_from_db()
    assert other.status == Reminder.Status.PENDING


@pytest.mark.django_db
def test_delete_reminder(make_reminder):
    reminder = make_reminder(reminder_type=Reminder.Type.GENERAL)

    delete_reminder(reminder.pk)

    assert not Reminder.objects.exists()


@pytest.mark.django_db
def test_missing_reminder_raises_does_not_exist():
    with pytest.raises(Reminder.DoesNotExist):
        complete_reminder(999)
    with pytest.raises(Reminder.DoesNotExist):
        delete_reminder(999)


# ============================================================
# MODEL
# ============================================================

@pytest.mark.django_db
def test_second_pending_birthday_in_same_year_is_rejected(make_resident, make_reminder):
    resident = make_resident()
    make_reminder(resident=resident, due_date=date(2025, 3, 10))

    with pytest.raises(IntegrityError):
        with transaction.atomic():
            make_reminder(resident=resident, due_date=date(2025, 12, 1))


@pytest.mark.django_db
def test_completed_and_manual_reminders_are_not_constrained(make_resident, make_reminder):
    resident = make_resident()
    first = make_reminder(resident=resident, due_date=date(2025, 3, 10))
    first.mark_complete()
    make_reminder(resident=resident, due_date=date(2025, 3, 10))

    make_reminder(resident=resident, reminder_type=Reminder.Type.DOCUMENT)
    make_reminder(resident=resident, reminder_type=Reminder.Type.DOCUMENT)

    assert Reminder.objects.count() == 4


def test_period_keys():
    assert Reminder.period_for(Reminder.Type.BIRTHDAY, date(2025, 3, 10)) == "2025"
    assert Reminder.period_for(Reminder.Type.PAYMENT, date(2025, 3, 10)) == "2025-03"
    assert Reminder.period_for(Reminder.Type.GENERAL, date(2025, 3, 10)) == ""
