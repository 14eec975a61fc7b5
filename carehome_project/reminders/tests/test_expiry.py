from datetime import date, timedelta

import pytest
from django.test import override_settings

from reminders.models import Reminder
from reminders.services.expiry import sweep_expired_birthday_reminders

TODAY = date(2025, 3, 20)


def days_ago(n):
    return TODAY - timedelta(days=n)


@pytest.mark.django_db
def test_birthday_reminder_past_grace_is_deleted(make_resident, make_reminder):
    stale = make_reminder(resident=make_resident(), due_date=days_ago(3))

    assert sweep_expired_birthday_reminders(today=TODAY) == 1
    assert not Reminder.objects.filter(pk=stale.pk).exists()


@pytest.mark.django_db
@pytest.mark.parametrize("age", [0, 1, 2])
def test_birthday_reminder_inside_grace_is_kept(make_resident, make_reminder, age):
    make_reminder(resident=make_resident(), due_date=days_ago(age))

    assert sweep_expired_birthday_reminders(today=TODAY) == 0
    assert Reminder.objects.count() == 1


@pytest.mark.django_db
def test_other_types_and_completed_reminders_are_never_swept(make_resident, make_reminder):
    resident = make_resident()
    make_reminder(resident=resident, due_date=days_ago(10), reminder_type=Reminder.Type.PAYMENT)
    make_reminder(resident=resident, due_date=days_ago(10), reminder_type=Reminder.Type.DOCUMENT)
    make_reminder(due_date=days_ago(10), reminder_type=Reminder.Type.GENERAL)
    make_reminder(resident=resident, due_date=days_ago(30), status=Reminder.Status.COMPLETED)

    assert sweep_expired_birthday_reminders(today=TODAY) == 0
    assert Reminder.objects.count() == 4


@pytest.mark.django_db
@override_settings(BIRTHDAY_EXPIRY_GRACE_DAYS=0)
def test_grace_period_comes_from_settings(make_resident, make_reminder):
    make_reminder(resident=make_resident(), due_date=days_ago(1))

    assert sweep_expired_birthday_reminders(today=TODAY) == 1
