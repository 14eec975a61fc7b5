import itertools
from datetime import date
from decimal import Decimal

import pytest

from billing.models import ExtraCharge, Payment
from reminders.models import Reminder
from residents.models import Resident, Room, RoomAssignment

_receipts = itertools.count(1)


@pytest.fixture
def make_resident(db):
    def _make(full_name="Asha Rao", date_of_birth=None, status=Resident.Status.ACTIVE, **extra):
        return Resident.objects.create(
            full_name=full_name,
            date_of_birth=date_of_birth,
            status=status,
            **extra
        )
    return _make


@pytest.fixture
def make_payment(db):
    def _make(resident, payment_date, amount=Decimal("15000.00"), receipt_number=None, **extra):
        return Payment.objects.create(
            resident=resident,
            amount=amount,
            payment_date=payment_date,
            receipt_number=receipt_number or f"TEST{next(_receipts):06d}",
            **extra
        )
    return _make


@pytest.fixture
def make_reminder(db):
    def _make(resident=None, due_date=date(2025, 3, 10), reminder_type=Reminder.Type.BIRTHDAY,
              status=Reminder.Status.PENDING, title="Reminder"):
        return Reminder.objects.create(
            title=title,
            resident=resident,
            due_date=due_date,
            reminder_type=reminder_type,
            status=status,
        )
    return _make


@pytest.fixture
def make_room(db):
    def _make(room_number="101", max_capacity=2, base_monthly_charge=Decimal("15000.00"), **extra):
        return Room.objects.create(
            room_number=room_number,
            max_capacity=max_capacity,
            base_monthly_charge=base_monthly_charge,
            **extra
        )
    return _make


@pytest.fixture
def assign_room(db):
    def _assign(resident, room, start_date=date(2024, 1, 1), end_date=None):
        return RoomAssignment.objects.create(
            resident=resident,
            room=room,
            start_date=start_date,
            end_date=end_date,
        )
    return _assign


@pytest.fixture
def make_charge(db):
    def _make(resident, amount, description="Physiotherapy", is_billed=False, **extra):
        return ExtraCharge.objects.create(
            resident=resident,
            amount=Decimal(amount),
            description=description,
            month_year="March 2025",
            is_billed=is_billed,
            **extra
        )
    return _make


@pytest.fixture
def staff_client(client, django_user_model):
    user = django_user_model.objects.create_user(
        username="warden",
        password="not-a-real-password",
        login_role="admin",
    )
    client.force_login(user)
    return client
