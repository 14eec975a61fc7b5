import logging
import random
from dataclasses import dataclass, field
from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils import timezone

from billing.models import ExtraCharge, Payment
from residents.services.occupancy import current_room

logger = logging.getLogger(__name__)


@dataclass
class PaymentTotals:
    base_amount: Decimal
    extra_charges: list = field(default_factory=list)

    @property
    def extras_total(self):
        return sum((charge.amount for charge in self.extra_charges), Decimal("0"))

    @property
    def total(self):
        return self.base_amount + self.extras_total


def default_base_amount(resident):
    """Base monthly charge of the resident's current room, or zero."""
    room = current_room(resident)
    if room is None:
        return Decimal("0")
    return room.base_monthly_charge


def unbilled_charges(resident):
    return (
        ExtraCharge.objects
        .filter(resident=resident, is_billed=False)
        .order_by("date_charged", "id")
    )


def calculate_payment_total(resident, base_amount):
    return PaymentTotals(
        base_amount=Decimal(base_amount),
        extra_charges=list(unbilled_charges(resident)),
    )


def generate_receipt_number(on_date=None):
    """
    RCP<yy><mm><4 random digits>, retried until unused.
    """
    on_date = on_date or timezone.localdate()
    prefix = f"RCP{on_date:%y%m}"

    while True:
        candidate = f"{prefix}{random.randint(0, 9999):04d}"
        if not Payment.objects.filter(receipt_number=candidate).exists():
            return candidate


@transaction.atomic
def record_payment(
    *,
    resident,
    base_amount,
    payment_date=None,
    payment_method=Payment.Method.CASH,
    month_year="",
    notes="",
    include_extra_charges=True,
):
    """
    Record a payment and bill the resident's pending extra charges.

    The stored amount is the grand total. Every included charge is
    linked to the new payment and flagged billed in the same
    transaction.
    """
    if not resident.is_active:
        raise ValidationError("Payments can only be recorded for active residents.")

    base_amount = Decimal(base_amount)
    if base_amount <= 0:
        raise ValidationError("Base amount must be greater than zero.")

    payment_date = payment_date or timezone.localdate()

    if include_extra_charges:
        totals = calculate_payment_total(resident, base_amount)
    else:
        totals = PaymentTotals(base_amount=base_amount)

    payment = Payment.objects.create(
        resident=resident,
        amount=totals.total,
        payment_date=payment_date,
        payment_method=payment_method,
        month_year=month_year or f"{payment_date:%B %Y}",
        receipt_number=generate_receipt_number(payment_date),
        notes=notes,
    )

    if totals.extra_charges:
        ExtraCharge.objects.filter(
            pk__in=[charge.pk for charge in totals.extra_charges]
        ).update(is_billed=True, payment=payment)

    logger.info(
        "Recorded payment %s for resident %s: base=%s extras=%s total=%s",
        payment.receipt_number,
        resident.pk,
        totals.base_amount,
        totals.extras_total,
        totals.total,
    )

    return payment
