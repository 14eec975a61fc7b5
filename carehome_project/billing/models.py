from django.db import models
from django.utils import timezone

from residents.models import Resident


class Payment(models.Model):
    """
    A recorded payment.

    Payments are never edited after creation; the only later
    change is extra charges being linked to them. The earliest
    payment of a resident fixes the day of month of their
    recurring payment reminders.
    """

    class Method(models.TextChoices):
        CASH = "cash", "Cash"
        UPI = "upi", "UPI"
        BANK_TRANSFER = "bank_transfer", "Bank Transfer"

    resident = models.ForeignKey(
        Resident,
        on_delete=models.CASCADE,
        related_name="payments"
    )

    amount = models.DecimalField(max_digits=10, decimal_places=2)

    payment_date = models.DateField(db_index=True)

    payment_method = models.CharField(
        max_length=20,
        choices=Method.choices,
        default=Method.CASH
    )

    # Display label only, e.g. "March 2025"
    month_year = models.CharField(max_length=30, blank=True)

    receipt_number = models.CharField(max_length=20, unique=True)
    notes = models.TextField(blank=True)
    status = models.CharField(max_length=20, default="paid")
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["-payment_date", "-created_at"]
        indexes = [
            models.Index(fields=["resident", "payment_date"], name="payment_resident_date_idx"),
        ]

    def __str__(self):
        return f"Receipt #{self.receipt_number} ({self.resident})"


class ExtraCharge(models.Model):

    class Category(models.TextChoices):
        FOOD = "food", "Food"
        MEDICAL = "medical", "Medical"
        OTHER = "other", "Other"

    resident = models.ForeignKey(
        Resident,
        on_delete=models.CASCADE,
        related_name="extra_charges"
    )

    description = models.CharField(max_length=255)

    category = models.CharField(
        max_length=20,
        choices=Category.choices,
        default=Category.OTHER
    )

    amount = models.DecimalField(max_digits=10, decimal_places=2)
    date_charged = models.DateField(default=timezone.localdate)
    month_year = models.CharField(max_length=30)

    is_billed = models.BooleanField(default=False, db_index=True)

    payment = models.ForeignKey(
        Payment,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="extra_charges"
    )

    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "resident_extra_charges"
        ordering = ["-date_charged"]

    def __str__(self):
        return f"{self.description} ({self.amount})"
