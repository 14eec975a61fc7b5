from django.core.exceptions import ValidationError
from django.db import models
from django.db.models import Q
from django.utils import timezone

from residents.models import Resident


class Reminder(models.Model):
    """
    A dated to-do shown on the reminder board.

    Birthday and payment reminders are generated by the reminder
    services; document and general reminders are entered by staff.
    Status only ever moves from pending to completed.
    """

    # =====================================================
    # TYPE
    # =====================================================
    class Type(models.TextChoices):
        BIRTHDAY = "birthday", "Birthday"
        PAYMENT = "payment", "Payment Due"
        DOCUMENT = "document", "Document Expiry"
        GENERAL = "general", "General"

    # =====================================================
    # STATUS
    # =====================================================
    class Status(models.TextChoices):
        PENDING = "pending", "Pending"
        COMPLETED = "completed", "Completed"

    # =====================================================
    # CONTENT
    # =====================================================
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)

    reminder_type = models.CharField(
        max_length=20,
        choices=Type.choices,
        default=Type.GENERAL,
        db_index=True
    )

    due_date = models.DateField(db_index=True)

    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.PENDING,
        db_index=True
    )

    resident = models.ForeignKey(
        Resident,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="reminders"
    )

    # Dedup key: "YYYY" for birthdays, "YYYY-MM" for payments,
    # empty for staff-entered reminders. Derived from due_date on save.
    period = models.CharField(max_length=7, blank=True, editable=False)

    created_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        ordering = ["due_date", "created_at"]
        indexes = [
            models.Index(fields=["resident", "reminder_type", "status"], name="reminder_lookup_idx"),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=["resident", "reminder_type", "period"],
                condition=Q(status="pending") & ~Q(period=""),
                name="unique_pending_reminder_per_period",
            ),
        ]

    def __str__(self):
        return f"{self.get_reminder_type_display()} | {self.title} | {self.due_date}"

    # =====================================================
    # PERIOD KEY
    # =====================================================
    @classmethod
    def period_for(cls, reminder_type, due_date):
        if reminder_type == cls.Type.BIRTHDAY:
            return f"{due_date:%Y}"
        if reminder_type == cls.Type.PAYMENT:
            return f"{due_date:%Y-%m}"
        return ""

    def clean(self):
        super().clean()
        if self.due_date is None or not self.is_pending or self.resident_id is None:
            return

        period = self.period_for(self.reminder_type, self.due_date)
        if not period:
            return

        duplicates = Reminder.objects.filter(
            resident_id=self.resident_id,
            reminder_type=self.reminder_type,
            status=self.Status.PENDING,
            period=period,
        )
        if self.pk is not None:
            duplicates = duplicates.exclude(pk=self.pk)

        if duplicates.exists():
            raise ValidationError({
                "due_date": (
                    f"A pending {self.get_reminder_type_display().lower()} reminder "
                    f"already exists for this resident in {period}."
                ),
            })

    def save(self, *args, **kwargs):
        self.period = self.period_for(self.reminder_type, self.due_date)
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "period" not in update_fields:
            kwargs["update_fields"] = [*update_fields, "period"]
        super().save(*args, **kwargs)

    # =====================================================
    # INSTANCE HELPERS
    # =====================================================
    @property
    def is_pending(self):
        return self.status == self.Status.PENDING

    def is_overdue(self, today=None):
        today = today or timezone.localdate()
        return self.is_pending and self.due_date < today

    def mark_complete(self):
        self.status = self.Status.COMPLETED
        self.save(update_fields=["status"])
