from django.db import models
from django.utils import timezone


class Resident(models.Model):
    """
    A person living at the facility.

    Residents are soft-removed by switching status to inactive;
    a hard delete cascades to payments, charges, room history and
    reminders.
    """

    class Status(models.TextChoices):
        ACTIVE = "active", "Active"
        INACTIVE = "inactive", "Inactive"

    class Gender(models.TextChoices):
        MALE = "male", "Male"
        FEMALE = "female", "Female"
        OTHER = "other", "Other"

    # =====================================================
    # IDENTITY
    # =====================================================
    full_name = models.CharField(max_length=200)

    date_of_birth = models.DateField(
        null=True,
        blank=True,
        help_text="Residents without a date of birth get no birthday reminders"
    )

    gender = models.CharField(
        max_length=10,
        choices=Gender.choices,
        blank=True
    )

    phone = models.CharField(max_length=20, blank=True)
    address = models.TextField(blank=True)
    photo_url = models.URLField(blank=True)

    # =====================================================
    # GUARDIAN / EMERGENCY CONTACT
    # =====================================================
    guardian_name = models.CharField(max_length=200, blank=True)
    guardian_phone = models.CharField(max_length=20, blank=True)
    guardian_relationship = models.CharField(max_length=100, blank=True)

    emergency_contact_name = models.CharField(max_length=200, blank=True)
    emergency_contact_phone = models.CharField(max_length=20, blank=True)

    # =====================================================
    # MEDICAL
    # =====================================================
    allergies = models.TextField(blank=True)
    chronic_illnesses = models.TextField(blank=True)
    special_medical_notes = models.TextField(blank=True)

    # =====================================================
    # STATE
    # =====================================================
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.ACTIVE,
        db_index=True
    )

    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["full_name"]

    def __str__(self):
        return self.full_name

    @property
    def is_active(self):
        return self.status == self.Status.ACTIVE


class Room(models.Model):

    class RoomType(models.TextChoices):
        PRIVATE = "private", "Private"
        SHARING = "sharing", "Sharing"
        DOUBLE = "double", "Double"

    room_number = models.CharField(max_length=20, unique=True)

    room_type = models.CharField(
        max_length=20,
        choices=RoomType.choices,
        default=RoomType.SHARING
    )

    max_capacity = models.PositiveIntegerField(default=2)

    base_monthly_charge = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        help_text="Default monthly amount billed to each occupant"
    )

    included_services = models.TextField(blank=True)
    status = models.CharField(max_length=20, default="available")
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["room_number"]

    def __str__(self):
        return f"Room {self.room_number}"


class RoomAssignment(models.Model):
    """
    A resident's stay in a room. `end_date` stays empty while
    the resident still occupies the room.
    """

    resident = models.ForeignKey(
        Resident,
        on_delete=models.CASCADE,
        related_name="room_assignments"
    )

    room = models.ForeignKey(
        Room,
        on_delete=models.CASCADE,
        related_name="assignments"
    )

    start_date = models.DateField(default=timezone.localdate)
    end_date = models.DateField(null=True, blank=True)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["-start_date"]
        indexes = [
            models.Index(fields=["room", "end_date"], name="room_assignment_open_idx"),
        ]

    def __str__(self):
        return f"{self.resident} → {self.room}"
