import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Resident",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("full_name", models.CharField(max_length=200)),
                ("date_of_birth", models.DateField(blank=True, help_text="Residents without a date of birth get no birthday reminders", null=True)),
                ("gender", models.CharField(blank=True, choices=[("male", "Male"), ("female", "Female"), ("other", "Other")], max_length=10)),
                ("phone", models.CharField(blank=True, max_length=20)),
                ("address", models.TextField(blank=True)),
                ("photo_url", models.URLField(blank=True)),
                ("guardian_name", models.CharField(blank=True, max_length=200)),
                ("guardian_phone", models.CharField(blank=True, max_length=20)),
                ("guardian_relationship", models.CharField(blank=True, max_length=100)),
                ("emergency_contact_name", models.CharField(blank=True, max_length=200)),
                ("emergency_contact_phone", models.CharField(blank=True, max_length=20)),
                ("allergies", models.TextField(blank=True)),
                ("chronic_illnesses", models.TextField(blank=True)),
                ("special_medical_notes", models.TextField(blank=True)),
                ("status", models.CharField(choices=[("active", "Active"), ("inactive", "Inactive")], db_index=True, default="active", max_length=20)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["full_name"],
            },
        ),
        migrations.CreateModel(
            name="Room",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("room_number", models.CharField(max_length=20, unique=True)),
                ("room_type", models.CharField(choices=[("private", "Private"), ("sharing", "Sharing"), ("double", "Double")], default="sharing", max_length=20)),
                ("max_capacity", models.PositiveIntegerField(default=2)),
                ("base_monthly_charge", models.DecimalField(decimal_places=2, help_text="Default monthly amount billed to each occupant", max_digits=10)),
                ("included_services", models.TextField(blank=True)),
                ("status", models.CharField(default="available", max_length=20)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                "ordering": ["room_number"],
            },
        ),
        migrations.CreateModel(
            name="RoomAssignment",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("start_date", models.DateField(default=django.utils.timezone.localdate)),
                ("end_date", models.DateField(blank=True, null=True)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("resident", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="room_assignments", to="residents.resident")),
                ("room", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="assignments", to="residents.room")),
            ],
            options={
                "ordering": ["-start_date"],
                "indexes": [models.Index(fields=["room", "end_date"], name="room_assignment_open_idx")],
            },
        ),
    ]
