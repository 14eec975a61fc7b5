import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("residents", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Reminder",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=200)),
                ("description", models.TextField(blank=True)),
                ("reminder_type", models.CharField(choices=[("birthday", "Birthday"), ("payment", "Payment Due"), ("document", "Document Expiry"), ("general", "General")], db_index=True, default="general", max_length=20)),
                ("due_date", models.DateField(db_index=True)),
                ("status", models.CharField(choices=[("pending", "Pending"), ("completed", "Completed")], db_index=True, default="pending", max_length=20)),
                ("period", models.CharField(blank=True, editable=False, max_length=7)),
                ("created_at", models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ("resident", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name="reminders", to="residents.resident")),
            ],
            options={
                "ordering": ["due_date", "created_at"],
                "indexes": [models.Index(fields=["resident", "reminder_type", "status"], name="reminder_lookup_idx")],
            },
        ),
        migrations.AddConstraint(
            model_name="reminder",
            constraint=models.UniqueConstraint(
                condition=models.Q(("status", "pending"), models.Q(("period", ""), _negated=True)),
                fields=("resident", "reminder_type", "period"),
                name="unique_pending_reminder_per_period",
            ),
        ),
    ]
