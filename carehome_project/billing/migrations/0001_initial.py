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
            name="Payment",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("amount", models.DecimalField(decimal_places=2, max_digits=10)),
                ("payment_date", models.DateField(db_index=True)),
                ("payment_method", models.CharField(choices=[("cash", "Cash"), ("upi", "UPI"), ("bank_transfer", "Bank Transfer")], default="cash", max_length=20)),
                ("month_year", models.CharField(blank=True, max_length=30)),
                ("receipt_number", models.CharField(max_length=20, unique=True)),
                ("notes", models.TextField(blank=True)),
                ("status", models.CharField(default="paid", max_length=20)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("resident", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="payments", to="residents.resident")),
            ],
            options={
                "ordering": ["-payment_date", "-created_at"],
                "indexes": [models.Index(fields=["resident", "payment_date"], name="payment_resident_date_idx")],
            },
        ),
        migrations.CreateModel(
            name="ExtraCharge",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("description", models.CharField(max_length=255)),
                ("category", models.CharField(choices=[("food", "Food"), ("medical", "Medical"), ("other", "Other")], default="other", max_length=20)),
                ("amount", models.DecimalField(decimal_places=2, max_digits=10)),
                ("date_charged", models.DateField(default=django.utils.timezone.localdate)),
                ("month_year", models.CharField(max_length=30)),
                ("is_billed", models.BooleanField(db_index=True, default=False)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("payment", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="extra_charges", to="billing.payment")),
                ("resident", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="extra_charges", to="residents.resident")),
            ],
            options={
                "db_table": "resident_extra_charges",
                "ordering": ["-date_charged"],
            },
        ),
    ]
