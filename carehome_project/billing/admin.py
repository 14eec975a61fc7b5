from django.contrib import admin
from django.urls import reverse
from django.utils.html import format_html

from .models import ExtraCharge, Payment
from .services.totals import generate_receipt_number


class ExtraChargeInline(admin.TabularInline):
    model = ExtraCharge
    extra = 0
    fields = ("description", "category", "amount", "date_charged")
    readonly_fields = fields
    can_delete = False


@admin.register(Payment)
class PaymentAdmin(admin.ModelAdmin):
    list_display = (
        "receipt_number",
        "resident",
        "amount",
        "payment_date",
        "payment_method",
        "month_year",
        "receipt_link",
    )

    list_filter = ("payment_method", "month_year")
    search_fields = ("receipt_number", "resident__full_name")
    ordering = ("-payment_date",)
    list_per_page = 25

    readonly_fields = ("receipt_number", "created_at")
    inlines = (ExtraChargeInline,)

    def save_model(self, request, obj, form, change):
        if not obj.receipt_number:
            obj.receipt_number = generate_receipt_number(obj.payment_date)
        super().save_model(request, obj, form, change)

    def receipt_link(self, obj):
        return format_html(
            '<a href="{}">PDF</a>',
            reverse("billing:receipt", args=[obj.pk]),
        )

    receipt_link.short_description = "Receipt"


@admin.register(ExtraCharge)
class ExtraChargeAdmin(admin.ModelAdmin):
    list_display = (
        "description",
        "resident",
        "category",
        "amount",
        "date_charged",
        "month_year",
        "is_billed",
    )

    list_filter = ("category", "is_billed", "month_year")
    search_fields = ("description", "resident__full_name")
    readonly_fields = ("payment", "created_at", "updated_at")
