from django.contrib import admin
from django.utils.html import format_html

from .models import Reminder


@admin.register(Reminder)
class ReminderAdmin(admin.ModelAdmin):
    """
    Admin configuration for reminders
    """

    # =====================================================
    # LIST VIEW
    # =====================================================
    list_display = (
        "id",
        "colored_title",
        "reminder_type",
        "resident",
        "due_date",
        "status",
        "created_at",
    )

    list_filter = (
        "reminder_type",
        "status",
        "due_date",
    )

    search_fields = (
        "title",
        "description",
        "resident__full_name",
    )

    ordering = ("due_date",)
    list_per_page = 25

    # =====================================================
    # FIELDSETS (DETAIL VIEW)
    # =====================================================
    fieldsets = (
        ("Content", {
            "fields": ("title", "description"),
        }),
        ("Classification", {
            "fields": ("reminder_type", "resident", "due_date"),
        }),
        ("Status", {
            "fields": ("status", "period", "created_at"),
        }),
    )

    readonly_fields = (
        "period",
        "created_at",
    )

    actions = ("mark_completed",)

    def get_readonly_fields(self, request, obj=None):
        # Completed reminders never go back to pending
        if obj is not None and not obj.is_pending:
            return self.readonly_fields + ("status",)
        return self.readonly_fields

    def colored_title(self, obj):
        color_map = {
            Reminder.Type.BIRTHDAY: "#db2777",   # pink
            Reminder.Type.PAYMENT: "#16a34a",    # green
            Reminder.Type.DOCUMENT: "#2563eb",   # blue
            Reminder.Type.GENERAL: "#6b7280",    # gray
        }

        return format_html(
            '<span style="color:{}; font-weight:600;">{}</span>',
            color_map.get(obj.reminder_type, "#000000"),
            obj.title,
        )

    colored_title.short_description = "Title"

    @admin.action(description="Mark selected reminders as COMPLETED")
    def mark_completed(self, request, queryset):
        queryset.update(status=Reminder.Status.COMPLETED)
