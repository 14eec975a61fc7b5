from django.contrib import admin
from django.db.models import Count, Q

from .models import Resident, Room, RoomAssignment
from .services.occupancy import occupancy_label


class RoomAssignmentInline(admin.TabularInline):
    model = RoomAssignment
    extra = 0
    autocomplete_fields = ("room",)


@admin.register(Resident)
class ResidentAdmin(admin.ModelAdmin):

    # =====================================================
    # LIST VIEW
    # =====================================================
    list_display = (
        "full_name",
        "date_of_birth",
        "phone",
        "guardian_name",
        "status",
        "created_at",
    )

    list_filter = (
        "status",
        "gender",
    )

    search_fields = (
        "full_name",
        "phone",
        "guardian_name",
    )

    ordering = ("full_name",)
    list_per_page = 25

    # =====================================================
    # FIELDSETS (DETAIL VIEW)
    # =====================================================
    fieldsets = (
        ("Identity", {
            "fields": ("full_name", "date_of_birth", "gender", "phone", "address", "photo_url"),
        }),
        ("Guardian", {
            "fields": ("guardian_name", "guardian_phone", "guardian_relationship"),
        }),
        ("Emergency Contact", {
            "fields": ("emergency_contact_name", "emergency_contact_phone"),
        }),
        ("Medical", {
            "fields": ("allergies", "chronic_illnesses", "special_medical_notes"),
        }),
        ("Status", {
            "fields": ("status", "created_at", "updated_at"),
        }),
    )

    readonly_fields = (
        "created_at",
        "updated_at",
    )

    inlines = (RoomAssignmentInline,)

    actions = ("mark_inactive",)

    @admin.action(description="Mark selected residents as INACTIVE")
    def mark_inactive(self, request, queryset):
        queryset.update(status=Resident.Status.INACTIVE)


@admin.register(Room)
class RoomAdmin(admin.ModelAdmin):
    list_display = (
        "room_number",
        "room_type",
        "max_capacity",
        "occupancy_display",
        "base_monthly_charge",
        "status",
    )

    list_filter = ("room_type", "status")
    search_fields = ("room_number",)

    def get_queryset(self, request):
        return super().get_queryset(request).annotate(
            current_occupants=Count(
                "assignments",
                filter=Q(assignments__end_date__isnull=True),
            )
        )

    def occupancy_display(self, obj):
        label = occupancy_label(obj.current_occupants, obj.max_capacity)
        return f"{obj.current_occupants} / {obj.max_capacity} ({label})"

    occupancy_display.short_description = "Occupancy"
    occupancy_display.admin_order_field = "current_occupants"
