import logging

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.core.exceptions import ImproperlyConfigured, ValidationError
from django.db import DatabaseError
from django.http import Http404, JsonResponse
from django.shortcuts import redirect, render
from django.utils import timezone
from django.views.decorators.http import require_POST

from .forms import ReminderForm
from .models import Reminder
from .services import (
    complete_reminder,
    create_reminder,
    delete_reminder,
    run_on_demand_birthday_generation,
    sweep_expired_birthday_reminders,
)

logger = logging.getLogger(__name__)

FILTER_CHOICES = [
    ("all", "All"),
    ("pending", "Pending"),
    ("completed", "Completed"),
    *Reminder.Type.choices,
]


def _filtered_reminders(current_filter):
    qs = Reminder.objects.select_related("resident").order_by("due_date", "created_at")

    if current_filter in Reminder.Status.values:
        return qs.filter(status=current_filter)

    if current_filter in Reminder.Type.values:
        return qs.filter(reminder_type=current_filter)

    return qs


@login_required
def reminder_list(request):
    """
    Reminder board.

    Expired birthday reminders are swept before every listing;
    POST creates a staff reminder.
    """
    today = timezone.localdate()

    if request.method == "POST":
        form = ReminderForm(request.POST)
        if form.is_valid():
            try:
                create_reminder(**form.cleaned_data)
            except ValidationError as exc:
                form.add_error(None, exc)
            else:
                messages.success(request, "Reminder created.")
                return redirect("reminders:list")
        messages.error(request, "Please correct the errors below.")
    else:
        form = ReminderForm()

    try:
        sweep_expired_birthday_reminders(today=today)
    except DatabaseError:
        # The board still renders; the next visit sweeps again.
        logger.exception("Expired birthday sweep failed")

    current_filter = request.GET.get("filter", "all")
    reminders = list(_filtered_reminders(current_filter))

    for reminder in reminders:
        reminder.overdue = reminder.is_overdue(today)

    return render(
        request,
        "reminders/page/reminder_list.html",
        {
            "reminders": reminders,
            "form": form,
            "current_filter": current_filter,
            "filters": FILTER_CHOICES,
            "today": today,
        }
    )


@login_required
@require_POST
def generate_birthday_reminders(request):
    try:
        result = run_on_demand_birthday_generation()
    except (DatabaseError, ImproperlyConfigured) as exc:
        logger.exception("On-demand birthday generation failed")
        messages.error(request, f"Failed to generate birthday reminders: {exc}")
        return redirect("reminders:list")

    created = result["created"]
    if created:
        messages.success(
            request,
            f"Created {created} birthday reminder(s) for the upcoming birthdays."
        )
    else:
        messages.info(request, "All upcoming birthday reminders are already created.")

    return redirect("reminders:list")


@login_required
@require_POST
def reminder_complete(request, reminder_id):
    try:
        complete_reminder(reminder_id)
    except Reminder.DoesNotExist:
        raise Http404("Reminder not found")

    messages.success(request, "The reminder has been marked as done.")
    return redirect("reminders:list")


@login_required
@require_POST
def reminder_delete(request, reminder_id):
    try:
        delete_reminder(reminder_id)
    except Reminder.DoesNotExist:
        raise Http404("Reminder not found")

    messages.success(request, "The reminder has been removed.")
    return redirect("reminders:list")


@login_required
def reminder_feed(request):
    """Pending reminders as JSON for notification badges."""
    today = timezone.localdate()

    qs = (
        Reminder.objects
        .filter(status=Reminder.Status.PENDING)
        .select_related("resident")
        .order_by("due_date")
    )

    data = [
        {
            "id": r.id,
            "title": r.title,
            "description": r.description,
            "reminder_type": r.reminder_type,
            "due_date": r.due_date.isoformat(),
            "status": r.status,
            "resident_id": r.resident_id,
            "resident_name": r.resident.full_name if r.resident else None,
            "overdue": r.is_overdue(today),
        }
        for r in qs
    ]

    return JsonResponse(data, safe=False)
