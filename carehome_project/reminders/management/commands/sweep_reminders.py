from datetime import date

from django.core.exceptions import ImproperlyConfigured
from django.core.management.base import BaseCommand, CommandError
from django.db import DatabaseError
from django.utils import timezone

from reminders.services import sweep_expired_birthday_reminders


class Command(BaseCommand):
    help = "Delete pending birthday reminders past their grace period"

    def add_arguments(self, parser):
        parser.add_argument(
            "--date",
            type=date.fromisoformat,
            help="Run as if today were this date (YYYY-MM-DD)",
        )

    def handle(self, *args, **options):
        today = options.get("date") or timezone.localdate()
        try:
            deleted = sweep_expired_birthday_reminders(today=today)
        except (DatabaseError, ImproperlyConfigured) as exc:
            raise CommandError(f"Reminder sweep failed: {exc}") from exc

        self.stdout.write(
            self.style.SUCCESS(f"Deleted {deleted} expired birthday reminders")
        )
