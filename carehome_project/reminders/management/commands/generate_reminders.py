"""
reminders/management/commands/generate_reminders.py

Scheduled command (runs once a day, see reminders/scheduler.py).

- Birthday reminders on the batch lookahead window
- Payment reminders on each resident's anchor day
- Idempotent: existing pending reminders are never duplicated
"""

from datetime import date

from django.core.exceptions import ImproperlyConfigured
from django.core.management.base import BaseCommand, CommandError
from django.db import DatabaseError
from django.utils import timezone

from reminders.services import run_scheduled_generation


class Command(BaseCommand):
    help = "Generate birthday and payment reminders for today"

    def add_arguments(self, parser):
        parser.add_argument(
            "--date",
            type=date.fromisoformat,
            help="Run as if today were this date (YYYY-MM-DD)",
        )

    def handle(self, *args, **options):
        now = timezone.now()
        today = options.get("date") or timezone.localdate()

        self.stdout.write(
            self.style.NOTICE(
                f"[{now:%Y-%m-%d %H:%M:%S}] Generating reminders for {today}"
            )
        )

        try:
            result = run_scheduled_generation(today=today)
        except (DatabaseError, ImproperlyConfigured) as exc:
            raise CommandError(f"Reminder generation failed: {exc}") from exc

        self.stdout.write(
            self.style.SUCCESS(
                f"[{now:%Y-%m-%d %H:%M:%S}] Completed: "
                f"{result['reminders_created']} reminders created"
            )
        )
