"""
Reminder service layer.

Reminder logic is:
- service-layer only
- date-based (today is always injectable)
- deduplicated per resident and period
- best-effort per resident, fatal on store or config failure
"""

# =====================================================
# GENERATORS
# =====================================================
from .birthday import (
    generate_birthday_reminders,
    next_birthday,
)
from .payment import (
    earliest_payment_dates,
    generate_payment_reminders,
    payment_reminder_day,
)

# =====================================================
# EXPIRY
# =====================================================
from .expiry import (
    sweep_expired_birthday_reminders,
)

# =====================================================
# LIFECYCLE / ENTRY POINTS
# =====================================================
from .lifecycle import (
    complete_reminder,
    create_reminder,
    delete_reminder,
    run_on_demand_birthday_generation,
    run_scheduled_generation,
)

__all__ = [
    # Generators
    "generate_birthday_reminders",
    "next_birthday",
    "earliest_payment_dates",
    "generate_payment_reminders",
    "payment_reminder_day",

    # Expiry
    "sweep_expired_birthday_reminders",

    # Lifecycle
    "complete_reminder",
    "create_reminder",
    "delete_reminder",
    "run_on_demand_birthday_generation",
    "run_scheduled_generation",
]
