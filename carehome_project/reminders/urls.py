from django.urls import path

from .views import (
    generate_birthday_reminders,
    reminder_complete,
    reminder_delete,
    reminder_feed,
    reminder_list,
)

app_name = "reminders"

urlpatterns = [
    path("", reminder_list, name="list"),
    path("feed/", reminder_feed, name="feed"),
    path("generate-birthdays/", generate_birthday_reminders, name="generate-birthdays"),
    path("<int:reminder_id>/complete/", reminder_complete, name="complete"),
    path("<int:reminder_id>/delete/", reminder_delete, name="delete"),
]
