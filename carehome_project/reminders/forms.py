from django import forms

from residents.models import Resident
from .models import Reminder


class ReminderForm(forms.ModelForm):

    class Meta:
        model = Reminder
        fields = [
            "title",
            "description",
            "reminder_type",
            "due_date",
            "resident",
        ]
        widgets = {
            "due_date": forms.DateInput(attrs={"type": "date"}),
            "description": forms.Textarea(attrs={"rows": 3}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields["resident"].queryset = (
            Resident.objects
            .filter(status=Resident.Status.ACTIVE)
            .order_by("full_name")
        )
        self.fields["resident"].required = False

    def clean_title(self):
        title = self.cleaned_data["title"].strip()
        if not title:
            raise forms.ValidationError("Title is required.")
        return title
